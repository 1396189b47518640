import pytest
import requests
from cdn_assets.clients.cdn_client import CdnClient

PURGE_URL = "https://purge.jsdelivr.net/gh/acme/assets@main/assets/js/app.js"


class DummyResponse:
    def __init__(self, status_code):
        self.status_code = status_code


@pytest.fixture
def client():
    return CdnClient(timeout=1)


@pytest.mark.parametrize("status,purged", [(200, True), (403, False), (500, False)])
def test_purge(monkeypatch, client, status, purged):
    monkeypatch.setattr(requests, "get", lambda url, timeout: DummyResponse(status))
    assert client.purge(PURGE_URL) is purged


def test_purge_error(monkeypatch, client):
    monkeypatch.setattr(requests, "get", lambda url, timeout: (_ for _ in ()).throw(requests.ConnectionError("down")))
    assert client.purge(PURGE_URL) is False
