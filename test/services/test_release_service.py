from unittest.mock import MagicMock, call

import pytest
from rich.console import Console
from cdn_assets.errors import ConfigurationError, OperationAborted, TagExistsError
from cdn_assets.models import ReleaseRequest, Settings
from cdn_assets.services.release_service import ReleaseService


@pytest.fixture
def settings(tmp_path):
    assets = tmp_path / "assets"
    (assets / "css").mkdir(parents=True)
    (assets / "css" / "example.css").write_text("body{}")
    (assets / "data").mkdir()
    (assets / "data" / "manifest.json").write_text("{}")
    return Settings(account="acme", repository="cdn-assets", work_dir=str(tmp_path))


@pytest.fixture
def git():
    git = MagicMock()
    git.is_available.return_value = True
    git.is_repository.return_value = True
    git.tag_exists.return_value = False
    git.has_uncommitted_changes.return_value = False
    return git


@pytest.fixture
def console():
    return Console(record=True, width=200, force_terminal=False)


@pytest.fixture
def make_service(settings, git, console):
    def factory(version="v1.0.1", message=None, dry_run=False, confirm=None):
        request = ReleaseRequest(version=version, message=message, dry_run=dry_run)
        svc = ReleaseService(settings, request, console=console, confirm=confirm or MagicMock(return_value=True), git=git)
        svc.logger = MagicMock()
        return svc
    return factory


def test_release_creates_and_pushes_tag(make_service, git, console):
    make_service().run()

    git.create_tag.assert_called_once_with("v1.0.1", "Release v1.0.1")
    assert git.push.call_args_list == [call("origin", "v1.0.1"), call("origin", "main")]
    git.commit.assert_not_called()
    text = console.export_text()
    assert "https://cdn.jsdelivr.net/gh/acme/cdn-assets@v1.0.1/assets/css/example.css" in text
    assert "https://cdn.jsdelivr.net/gh/acme/cdn-assets@v1.0.1/assets/data/manifest.json" in text
    assert "https://github.com/acme/cdn-assets/releases/tag/v1.0.1" in text
    assert "CHANGELOG.md" in text


def test_custom_message(make_service, git):
    make_service(message="Major release").run()
    git.create_tag.assert_called_once_with("v1.0.1", "Major release")


def test_existing_tag_is_rejected(make_service, git):
    git.tag_exists.return_value = True
    with pytest.raises(TagExistsError, match="Tag 'v1.0.1' already exists"):
        make_service().run()
    git.create_tag.assert_not_called()
    git.push.assert_not_called()


def test_non_semver_version_declined(make_service, git, console):
    confirm = MagicMock(return_value=False)
    with pytest.raises(OperationAborted):
        make_service(version="release-1", confirm=confirm).run()
    confirm.assert_called_once_with("Continue anyway?", False)
    git.create_tag.assert_not_called()
    assert "doesn't follow semver format" in console.export_text()


def test_non_semver_version_accepted(make_service, git):
    make_service(version="1.0").run()
    git.create_tag.assert_called_once_with("1.0", "Release 1.0")


def test_uncommitted_changes_are_committed(make_service, git, console):
    git.has_uncommitted_changes.return_value = True
    git.status_short.return_value = " M assets/css/example.css"
    confirm = MagicMock(return_value=True)
    make_service(confirm=confirm).run()

    confirm.assert_called_once_with("Commit these changes before release?", True)
    git.stage_all.assert_called_once()
    git.commit.assert_called_once_with("chore: prepare for v1.0.1 release")
    assert "M assets/css/example.css" in console.export_text()


def test_uncommitted_changes_left_alone(make_service, git):
    git.has_uncommitted_changes.return_value = True
    git.status_short.return_value = " M x"
    make_service(confirm=MagicMock(return_value=False)).run()
    git.commit.assert_not_called()
    git.create_tag.assert_called_once()


def test_dry_run(make_service, git, console):
    git.has_uncommitted_changes.return_value = True
    git.status_short.return_value = " M x"
    make_service(dry_run=True).run()

    git.commit.assert_not_called()
    git.create_tag.assert_not_called()
    git.push.assert_not_called()
    text = console.export_text()
    assert "[DRY-RUN] Would commit with message: chore: prepare for v1.0.1 release" in text
    assert "[DRY-RUN] Would create tag v1.0.1" in text


def test_missing_repository_settings(git, console, tmp_path):
    settings = Settings(account="acme", repository="", work_dir=str(tmp_path))
    service = ReleaseService(settings, ReleaseRequest(version="v1.0.0"), console=console, confirm=MagicMock(), git=git)
    with pytest.raises(ConfigurationError, match="CDN_GITHUB_REPO"):
        service.run()


def test_outside_repository(make_service, git):
    git.is_repository.return_value = False
    with pytest.raises(ConfigurationError, match="Not a git repository"):
        make_service().run()


def test_existing_tag_is_rejected_before_committing(make_service, git):
    git.tag_exists.return_value = True
    git.has_uncommitted_changes.return_value = True
    git.status_short.return_value = " M assets/css/example.css"
    with pytest.raises(TagExistsError):
        make_service().run()
    git.stage_all.assert_not_called()
    git.commit.assert_not_called()
    git.create_tag.assert_not_called()
