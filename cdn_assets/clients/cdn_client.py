import logging

import requests

logger = logging.getLogger(__name__)


class CdnClient:
    def __init__(self, timeout: float = 10):
        self.timeout: float = timeout

    def purge(self, url: str) -> bool:
        try:
            response = requests.get(url=url, timeout=self.timeout)
            if response.status_code != 200:
                logger.warning(f"Purge of {url} returned status code {response.status_code}")
            return response.status_code == 200
        except Exception as e:
            logger.error(f"Error purging {url}: {e}")
            return False
