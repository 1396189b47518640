import logging

import requests
from github import Auth, Github, GithubException, UnknownObjectException

from cdn_assets.models import RepositoryVisibility, VisibilityCheck

logger = logging.getLogger(__name__)


class GitHubClient:
    def __init__(self, token: str | None = None, timeout: int = 10):
        # anonymous by default, which is how jsDelivr sees the repository
        auth = Auth.Token(token) if token else None
        # a single probe: no retries, no waiting out rate limits
        self.client: Github = Github(auth=auth, retry=None, timeout=timeout)

    def check_visibility(self, full_name: str) -> VisibilityCheck:
        try:
            repo = self.client.get_repo(full_name)
        except UnknownObjectException:
            return VisibilityCheck(visibility=RepositoryVisibility.NOT_FOUND, status_code=404)
        except GithubException as e:
            logger.warning(f"Unexpected response checking {full_name}: HTTP {e.status}")
            return VisibilityCheck(visibility=RepositoryVisibility.UNKNOWN, status_code=e.status or 0)
        except requests.RequestException as e:
            logger.error(f"Error checking visibility of {full_name}: {e}")
            return VisibilityCheck(visibility=RepositoryVisibility.UNKNOWN, status_code=0)
        if repo.private:
            return VisibilityCheck(visibility=RepositoryVisibility.PRIVATE, status_code=200)
        return VisibilityCheck(visibility=RepositoryVisibility.PUBLIC, status_code=200)
