from cdn_assets.clients.git_client import GitClient
from cdn_assets.errors import ConfigurationError, TagExistsError
from cdn_assets.models import Settings

PLACEHOLDER_ACCOUNT = "YOUR_GITHUB_USERNAME"


def require_git(git: GitClient) -> None:
    if not git.is_available():
        raise ConfigurationError("Missing required tools: git")


def require_repository_settings(settings: Settings) -> None:
    if not settings.account or settings.account == PLACEHOLDER_ACCOUNT:
        raise ConfigurationError(
            "Please set your GitHub username in cdn.yaml or via the CDN_GITHUB_USER environment variable"
        )
    if not settings.repository:
        raise ConfigurationError(
            "Please set the repository name in cdn.yaml or via the CDN_GITHUB_REPO environment variable"
        )


def require_new_tag(git: GitClient, tag: str) -> None:
    if git.is_repository() and git.tag_exists(tag):
        raise TagExistsError(tag)
