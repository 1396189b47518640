from .asset_file import AssetFile
from .asset_reference import AssetReference
from .purge_summary import PurgeSummary
from .publish_request import PublishRequest
from .release_request import ReleaseRequest
from .settings import Settings
from .visibility import RepositoryVisibility, VisibilityCheck
from .wrappers import SettingsFile

__all__ = [
    "AssetFile",
    "AssetReference",
    "PurgeSummary",
    "PublishRequest",
    "ReleaseRequest",
    "RepositoryVisibility",
    "Settings",
    "SettingsFile",
    "VisibilityCheck",
]
