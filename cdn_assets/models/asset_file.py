from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class AssetFile:
    path: str  # relative to the assets directory, forward slashes
    size: int
