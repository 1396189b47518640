import os
from pathlib import Path

from cdn_assets.models import AssetFile

PLACEHOLDER_FILES = frozenset({".gitkeep"})


class AssetRepository:
    def __init__(self, assets_dir: str | Path):
        self.assets_dir: Path = Path(assets_dir)

    def exists(self) -> bool:
        return self.assets_dir.is_dir()

    def find_all(self) -> list[AssetFile]:
        if not self.exists():
            return []
        assets = []
        for root, _, files in os.walk(self.assets_dir):
            for name in files:
                if name in PLACEHOLDER_FILES:
                    continue
                path = Path(root) / name
                if not path.is_file():
                    continue
                assets.append(AssetFile(
                    path=path.relative_to(self.assets_dir).as_posix(),
                    size=path.stat().st_size,
                ))
        return sorted(assets, key=lambda a: a.path)


def total_size(assets: list[AssetFile]) -> int:
    return sum(asset.size for asset in assets)
