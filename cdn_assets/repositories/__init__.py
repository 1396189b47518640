from .asset_repository import AssetRepository, total_size
from .settings_repository import SettingsRepository

__all__ = [
    'AssetRepository',
    'SettingsRepository',
    'total_size',
]
