from pydantic import field_validator
from pydantic.dataclasses import dataclass

from cdn_assets.utils.cdn_urls import DEFAULT_REFERENCE, build_asset_url, build_purge_url


@dataclass(frozen=True)
class AssetReference:
    account: str
    repository: str
    asset_path: str
    reference: str = DEFAULT_REFERENCE

    @field_validator("reference", mode="before")
    @classmethod
    def default_reference(cls, value: str | None) -> str:
        return value or DEFAULT_REFERENCE

    def cdn_url(self, minify: bool = False) -> str:
        return build_asset_url(self.account, self.repository, self.asset_path, self.reference, minify)

    def purge_url(self) -> str:
        return build_purge_url(self.account, self.repository, self.asset_path, self.reference)
