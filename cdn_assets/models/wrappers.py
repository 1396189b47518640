from pydantic import ConfigDict
from pydantic.dataclasses import dataclass


@dataclass(frozen=True, config=ConfigDict(extra="forbid"))
class SettingsFile:
    account: str | None = None
    repository: str | None = None
    branch: str | None = None
    token: str | None = None
    assets_dir: str | None = None
    work_dir: str | None = None
