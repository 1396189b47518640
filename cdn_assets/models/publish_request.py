from pathlib import Path

from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class PublishRequest:
    local_directory: Path
    tag: str | None = None
    commit_message: str | None = None
    purge: bool = False
    dry_run: bool = False
    minify: bool = False
