from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class PurgeSummary:
    purged: int = 0
    failed: int = 0
