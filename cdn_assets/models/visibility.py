from enum import Enum

from pydantic.dataclasses import dataclass


class RepositoryVisibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    NOT_FOUND = "not_found"  # private repositories look the same to anonymous callers
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class VisibilityCheck:
    visibility: RepositoryVisibility
    status_code: int
