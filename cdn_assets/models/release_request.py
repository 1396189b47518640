from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class ReleaseRequest:
    version: str
    message: str | None = None
    dry_run: bool = False

    @property
    def tag_message(self) -> str:
        return self.message or f"Release {self.version}"
