"""Corpus refresh domain models."""

from pydantic import BaseModel, Field


class RefreshReport(BaseModel):
    """Outcome of one corpus refresh run."""

    saved: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.saved) + len(self.failed)

    @property
    def success(self) -> bool:
        return not self.failed


__all__ = ["RefreshReport"]
