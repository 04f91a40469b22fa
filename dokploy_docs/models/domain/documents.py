"""Document-related domain models."""

from enum import Enum

from pydantic import BaseModel, Field

REFRESH_HINT = 'Run "dokploy-docs refresh" to fetch latest docs.'


class DocumentLookup(BaseModel):
    """Result of reading one corpus file.

    A missing file is an ordinary result, not an error; ``text`` renders
    the placeholder shown to agents.
    """

    filename: str
    found: bool
    content: str | None = Field(default=None, description="File text when found")

    @property
    def text(self) -> str:
        if self.found:
            return self.content or ""
        return f"Documentation file not found: {self.filename}. {REFRESH_HINT}"


class SectionStatus(str, Enum):
    """Outcome of an API reference section lookup."""

    FOUND = "found"
    MISSING_DOCUMENT = "missing_document"
    UNKNOWN_CATEGORY = "unknown_category"
    SECTION_NOT_FOUND = "section_not_found"


class SectionLookup(BaseModel):
    """Result of extracting a category section from the API reference."""

    category: str
    status: SectionStatus
    text: str

    @property
    def found(self) -> bool:
        return self.status == SectionStatus.FOUND


__all__ = ["REFRESH_HINT", "DocumentLookup", "SectionLookup", "SectionStatus"]
