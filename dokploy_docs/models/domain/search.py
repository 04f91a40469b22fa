"""Search-related domain models."""

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """A keyword match with its surrounding lines."""

    file: str
    line: int = Field(ge=1, description="1-based line number of the match")
    context: str = Field(description="Up to 5 lines either side of the match")


__all__ = ["SearchResult"]
