"""MCP tool response models."""

from pydantic import BaseModel


class ToolResponse(BaseModel):
    """Text payload of a tool call.

    Only an unrecognised tool name sets ``is_error``; every other
    condition is reported as ordinary text.
    """

    text: str
    is_error: bool = False


__all__ = ["ToolResponse"]
