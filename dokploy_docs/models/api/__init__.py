"""API models exchanged over the MCP boundary."""

from dokploy_docs.models.api.tools import *

__all__ = ["ToolResponse"]
