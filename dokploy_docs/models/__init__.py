"""Centralized model definitions for Dokploy Docs.

This package contains all Pydantic models organized by domain:
- api/: MCP tool response models
- domain/: Core domain models
- config/: Configuration models
"""

from dokploy_docs.models.api.tools import *
from dokploy_docs.models.config.cli import *
from dokploy_docs.models.config.refresh import *
from dokploy_docs.models.config.server import *
from dokploy_docs.models.domain.documents import *
from dokploy_docs.models.domain.refresh import *
from dokploy_docs.models.domain.search import *

__all__ = [
    # API models
    "ToolResponse",
    # Domain models
    "DocumentLookup",
    "SectionLookup",
    "SectionStatus",
    "SearchResult",
    "RefreshReport",
    # Config models
    "CLIConfig",
    "RefreshConfig",
    "ServerConfig",
]
