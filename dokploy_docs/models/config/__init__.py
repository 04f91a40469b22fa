"""Configuration models for Dokploy Docs."""

from dokploy_docs.models.config.cli import *
from dokploy_docs.models.config.refresh import *
from dokploy_docs.models.config.server import *

__all__ = ["CLIConfig", "RefreshConfig", "ServerConfig"]
