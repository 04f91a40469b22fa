"""MCP server configuration models."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DOCS_DIR = Path(__file__).resolve().parent.parent.parent / "docs"


class ServerConfig(BaseSettings):
    """Settings for the documentation MCP server."""

    model_config = SettingsConfigDict(
        env_prefix="DOKPLOY_DOCS_",
        env_file=".env",
        extra="ignore",
    )

    docs_dir: Path = Field(default=DEFAULT_DOCS_DIR)
    server_name: str = "dokploy-docs"
    server_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: Path | None = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("server_name")
    @classmethod
    def validate_server_name(cls, v: str) -> str:
        """Validate server name is not empty."""
        if not v or not v.strip():
            raise ValueError("Server name cannot be empty")
        return v.strip()


__all__ = ["DEFAULT_DOCS_DIR", "ServerConfig"]
