"""Corpus refresh configuration models."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dokploy_docs.models.config.server import ServerConfig

CONTEXT7_API = "https://api.context7.com/v1"
LIBRARY_ID = "/dokploy/website"


class RefreshConfig(BaseSettings):
    """Settings for pulling documentation from Context7."""

    model_config = SettingsConfigDict(
        env_prefix="DOKPLOY_DOCS_REFRESH_",
        env_file=".env",
        extra="ignore",
    )

    api_url: str = CONTEXT7_API
    library_id: str = LIBRARY_ID
    max_tokens: int = Field(default=8000, ge=1)
    request_delay: float = Field(default=1.0, ge=0.0, description="Seconds between queries")
    request_timeout: float = Field(default=30.0, gt=0.0)
    # Falls back to the server's docs directory so refreshed files are served
    docs_dir: Path = Field(default_factory=lambda: ServerConfig().docs_dir)

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate the API URL is http(s) and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("API URL must start with http:// or https://")
        return v.rstrip("/")


__all__ = ["CONTEXT7_API", "LIBRARY_ID", "RefreshConfig"]
