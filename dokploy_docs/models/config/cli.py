"""CLI configuration models."""

from pathlib import Path

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dokploy_docs.models.config.refresh import RefreshConfig
from dokploy_docs.models.config.server import ServerConfig

DEFAULT_CONFIG_DIR = Path.home() / ".dokploy-docs"


class CLIConfig(BaseSettings):
    """Main CLI configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DOKPLOY_DOCS_CLI_",
        env_file=".env",
        extra="ignore",
    )

    server: ServerConfig = Field(default_factory=ServerConfig)
    refresh: RefreshConfig = Field(default_factory=RefreshConfig)

    verbose: bool = False
    color: bool = True
    config_dir: Path = Field(default_factory=lambda: DEFAULT_CONFIG_DIR)

    @classmethod
    def load_from_file(cls, config_path: Path | None = None) -> "CLIConfig":
        """Load configuration from a YAML file, falling back to defaults."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_DIR / "config.yaml"

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}

            server_data = config_data.get("server") or {}
            refresh_data = config_data.get("refresh") or {}
            if "docs_dir" in server_data:
                refresh_data.setdefault("docs_dir", server_data["docs_dir"])

            if "server" in config_data:
                config_data["server"] = ServerConfig(**server_data)
            if "refresh" in config_data or refresh_data:
                config_data["refresh"] = RefreshConfig(**refresh_data)
            if "config_dir" in config_data:
                config_data["config_dir"] = Path(config_data["config_dir"])

            return cls(**config_data)
        except Exception:
            # If config file is invalid, return default config
            return cls()

    def save_to_file(self, config_path: Path | None = None) -> None:
        """Save configuration to a YAML file."""
        if config_path is None:
            config_path = self.config_dir / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(mode="json")

        with open(config_path, "w") as f:
            yaml.safe_dump(config_dict, f, default_flow_style=False)


__all__ = ["CLIConfig"]
