"""Configuration management for the Dokploy Docs CLI."""

from dokploy_docs.models.config import CLIConfig

# Global configuration instance
_config: CLIConfig | None = None


def get_config() -> CLIConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = CLIConfig.load_from_file()
    return _config


def set_config(config: CLIConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
