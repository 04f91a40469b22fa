"""Main CLI entry point for Dokploy Docs."""

from pathlib import Path

import click
from rich.console import Console

from dokploy_docs.cli.config import get_config, set_config
from dokploy_docs.cli.utils import echo_error
from dokploy_docs.core.logging import setup_logging
from dokploy_docs.models.config import CLIConfig

console = Console()


@click.group(invoke_without_command=True)
@click.option("-v", "--version", is_flag=True, help="Show version information")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a YAML config file (default: ~/.dokploy-docs/config.yaml)",
)
@click.help_option("-h", "--help")
@click.pass_context
def cli(ctx, version, verbose, config_path):
    """Dokploy Docs - documentation MCP server for AI agents.

    Serve the local Dokploy documentation corpus over MCP, refresh it from
    Context7, and inspect it from the terminal.

    Examples:
        dokploy-docs serve                       # Run the MCP server on stdio
        dokploy-docs refresh                     # Re-fetch docs from Context7
        dokploy-docs status                      # Show which docs are present
        dokploy-docs search "traefik"            # Keyword search with context
        dokploy-docs guide setup                 # Print a guide
        dokploy-docs api projects                # Print an API reference section
    """
    if version:
        from dokploy_docs import __version__

        console.print(f"Dokploy Docs v{__version__}")
        ctx.exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()

    ctx.ensure_object(dict)

    config = (
        CLIConfig.load_from_file(config_path) if config_path else get_config()
    )
    if verbose:
        config.verbose = True

    ctx.obj["config"] = config
    set_config(config)

    setup_logging("DEBUG" if config.verbose else config.server.log_level)

    if not config.color:
        console.no_color = True


def register_commands():
    """Register all command groups."""
    try:
        from dokploy_docs.cli.commands.server import serve

        cli.add_command(serve)
    except ImportError as e:
        echo_error(f"Failed to load server commands: {e}")

    try:
        from dokploy_docs.cli.commands.refresh import refresh

        cli.add_command(refresh)
    except ImportError as e:
        echo_error(f"Failed to load refresh command: {e}")

    try:
        from dokploy_docs.cli.commands.docs import api, guide, search, status

        cli.add_command(status)
        cli.add_command(search)
        cli.add_command(guide)
        cli.add_command(api)
    except ImportError as e:
        echo_error(f"Failed to load docs commands: {e}")


register_commands()


if __name__ == "__main__":
    cli()
