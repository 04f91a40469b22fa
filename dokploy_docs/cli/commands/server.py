"""MCP server command for the Dokploy Docs CLI."""

import asyncio
from pathlib import Path

import click

from dokploy_docs.cli.utils import echo_info
from dokploy_docs.mcp_server.main import main as run_server


@click.command()
@click.option(
    "--docs-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the documentation markdown files",
)
@click.help_option("-h", "--help")
@click.pass_context
def serve(ctx, docs_dir):
    """Run the MCP server on stdio.

    Configure your agent to launch this command; it speaks MCP over
    stdin/stdout and logs to stderr.
    """
    config = ctx.obj["config"].server
    if docs_dir is not None:
        config = config.model_copy(update={"docs_dir": docs_dir})

    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        echo_info("MCP server stopped by user")
