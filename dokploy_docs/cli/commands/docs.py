"""Local corpus inspection commands for the Dokploy Docs CLI."""

import click
from rich.console import Console
from rich.markdown import Markdown

from dokploy_docs.catalog import ALL_CATEGORY, DocsCatalog
from dokploy_docs.cli.utils import echo_warning, format_size, print_table
from dokploy_docs.core.loader import DocumentLoader
from dokploy_docs.mcp_server.tools import DokployDocsTools

console = Console()

CATALOG = DocsCatalog()


def _tools(ctx) -> DokployDocsTools:
    config = ctx.obj["config"].server
    return DokployDocsTools(DocumentLoader(config.docs_dir), CATALOG)


def _emit(text: str, render: bool) -> None:
    if render:
        console.print(Markdown(text))
    else:
        click.echo(text)


@click.command()
@click.help_option("-h", "--help")
@click.pass_context
def status(ctx):
    """Show which documentation files are present."""
    tools = _tools(ctx)
    rows = []
    missing = 0
    for filename in CATALOG.doc_files:
        path = tools.loader.path_for(filename)
        if path.is_file():
            rows.append(
                {"file": filename, "status": "present", "size": format_size(path.stat().st_size)}
            )
        else:
            missing += 1
            rows.append({"file": filename, "status": "missing", "size": "-"})

    print_table(rows, title=f"Documentation in {tools.loader.docs_dir}")
    if missing:
        echo_warning(f"{missing} file(s) missing; run 'dokploy-docs refresh'")


@click.command()
@click.argument("query")
@click.option("--render", is_flag=True, help="Render output as markdown")
@click.help_option("-h", "--help")
@click.pass_context
def search(ctx, query, render):
    """Search all documentation for QUERY.

    Examples:
        dokploy-docs search "traefik"
        dokploy-docs search "deploy failed"
    """
    _emit(_tools(ctx).search(query).text, render)


@click.command()
@click.argument("name", type=click.Choice(list(CATALOG.guide_files)))
@click.option("--render", is_flag=True, help="Render output as markdown")
@click.help_option("-h", "--help")
@click.pass_context
def guide(ctx, name, render):
    """Print the guide NAME."""
    _emit(_tools(ctx).guide(name).text, render)


@click.command()
@click.argument(
    "category",
    type=click.Choice(CATALOG.categories),
    default=ALL_CATEGORY,
    required=False,
)
@click.option("--render", is_flag=True, help="Render output as markdown")
@click.help_option("-h", "--help")
@click.pass_context
def api(ctx, category, render):
    """Print the API reference, or one CATEGORY section of it."""
    _emit(_tools(ctx).api_reference(category).text, render)
