"""Corpus refresh command for the Dokploy Docs CLI."""

import asyncio
from pathlib import Path

import click

from dokploy_docs.cli.utils import (
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    print_table,
)
from dokploy_docs.refresh.main import refresh_docs


@click.command()
@click.option(
    "--docs-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write the documentation markdown files to",
)
@click.option(
    "--delay",
    type=click.FloatRange(min=0.0),
    default=None,
    help="Seconds to wait between Context7 queries",
)
@click.help_option("-h", "--help")
@click.pass_context
def refresh(ctx, docs_dir, delay):
    """Re-fetch the documentation corpus from Context7.

    Each topic is queried in turn and written to its markdown file. Topics
    that fail keep their previous file.
    """
    config = ctx.obj["config"].refresh
    updates = {}
    if docs_dir is not None:
        updates["docs_dir"] = docs_dir
    if delay is not None:
        updates["request_delay"] = delay
    if updates:
        config = config.model_copy(update=updates)

    echo_info(f"Fetching Dokploy documentation into {config.docs_dir}")
    try:
        report = asyncio.run(refresh_docs(config))
    except Exception as e:
        echo_error(f"Refresh failed: {e}")
        ctx.exit(1)

    rows = [{"file": name, "status": "saved"} for name in report.saved]
    rows += [{"file": name, "status": "failed"} for name in report.failed]
    print_table(rows, title="Refresh results")

    if report.success:
        echo_success(f"Saved {len(report.saved)} document(s)")
    else:
        echo_warning(
            f"Saved {len(report.saved)} of {report.total} document(s); "
            "failed files keep their previous content"
        )
