"""Entry point for refreshing the documentation corpus from Context7."""

import asyncio
import logging
import sys

from dokploy_docs.core.logging import setup_logging
from dokploy_docs.models.config.refresh import RefreshConfig
from dokploy_docs.models.domain.refresh import RefreshReport
from dokploy_docs.refresh.client import Context7Client
from dokploy_docs.refresh.fetcher import CorpusRefresher

logger = logging.getLogger(__name__)


async def refresh_docs(config: RefreshConfig | None = None) -> RefreshReport:
    """Fetch all refresh topics and write them to the docs directory."""
    config = config or RefreshConfig()
    client = Context7Client(config)
    refresher = CorpusRefresher(
        client.query, config.docs_dir, delay=config.request_delay
    )

    logger.info(f"Fetching Dokploy documentation from Context7 ({config.api_url})")
    report = await refresher.refresh()
    logger.info(
        f"Done! {len(report.saved)}/{report.total} document(s) saved to {config.docs_dir}"
    )
    if report.failed:
        logger.warning(
            "Some documents failed; the server will report them as not found",
            extra={"extra_data": {"failed": ", ".join(report.failed)}},
        )
    return report


def cli_main():
    """Synchronous entry point for script generation."""
    setup_logging("INFO")
    try:
        asyncio.run(refresh_docs())
    except Exception:
        logger.exception("Documentation refresh failed")
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
