"""Fetches each refresh topic and writes it into the docs directory."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path

from dokploy_docs.catalog import REFRESH_TOPICS, RefreshTopic
from dokploy_docs.models.domain.refresh import RefreshReport

logger = logging.getLogger(__name__)

QueryFunc = Callable[[str], Awaitable[str | None]]
SleepFunc = Callable[[float], Awaitable[None]]


class CorpusRefresher:
    """Runs the refresh topics one at a time with a fixed pause between them.

    The fetch capability is injected so the refresh can run against any
    source returning optional text.
    """

    def __init__(
        self,
        query: QueryFunc,
        docs_dir: Path,
        topics: Sequence[RefreshTopic] = REFRESH_TOPICS,
        delay: float = 1.0,
        sleep: SleepFunc = asyncio.sleep,
    ):
        self.query = query
        self.docs_dir = Path(docs_dir)
        self.topics = tuple(topics)
        self.delay = delay
        self.sleep = sleep

    async def fetch_and_save(self, topic: RefreshTopic) -> bool:
        """Fetch one topic and overwrite its file; False when nothing was written."""
        logger.info(f"Fetching: {topic.description}...")
        content = await self.query(topic.query)

        if not content:
            logger.error(f"Failed to fetch: {topic.description}")
            return False

        path = self.docs_dir / topic.filename
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            return False
        logger.info(f"Saved: {path}", extra={"extra_data": {"chars": len(content)}})
        return True

    async def refresh(self) -> RefreshReport:
        """Fetch every topic sequentially.

        A failed topic leaves any existing file in place and does not stop
        the run.
        """
        self.docs_dir.mkdir(parents=True, exist_ok=True)
        report = RefreshReport()

        for topic in self.topics:
            if await self.fetch_and_save(topic):
                report.saved.append(topic.filename)
            else:
                report.failed.append(topic.filename)
            await self.sleep(self.delay)

        return report


__all__ = ["CorpusRefresher", "QueryFunc"]
