"""Case-insensitive keyword search over the corpus with line context."""

import logging
from collections.abc import Sequence

from dokploy_docs.core.loader import DocumentLoader
from dokploy_docs.models.domain.search import SearchResult

logger = logging.getLogger(__name__)

CONTEXT_LINES = 5
MAX_RESULTS = 10


class KeywordSearch:
    """Line-oriented substring search across a fixed, ordered file list."""

    def __init__(
        self,
        loader: DocumentLoader,
        filenames: Sequence[str],
        context_lines: int = CONTEXT_LINES,
        max_results: int = MAX_RESULTS,
    ):
        self.loader = loader
        self.filenames = tuple(filenames)
        self.context_lines = context_lines
        self.max_results = max_results

    def search(self, query: str) -> list[SearchResult]:
        """Find lines containing ``query``, ignoring case.

        Files are scanned in catalog order and lines in ascending order.
        After a match the scan resumes at the first line past that
        match's context window, so neighbouring hits do not produce
        overlapping results. An empty query matches every line.

        Args:
            query: Keyword or phrase to look for

        Returns:
            At most ``max_results`` results; empty when nothing matches
        """
        query_lower = query.lower()
        results: list[SearchResult] = []

        for filename in self.filenames:
            if len(results) >= self.max_results:
                break

            document = self.loader.load(filename)
            if not document.found:
                continue

            results.extend(
                self._search_lines(
                    filename,
                    document.content.split("\n"),
                    query_lower,
                    self.max_results - len(results),
                )
            )

        logger.debug(f"Search for {query!r} returned {len(results)} result(s)")
        return results

    def _search_lines(
        self, filename: str, lines: list[str], query_lower: str, limit: int
    ) -> list[SearchResult]:
        matches: list[SearchResult] = []
        i = 0
        while i < len(lines) and len(matches) < limit:
            if query_lower not in lines[i].lower():
                i += 1
                continue

            start = max(0, i - self.context_lines)
            end = min(len(lines), i + self.context_lines + 1)
            matches.append(
                SearchResult(
                    file=filename,
                    line=i + 1,
                    context="\n".join(lines[start:end]),
                )
            )
            i = end
        return matches


__all__ = ["CONTEXT_LINES", "MAX_RESULTS", "KeywordSearch"]
