"""Reads corpus documents from the docs directory."""

import logging
from pathlib import Path

from dokploy_docs.models.domain.documents import DocumentLookup

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Reads documents by filename, re-reading the file on every call."""

    def __init__(self, docs_dir: Path):
        self.docs_dir = Path(docs_dir)

    def path_for(self, filename: str) -> Path:
        return self.docs_dir / filename

    def load(self, filename: str) -> DocumentLookup:
        """Read ``filename`` from the docs directory.

        Args:
            filename: Name of a corpus file, e.g. ``api-reference.md``

        Returns:
            DocumentLookup tagged found or missing; never raises for a
            missing file
        """
        path = self.path_for(filename)
        if not path.is_file():
            logger.debug(f"Documentation file not found: {path}")
            return DocumentLookup(filename=filename, found=False)

        # newline="" keeps line endings exactly as written; bad bytes become U+FFFD
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
            content = f.read()
        return DocumentLookup(filename=filename, found=True, content=content)

    def load_text(self, filename: str) -> str:
        """Read ``filename`` and render it as agent-facing text."""
        return self.load(filename).text


__all__ = ["DocumentLoader"]
