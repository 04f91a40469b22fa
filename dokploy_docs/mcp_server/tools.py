"""MCP tools for Dokploy documentation."""

import logging
from typing import Any

from dokploy_docs.catalog import ALL_CATEGORY, DocsCatalog
from dokploy_docs.core.loader import DocumentLoader
from dokploy_docs.core.search import KeywordSearch
from dokploy_docs.core.sections import lookup_category
from dokploy_docs.models.api.tools import ToolResponse
from dokploy_docs.models.domain.search import SearchResult

logger = logging.getLogger(__name__)


def format_search_results(query: str, results: list[SearchResult]) -> str:
    """Render search results as fenced blocks under a count header."""
    if not results:
        return f'No results found for "{query}".'

    blocks = [
        f"### {result.file} (line {result.line})\n```\n{result.context}\n```"
        for result in results
    ]
    return f'Found {len(results)} result(s) for "{query}":\n\n' + "\n\n".join(blocks)


class DokployDocsTools:
    """Collection of MCP tools and resources over the documentation corpus."""

    def __init__(self, loader: DocumentLoader, catalog: DocsCatalog | None = None):
        """Initialize tools with a document loader and the fixed catalog."""
        self.loader = loader
        self.catalog = catalog or DocsCatalog()
        self.searcher = KeywordSearch(loader, self.catalog.doc_files)

    # Tools

    def api_reference(self, category: str | None = None) -> ToolResponse:
        """Get the API reference, whole or for one category.

        Args:
            category: ``all`` or a category label; empty means ``all``

        Returns:
            ToolResponse with the document or section text, or a message
            explaining why it could not be produced
        """
        category = category or ALL_CATEGORY
        document = self.loader.load(self.catalog.api_reference_file)

        if category == ALL_CATEGORY:
            return ToolResponse(text=document.text)

        lookup = lookup_category(document, category, self.catalog.section_headings)
        if not lookup.found:
            logger.info(f"API reference lookup: {lookup.text}")
        return ToolResponse(text=lookup.text)

    def guide(self, guide: str | None) -> ToolResponse:
        """Get a guide by name.

        Args:
            guide: Guide name such as ``setup`` or ``domains-ssl``

        Returns:
            ToolResponse with the full guide text
        """
        filename = self.catalog.guide_files.get(guide or "")
        if filename is None:
            available = ", ".join(self.catalog.guide_files)
            return ToolResponse(text=f"Unknown guide: {guide}. Available: {available}")

        return ToolResponse(text=self.loader.load_text(filename))

    def search(self, query: str | None) -> ToolResponse:
        """Search all documents for a keyword or phrase."""
        query = query or ""
        results = self.searcher.search(query)
        return ToolResponse(text=format_search_results(query, results))

    def call(self, name: str, arguments: dict[str, Any] | None) -> ToolResponse:
        """Route a tool call by name."""
        arguments = arguments or {}

        if name == "dokploy_api_reference":
            return self.api_reference(arguments.get("category"))
        elif name == "dokploy_guide":
            return self.guide(arguments.get("guide"))
        elif name == "dokploy_search":
            return self.search(arguments.get("query"))

        logger.warning(f"Unknown tool requested: {name}")
        return ToolResponse(text=f"Unknown tool: {name}", is_error=True)

    # Resources

    def read_resource(self, uri: str) -> tuple[str, str]:
        """Read a resource by URI.

        Returns:
            Tuple of (text, mime type); unknown URIs yield a plain-text
            message
        """
        resource = self.catalog.resource_for(uri)
        if resource is None:
            return f"Unknown resource: {uri}", "text/plain"

        return self.loader.load_text(resource.filename), resource.mime_type


__all__ = ["DokployDocsTools", "format_search_results"]
