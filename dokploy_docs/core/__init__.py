"""Core corpus operations: loading, section extraction and keyword search."""

from dokploy_docs.core.loader import DocumentLoader
from dokploy_docs.core.search import KeywordSearch
from dokploy_docs.core.sections import extract_category, extract_section

__all__ = ["DocumentLoader", "KeywordSearch", "extract_category", "extract_section"]
