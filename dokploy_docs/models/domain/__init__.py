"""Domain models for the documentation corpus."""

from dokploy_docs.models.domain.documents import *
from dokploy_docs.models.domain.refresh import *
from dokploy_docs.models.domain.search import *

__all__ = [
    "REFRESH_HINT",
    "DocumentLookup",
    "SectionLookup",
    "SectionStatus",
    "SearchResult",
    "RefreshReport",
]
