"""Offline refresh of the documentation corpus from Context7."""

from dokploy_docs.refresh.client import Context7Client, RefreshError
from dokploy_docs.refresh.fetcher import CorpusRefresher

__all__ = ["Context7Client", "CorpusRefresher", "RefreshError"]
