"""
wiki_pathfinder - finds chains of links between wiki pages.

The link graph is discovered lazily: a page's links are fetched on first
visit and cached in memory and SQLite afterwards.
"""

from .cache import LinkCache, PersistenceWorker
from .config import CacheConfig, IndexerConfig, SearchConfig, SourceConfig
from .exceptions import (
    FetchError,
    PathNotFoundError,
    PersistenceFailure,
    SearchCancelledError,
    SearchError,
    WikiPathfinderException,
)
from .indexer import RandomPageIndexer
from .models import CacheStats, SearchResult, SearchStatus, WorkerHealth
from .search import CancellationToken, LinkResolver, PathFinder, SearchRegistry
from .source import LinkSource, WikipediaLinkSource

__all__ = [
    "LinkCache",
    "PersistenceWorker",
    "CacheConfig",
    "IndexerConfig",
    "SearchConfig",
    "SourceConfig",
    "FetchError",
    "PathNotFoundError",
    "PersistenceFailure",
    "SearchCancelledError",
    "SearchError",
    "WikiPathfinderException",
    "RandomPageIndexer",
    "CacheStats",
    "SearchResult",
    "SearchStatus",
    "WorkerHealth",
    "CancellationToken",
    "LinkResolver",
    "PathFinder",
    "SearchRegistry",
    "LinkSource",
    "WikipediaLinkSource",
]
