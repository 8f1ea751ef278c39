import os
from pathlib import Path

from pydantic import BaseModel, Field


class CacheConfig(BaseModel):
    """Configuration for the two-tier link cache."""
    db_path: str = Field("./page-cache.sqlite", description="SQLite file backing the durable tier")
    queue_maxsize: int = Field(1024, ge=1, description="Pending write commands before submitters block")
    repopulate_memory: bool = Field(True, description="Copy durable-tier hits into the memory tier")
    upsert_rows: bool = Field(True, description="Replace a page's durable rows on write instead of appending")

    @property
    def db_file(self) -> Path:
        """Get the database location as a Path object."""
        return Path(self.db_path)

    @classmethod
    def from_env(cls) -> "CacheConfig":
        """Create config from environment variables."""
        return cls(
            db_path=os.getenv("PAGE_CACHE_DB", "./page-cache.sqlite"),
            queue_maxsize=int(os.getenv("PAGE_CACHE_QUEUE_MAXSIZE", "1024")),
            repopulate_memory=os.getenv("PAGE_CACHE_REPOPULATE_MEMORY", "true").lower() == "true",
            upsert_rows=os.getenv("PAGE_CACHE_UPSERT_ROWS", "true").lower() == "true",
        )


class SourceConfig(BaseModel):
    """Configuration for fetching pages from the live wiki."""
    base_url: str = "https://de.wikipedia.org/wiki/"
    random_url: str = "https://de.wikipedia.org/wiki/Spezial:Random"
    timeout_seconds: float = 10.0
    user_agent: str = "wiki-pathfinder/0.1 (link graph explorer)"

    @classmethod
    def from_env(cls) -> "SourceConfig":
        """Create config from environment variables."""
        return cls(
            base_url=os.getenv("WIKI_BASE_URL", "https://de.wikipedia.org/wiki/"),
            random_url=os.getenv("WIKI_RANDOM_URL", "https://de.wikipedia.org/wiki/Spezial:Random"),
            timeout_seconds=float(os.getenv("WIKI_TIMEOUT_SECONDS", "10.0")),
        )


class IndexerConfig(BaseModel):
    """Configuration for the background random page indexer."""
    enabled: bool = True
    interval_seconds: float = Field(10.0, gt=0)

    @classmethod
    def from_env(cls) -> "IndexerConfig":
        return cls(
            enabled=os.getenv("INDEXER_ENABLED", "true").lower() == "true",
            interval_seconds=float(os.getenv("INDEXER_INTERVAL_SECONDS", "10.0")),
        )


class SearchConfig(BaseModel):
    default_max_depth: int = Field(2, ge=0)

    @classmethod
    def from_env(cls) -> "SearchConfig":
        return cls(default_max_depth=int(os.getenv("SEARCH_DEFAULT_MAX_DEPTH", "2")))
