import os
from pydantic import BaseModel

from wiki_pathfinder.config import CacheConfig, IndexerConfig, SearchConfig, SourceConfig


class BackendConfig(BaseModel):
    """Configuration for the FastAPI backend."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"
    rich_logging: bool = True

    # CORS settings
    cors_origins: list = ["http://localhost:3000", "http://localhost:5173"]

    # Core settings
    cache: CacheConfig = CacheConfig()
    source: SourceConfig = SourceConfig()
    indexer: IndexerConfig = IndexerConfig()
    search: SearchConfig = SearchConfig()

    @classmethod
    def from_env(cls) -> "BackendConfig":
        """Create config from environment variables."""
        return cls(
            host=os.getenv("BACKEND_HOST", "0.0.0.0"),
            port=int(os.getenv("BACKEND_PORT", "8000")),
            debug=os.getenv("BACKEND_DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            rich_logging=os.getenv("RICH_LOGGING", "true").lower() == "true",
            cors_origins=os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(","),
            cache=CacheConfig.from_env(),
            source=SourceConfig.from_env(),
            indexer=IndexerConfig.from_env(),
            search=SearchConfig.from_env(),
        )

# Global config instance
config = BackendConfig.from_env()
