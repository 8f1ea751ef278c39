import logging
import uvicorn
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.config import BackendConfig, config
from backend.api.search import router as search_router, stop_all
from backend.api.cache import router as cache_router
from backend.dependencies import get_cache, get_registry
from backend.models.api_models import ActionResponse, HealthResponse
from wiki_pathfinder import (
    LinkCache,
    LinkResolver,
    LinkSource,
    PathFinder,
    RandomPageIndexer,
    SearchRegistry,
    WikipediaLinkSource,
)
from wiki_pathfinder.logging_config import setup_logging

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def create_app(app_config: Optional[BackendConfig] = None, source: Optional[LinkSource] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        app_config: Settings to use; defaults to the environment-derived config
        source: Link source to fetch pages with; defaults to the live Wikipedia source
    """
    app_config = app_config or config
    setup_logging(level=app_config.log_level, use_rich=app_config.rich_logging)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        logger.info("Starting Wiki Pathfinder API...")

        link_source = source or WikipediaLinkSource(app_config.source)
        cache = LinkCache(app_config.cache)
        await cache.start()

        resolver = LinkResolver(cache, link_source)
        path_finder = PathFinder(resolver)
        registry = SearchRegistry()

        indexer = RandomPageIndexer(resolver, link_source, app_config.indexer.interval_seconds)
        if app_config.indexer.enabled:
            indexer.start()

        app.state.config = app_config
        app.state.cache = cache
        app.state.path_finder = path_finder
        app.state.registry = registry
        app.state.indexer = indexer

        logger.info("Wiki Pathfinder API startup complete")

        yield

        logger.info("Shutting down Wiki Pathfinder API...")
        registry.cancel_all()
        await indexer.stop()
        await cache.close()
        await link_source.close()
        logger.info("Wiki Pathfinder API shutdown complete")

    app = FastAPI(
        title="Wiki Pathfinder API",
        description="Finds chains of links between wiki pages over a lazily fetched link graph",
        version=VERSION,
        debug=app_config.debug,
        lifespan=lifespan
    )

    app.include_router(search_router)
    app.include_router(cache_router)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Bare trigger kept for bookmarks and scripts
    app.add_api_route("/stop", stop_all, methods=["GET"], response_model=ActionResponse)

    @app.get("/health", response_model=HealthResponse)
    async def health_check(
        cache: LinkCache = Depends(get_cache),
        registry: SearchRegistry = Depends(get_registry),
    ) -> HealthResponse:
        """Health check including the persistence worker state."""
        persistence = cache.persistence_health()
        return HealthResponse(
            status="healthy" if persistence.running else "degraded",
            version=VERSION,
            persistence=persistence,
            cache=cache.stats(),
            running_searches=len(registry),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """Global exception handler for unhandled errors."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": "An unexpected error occurred"
            }
        )

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level="info"
    )
