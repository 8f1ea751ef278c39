from fastapi import Request

from backend.config import BackendConfig
from wiki_pathfinder import LinkCache, PathFinder, SearchRegistry


def get_config(request: Request) -> BackendConfig:
    """Dependency provider to get the backend configuration."""
    return request.app.state.config


def get_cache(request: Request) -> LinkCache:
    """Dependency provider to get the shared LinkCache instance."""
    return request.app.state.cache


def get_path_finder(request: Request) -> PathFinder:
    """Dependency provider to get the shared PathFinder instance."""
    return request.app.state.path_finder


def get_registry(request: Request) -> SearchRegistry:
    """Dependency provider to get the registry of running searches."""
    return request.app.state.registry
