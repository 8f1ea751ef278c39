from fastapi import APIRouter, Depends, HTTPException
import logging

from backend.dependencies import get_cache
from backend.models.api_models import ActionResponse
from wiki_pathfinder import LinkCache
from wiki_pathfinder.utils.wiki_helpers import validate_page_identifier

router = APIRouter(prefix="/api/cache", tags=["cache"])
logger = logging.getLogger(__name__)


@router.post("/clear_mem", response_model=ActionResponse)
async def clear_memory(cache: LinkCache = Depends(get_cache)) -> ActionResponse:
    """Drop the in-memory tier; the SQLite tier is kept."""
    await cache.clear_memory()
    return ActionResponse(message="In memory cache cleared")


@router.post("/clear/{page}", response_model=ActionResponse)
async def clear_page(page: str, cache: LinkCache = Depends(get_cache)) -> ActionResponse:
    """Forget the cached links of one page in both tiers."""
    try:
        validate_page_identifier(page.strip())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    await cache.invalidate(page)
    return ActionResponse(message="Requested cache cleared", affected=1)


@router.get("/stats")
async def cache_stats(cache: LinkCache = Depends(get_cache)) -> dict:
    return {
        "cache": cache.stats().model_dump(),
        "persistence": cache.persistence_health().model_dump(),
    }
