from fastapi import APIRouter, Depends, HTTPException, Query
import logging
from typing import Optional

from backend.config import BackendConfig
from backend.dependencies import get_config, get_path_finder, get_registry
from backend.exceptions import to_http_exception
from backend.models.api_models import ActionResponse, QueryResponse
from wiki_pathfinder import PathFinder, SearchRegistry, WikiPathfinderException

router = APIRouter(prefix="/api", tags=["search"])
logger = logging.getLogger(__name__)


@router.get("/query", response_model=QueryResponse)
async def query(
    origin: str = Query(..., alias="from", min_length=1, description="Page to start from"),
    target: str = Query(..., alias="to", min_length=1, description="Page to reach"),
    depth: Optional[int] = Query(None, ge=0, le=255, description="Deepest path, in links, that is still expanded (default 2)"),
    path_finder: PathFinder = Depends(get_path_finder),
    registry: SearchRegistry = Depends(get_registry),
    config: BackendConfig = Depends(get_config),
) -> QueryResponse:
    """
    Find a chain of links from one page to another.

    Failures (no path, cancelled, fetch error) are returned with their description as detail.
    """
    max_depth = config.search.default_max_depth if depth is None else depth
    logger.info(f"From '{origin}' to '{target}' with depth: {max_depth}")

    search_id, token = registry.register()
    try:
        result = await path_finder.find_path(origin, target, max_depth=max_depth, token=token)
    except WikiPathfinderException as e:
        logger.warning(f"Query {search_id} failed: {e.message}")
        raise to_http_exception(e)
    finally:
        registry.unregister(search_id)

    return QueryResponse(
        search_id=search_id,
        pages_checked=result.pages_checked,
        jumps=result.jumps,
        path=result.path,
        message=result.describe(),
    )


@router.post("/stop", response_model=ActionResponse)
async def stop_all(registry: SearchRegistry = Depends(get_registry)) -> ActionResponse:
    """Stop every search that is currently running."""
    stopped = registry.cancel_all()
    return ActionResponse(message=f"Stop requested for {stopped} running queries", affected=stopped)


@router.post("/stop/{search_id}", response_model=ActionResponse)
async def stop_one(search_id: str, registry: SearchRegistry = Depends(get_registry)) -> ActionResponse:
    """Stop a single running search."""
    if not registry.cancel(search_id):
        raise HTTPException(status_code=404, detail=f"No running query with id '{search_id}'")
    return ActionResponse(message=f"Stop requested for {search_id}", affected=1)


@router.get("/searches")
async def running_searches(registry: SearchRegistry = Depends(get_registry)) -> dict:
    return {"running": registry.active()}
