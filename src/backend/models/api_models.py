from typing import List, Optional
from pydantic import BaseModel, Field

from wiki_pathfinder.models import CacheStats, WorkerHealth


class QueryResponse(BaseModel):
    """Response for a successful path query."""
    search_id: str = Field(..., description="Identifier usable with the stop endpoint while the search runs")
    pages_checked: int = Field(..., description="Pages expanded before the target was found")
    jumps: int = Field(..., description="Number of links followed")
    path: List[str] = Field(..., description="Page identifiers from origin to target")
    message: str = Field(..., description="Human-readable summary")


class ActionResponse(BaseModel):
    """Acknowledgement for cache and stop triggers."""
    message: str
    affected: Optional[int] = None


class HealthResponse(BaseModel):
    status: str
    service: str = "wiki-pathfinder-api"
    version: str
    persistence: WorkerHealth
    cache: CacheStats
    running_searches: int
