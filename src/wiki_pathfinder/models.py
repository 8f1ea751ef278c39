"""
Data models shared across the path finder core.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class SearchStatus(Enum):
    """States of a single path search."""
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"
    FAILED = "failed"


class SearchResult(BaseModel):
    """Successful search outcome."""
    pages_checked: int = Field(..., ge=0, description="Number of pages expanded before the target was seen")
    path: List[str] = Field(..., min_length=1, description="Page identifiers from origin to target")

    @property
    def jumps(self) -> int:
        return len(self.path) - 1

    def describe(self) -> str:
        return f"Found path with {self.jumps} jumps: {self.path} ({self.pages_checked} pages checked)"


class WorkerHealth(BaseModel):
    """Snapshot of the persistence worker's state."""
    running: bool = Field(..., description="Whether the worker is still consuming commands")
    applied_commands: int = Field(0, description="Commands durably committed so far")
    pending_commands: int = Field(0, description="Commands waiting in the queue")
    dropped_commands: int = Field(0, description="Commands discarded because the worker was not running")
    error: Optional[str] = Field(None, description="Failure that terminated the worker, if any")


class CacheStats(BaseModel):
    """Counters describing the memory tier."""
    memory_pages: int = 0
    memory_links: int = 0
    memory_hits: int = 0
    durable_hits: int = 0
    misses: int = 0
