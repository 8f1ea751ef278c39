"""
Frontier of partial search paths, popped in ascending depth order.
"""

import heapq
import itertools
from typing import List, Optional, Tuple

SearchPath = Tuple[str, ...]


def path_depth(path: SearchPath) -> int:
    """Number of edges from the origin to the last page of the path."""
    return len(path) - 1


class Frontier:
    """
    Priority queue of SearchPaths keyed by cost.

    Edges have uniform cost today, so cost == depth and pop order is
    breadth-first; equal-cost paths come out in insertion order.
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, SearchPath]] = []
        self._sequence = itertools.count()

    def push(self, path: SearchPath, cost: Optional[int] = None):
        if cost is None:
            cost = path_depth(path)
        heapq.heappush(self._heap, (cost, next(self._sequence), path))

    def pop(self) -> Optional[SearchPath]:
        """Remove and return the cheapest path, or None when empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)
