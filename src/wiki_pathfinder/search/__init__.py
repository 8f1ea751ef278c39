from .cancellation import CancellationToken, SearchRegistry
from .frontier import Frontier, SearchPath, path_depth
from .resolver import LinkResolver
from .path_finder import PathFinder, DEFAULT_MAX_DEPTH

__all__ = [
    "CancellationToken",
    "SearchRegistry",
    "Frontier",
    "SearchPath",
    "path_depth",
    "LinkResolver",
    "PathFinder",
    "DEFAULT_MAX_DEPTH",
]
