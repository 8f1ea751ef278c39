"""
Mapping from core exceptions to HTTP status codes.
"""

from fastapi import HTTPException

from wiki_pathfinder.exceptions import (
    FetchError,
    PathNotFoundError,
    SearchCancelledError,
    WikiPathfinderException,
)


def to_http_exception(exc: WikiPathfinderException) -> HTTPException:
    """Wrap a core failure so its message reaches the client verbatim."""
    if isinstance(exc, PathNotFoundError):
        status_code = 404
    elif isinstance(exc, SearchCancelledError):
        status_code = 409
    elif isinstance(exc, FetchError):
        status_code = 502
    else:
        status_code = 500
    return HTTPException(status_code=status_code, detail=exc.message)
