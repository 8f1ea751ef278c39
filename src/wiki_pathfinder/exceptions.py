"""
Exception taxonomy for the path finder core.
"""

from typing import Optional

from wiki_pathfinder.models import SearchStatus


class WikiPathfinderException(Exception):
    """Base exception for the library."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class FetchError(WikiPathfinderException):
    """Raised when the link source cannot produce links for a page (bad status, unreadable body)."""
    def __init__(self, message: str, page: Optional[str] = None):
        self.page = page
        super().__init__(message)


class SearchError(WikiPathfinderException):
    """A search finished without a path. Carries the number of pages expanded so far."""
    status: SearchStatus = SearchStatus.FAILED

    def __init__(self, message: str, pages_checked: int):
        self.pages_checked = pages_checked
        super().__init__(message)


class PathNotFoundError(SearchError):
    """Raised when the frontier is exhausted without reaching the target."""
    status = SearchStatus.EXHAUSTED

    def __init__(self, pages_checked: int):
        super().__init__(f"No path found ({pages_checked} pages checked)", pages_checked)


class SearchCancelledError(SearchError):
    """Raised when a cancellation request is observed mid-search."""
    status = SearchStatus.CANCELLED

    def __init__(self, pages_checked: int):
        super().__init__(f"Search cancelled ({pages_checked} pages checked)", pages_checked)


class PersistenceFailure(WikiPathfinderException):
    """I/O failure inside the persistence worker. Never raised to cache callers."""
    pass
