"""
Per-search cancellation tokens and the registry used to stop running searches.
"""

import itertools
import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)


class CancellationToken:
    """Cooperative stop flag owned by one search invocation."""

    def __init__(self):
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self):
        self._cancelled = True

    def reset(self):
        self._cancelled = False

    def __repr__(self):
        return f"CancellationToken(cancelled={self._cancelled})"


class SearchRegistry:
    """
    Tracks the cancellation tokens of in-flight searches.

    Lets an API caller stop one search by id, or every running search at once.
    """

    def __init__(self):
        self._tokens: Dict[str, CancellationToken] = {}
        self._ids = itertools.count(1)

    def register(self, search_id: Optional[str] = None) -> Tuple[str, CancellationToken]:
        search_id = search_id or f"search-{next(self._ids)}"
        token = CancellationToken()
        self._tokens[search_id] = token
        return search_id, token

    def unregister(self, search_id: str):
        self._tokens.pop(search_id, None)

    def cancel(self, search_id: str) -> bool:
        """Cancel one search. Returns False if no such search is running."""
        token = self._tokens.get(search_id)
        if token is None:
            return False
        token.cancel()
        logger.info(f"Cancellation requested for {search_id}")
        return True

    def cancel_all(self) -> int:
        """Cancel every running search and return how many were signalled."""
        for token in self._tokens.values():
            token.cancel()
        if self._tokens:
            logger.info(f"Cancellation requested for {len(self._tokens)} running searches")
        return len(self._tokens)

    def active(self) -> list:
        return list(self._tokens)

    def __len__(self):
        return len(self._tokens)
