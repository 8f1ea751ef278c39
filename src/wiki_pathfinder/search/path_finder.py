"""
Depth-bounded best-first search over the lazily discovered link graph.
"""

import logging
import time
from typing import Optional

from wiki_pathfinder.exceptions import PathNotFoundError, SearchCancelledError
from wiki_pathfinder.models import SearchResult, SearchStatus
from wiki_pathfinder.search.cancellation import CancellationToken
from wiki_pathfinder.search.frontier import Frontier, path_depth
from wiki_pathfinder.search.resolver import LinkResolver
from wiki_pathfinder.utils.wiki_helpers import validate_max_depth, validate_page_identifier

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 2


class PathFinder:
    """
    Finds a chain of links from an origin page to a target page.

    Paths are expanded in non-decreasing depth order and the first path whose
    new endpoint equals the target wins. Each page is enqueued at most once
    per search. The depth bound is inclusive: with max_depth=0 only the
    origin's own links are checked.

    Searches share nothing except the resolver, so several may run
    concurrently; each is stopped through its own CancellationToken.
    """

    def __init__(self, resolver: LinkResolver):
        self.resolver = resolver

    async def find_path(
        self,
        origin: str,
        target: str,
        max_depth: int = DEFAULT_MAX_DEPTH,
        token: Optional[CancellationToken] = None,
    ) -> SearchResult:
        """
        Search for a path from origin to target.

        Args:
            origin: Page to start from
            target: Page to reach
            max_depth: Deepest path (in edges) that is still expanded
            token: Cancellation token checked once before every expansion

        Returns:
            SearchResult with the number of pages expanded and the path found

        Raises:
            PathNotFoundError: Frontier exhausted without reaching the target
            SearchCancelledError: Token was cancelled before an expansion
            FetchError: Resolving a page failed; the search is aborted
        """
        validate_page_identifier(origin)
        validate_page_identifier(target)
        validate_max_depth(max_depth)
        token = token or CancellationToken()

        start_time = time.time()
        logger.info(f"Searching from '{origin}' to '{target}' with depth {max_depth}")

        frontier = Frontier()
        frontier.push((origin,))
        visited = {origin}
        pages_checked = 0
        status = SearchStatus.RUNNING

        try:
            while frontier:
                path = frontier.pop()
                depth = path_depth(path)
                if depth > max_depth:
                    continue

                if token.cancelled:
                    token.reset()
                    status = SearchStatus.CANCELLED
                    raise SearchCancelledError(pages_checked)

                pages_checked += 1
                links = await self.resolver.resolve(path[-1])

                for link in links:
                    if link == target:
                        status = SearchStatus.FOUND
                        result = SearchResult(pages_checked=pages_checked, path=list(path) + [link])
                        logger.info(f">> Found target with {depth} indirections: {result.describe()}")
                        return result
                    if link in visited:
                        continue
                    visited.add(link)
                    frontier.push(path + (link,))

            status = SearchStatus.EXHAUSTED
            raise PathNotFoundError(pages_checked)
        except (PathNotFoundError, SearchCancelledError):
            raise
        except Exception:
            status = SearchStatus.FAILED
            raise
        finally:
            elapsed = time.time() - start_time
            logger.info(
                f"Search '{origin}' -> '{target}' finished: {status.value}, "
                f"{pages_checked} pages checked, {elapsed:.2f}s"
            )
