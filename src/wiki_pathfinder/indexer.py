"""
Background task that keeps warming the link cache with random pages.
"""

import asyncio
import logging
from typing import Optional

from wiki_pathfinder.exceptions import FetchError
from wiki_pathfinder.search.resolver import LinkResolver
from wiki_pathfinder.source import LinkSource

logger = logging.getLogger(__name__)


class RandomPageIndexer:
    """Every interval, picks a random page from the source and resolves it."""

    def __init__(self, resolver: LinkResolver, source: LinkSource, interval_seconds: float = 10.0):
        self.resolver = resolver
        self.source = source
        self.interval_seconds = interval_seconds
        self.indexed_pages = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self):
        if self.running:
            return
        logger.info(f"Starting random page indexer with interval {self.interval_seconds}")
        self._task = asyncio.create_task(self._run(), name="random-page-indexer")

    async def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def index_once(self) -> Optional[str]:
        """Resolve one random page. Returns its identifier, or None if fetching failed."""
        try:
            page = await self.source.random_page()
            logger.info(f"[Random Page Indexer] Random indexing of '{page}'")
            await self.resolver.resolve(page)
        except FetchError as e:
            logger.warning(f"[Random Page Indexer] {e.message}")
            return None
        self.indexed_pages += 1
        return page

    async def _run(self):
        while True:
            try:
                await asyncio.sleep(self.interval_seconds)
                await self.index_once()
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"[Random Page Indexer] Indexing failed: {e}", exc_info=True)
