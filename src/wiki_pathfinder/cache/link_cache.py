"""
Two-tier cache of discovered outbound links.

The memory tier is authoritative for the life of the process; the SQLite
tier is a write-behind mirror fed through the PersistenceWorker.
"""

import asyncio
import logging
from typing import Dict, List, Optional

import aiosqlite

from wiki_pathfinder.config import CacheConfig
from wiki_pathfinder.models import CacheStats, WorkerHealth
from wiki_pathfinder.cache.persistence import PersistenceWorker, ensure_schema

logger = logging.getLogger(__name__)


class LinkCache:
    """
    Serves previously discovered link sets without re-fetching them.

    All operations serialize through one lock guarding the memory map and the
    read/delete connection. Writes to SQLite go through the worker's own
    connection and never block the caller beyond queue backpressure.

    Usage:
        async with LinkCache(CacheConfig(db_path="cache.sqlite")) as cache:
            await cache.insert("Berlin", ["Germany", "Spree"])
            links = await cache.lookup("Berlin")
    """

    def __init__(self, config: Optional[CacheConfig] = None):
        self.config = config or CacheConfig()
        self._memory: Dict[str, List[str]] = {}
        self._lock = asyncio.Lock()
        self._db: Optional[aiosqlite.Connection] = None
        self._worker = PersistenceWorker(
            self.config.db_file,
            maxsize=self.config.queue_maxsize,
            upsert=self.config.upsert_rows,
        )
        self._memory_hits = 0
        self._durable_hits = 0
        self._misses = 0

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def start(self):
        """Open the durable store and start the persistence worker."""
        if self._db is not None:
            return
        self._db = await aiosqlite.connect(self.config.db_file)
        await ensure_schema(self._db)
        await self._worker.start()
        logger.info(f"Link cache ready (db={self.config.db_file})")

    async def close(self):
        """Flush pending writes, stop the worker and close the store."""
        await self._worker.stop()
        if self._db is not None:
            await self._db.close()
            self._db = None
        logger.info("Link cache closed")

    def _require_db(self) -> aiosqlite.Connection:
        if self._db is None:
            raise RuntimeError("LinkCache not started. Use 'async with' or call start() first.")
        return self._db

    async def lookup(self, page: str) -> Optional[List[str]]:
        """
        Return the cached links for a page, or None if neither tier has them.

        An empty durable result counts as absent.
        """
        async with self._lock:
            links = self._memory.get(page)
            if links is not None:
                self._memory_hits += 1
                return list(links)

            db = self._require_db()
            async with db.execute("SELECT link FROM cached WHERE page = ? ORDER BY rowid", (page,)) as cursor:
                rows = await cursor.fetchall()

            if not rows:
                self._misses += 1
                return None

            self._durable_hits += 1
            links = [row[0] for row in rows]
            if self.config.repopulate_memory:
                self._memory[page] = list(links)
            return links

    async def insert(self, page: str, links: List[str]):
        """
        Store links in memory now and queue them for durable storage.

        The command is queued under the lock so both tiers see inserts in the
        same order. A full queue therefore holds up other cache operations.
        """
        links = list(links)
        async with self._lock:
            logger.debug(f"Inserting {len(links)} links for '{page}' into cache")
            self._memory[page] = links
            await self._worker.submit(page, links)

    async def invalidate(self, page: str):
        """
        Forget a page in both tiers.

        Writes queued before this call are applied first so they cannot
        resurrect the deleted rows.
        """
        await self._worker.join()
        async with self._lock:
            self._memory.pop(page, None)
            db = self._require_db()
            await db.execute("DELETE FROM cached WHERE page = ?", (page,))
            await db.commit()
        logger.info(f"Invalidated cache for '{page}'")

    async def clear_memory(self):
        """Drop the whole memory tier. Durable rows are kept."""
        async with self._lock:
            count = len(self._memory)
            self._memory.clear()
        logger.info(f"Cleared {count} pages from memory cache")

    async def flush(self):
        """Wait until all submitted writes have reached the durable tier."""
        await self._worker.join()

    async def durable_row_count(self, page: str) -> int:
        async with self._lock:
            db = self._require_db()
            async with db.execute("SELECT COUNT(*) FROM cached WHERE page = ?", (page,)) as cursor:
                row = await cursor.fetchone()
        return row[0]

    def persistence_health(self) -> WorkerHealth:
        return self._worker.health()

    def stats(self) -> CacheStats:
        return CacheStats(
            memory_pages=len(self._memory),
            memory_links=sum(len(links) for links in self._memory.values()),
            memory_hits=self._memory_hits,
            durable_hits=self._durable_hits,
            misses=self._misses,
        )

    def __repr__(self):
        stats = self.stats()
        return (f"LinkCache(pages={stats.memory_pages}, links={stats.memory_links}, "
                f"db='{self.config.db_file}')")
