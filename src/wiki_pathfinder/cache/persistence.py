"""
PersistenceWorker - the only writer to the durable link store.

Write commands are consumed from a bounded FIFO queue by a single asyncio
task that owns its own SQLite connection, so commands submitted from this
process are applied strictly in submission order.
"""

import asyncio
import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import aiosqlite

from wiki_pathfinder.exceptions import PersistenceFailure
from wiki_pathfinder.models import WorkerHealth

logger = logging.getLogger(__name__)

SCHEMA = (
    "CREATE TABLE IF NOT EXISTS cached (page TEXT NOT NULL, link TEXT NOT NULL)",
    "CREATE INDEX IF NOT EXISTS cached_page_idx ON cached (page)",
)


async def ensure_schema(db: aiosqlite.Connection) -> None:
    """Create the link table if this is a fresh database file."""
    for statement in SCHEMA:
        await db.execute(statement)
    await db.commit()


@dataclass(frozen=True)
class WriteLinksCommand:
    """Persist the outbound links discovered for one page."""
    page: str
    links: tuple


class PersistenceWorker:
    """
    Applies WriteLinksCommands to SQLite in a background task.

    Any database error while applying a command stops the worker for good.
    The failure is logged and kept in health(); submitters are never raised to.
    """

    def __init__(self, db_path: Path, maxsize: int = 1024, upsert: bool = True):
        self.db_path = Path(db_path)
        self.upsert = upsert
        self._queue: asyncio.Queue[Optional[WriteLinksCommand]] = asyncio.Queue(maxsize=maxsize)
        self._task: Optional[asyncio.Task] = None
        self._applied = 0
        self._enqueued = 0
        self._handled = 0
        self._dropped = 0
        self._error: Optional[str] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self):
        """Open the write connection and start consuming commands."""
        if self.running:
            return
        db = await aiosqlite.connect(self.db_path)
        await ensure_schema(db)
        self._task = asyncio.create_task(self._run(db), name="persistence-worker")
        logger.info(f"Persistence worker started for {self.db_path}")

    async def submit(self, page: str, links: List[str]):
        """
        Queue links for durable storage without waiting for the write.

        Blocks while the queue is full. Commands submitted to a dead worker are dropped.
        """
        if not self.running:
            self._dropped += 1
            logger.warning(f"Persistence worker not running, dropping {len(links)} links for '{page}'")
            return
        await self._queue.put(WriteLinksCommand(page=page, links=tuple(links)))
        self._enqueued += 1

    async def join(self):
        """
        Wait until every command queued before this call has been handled
        (or the worker died). Later submissions do not extend the wait.
        """
        target = self._enqueued
        while self.running and self._handled < target:
            await asyncio.sleep(0.01)

    async def stop(self):
        """Apply the remaining commands, then shut the worker down."""
        if not self.running:
            return
        await self._queue.put(None)
        await self._task
        logger.info("Persistence worker stopped")

    def health(self) -> WorkerHealth:
        return WorkerHealth(
            running=self.running,
            applied_commands=self._applied,
            pending_commands=self._queue.qsize(),
            dropped_commands=self._dropped,
            error=self._error,
        )

    async def _run(self, db: aiosqlite.Connection):
        try:
            while True:
                command = await self._queue.get()
                try:
                    if command is None:
                        return
                    await self._apply(db, command)
                    self._applied += 1
                finally:
                    if command is not None:
                        self._handled += 1
                    self._queue.task_done()
        except Exception as e:
            self._error = f"{type(e).__name__}: {e}"
            logger.error(f"Persistence worker terminated: {self._error}", exc_info=True)
            self._discard_pending()
        finally:
            await db.close()

    def _discard_pending(self):
        while not self._queue.empty():
            self._queue.get_nowait()
            self._queue.task_done()
            self._dropped += 1

    async def _apply(self, db: aiosqlite.Connection, command: WriteLinksCommand):
        logger.debug(f"Writing {len(command.links)} links for '{command.page}' to db")
        try:
            if self.upsert:
                await db.execute("DELETE FROM cached WHERE page = ?", (command.page,))
            await db.executemany(
                "INSERT INTO cached (page, link) VALUES (?, ?)",
                [(command.page, link) for link in command.links],
            )
            await db.commit()
        except sqlite3.Error as e:
            await db.rollback()
            raise PersistenceFailure(f"Writing links for '{command.page}' failed: {e}") from e
        logger.debug(f"Finished writing links for '{command.page}'")
