"""
Pytest configuration and shared fixtures.
"""

import asyncio
import logging
from typing import Dict, List, Optional, Set

import pytest
import pytest_asyncio

from wiki_pathfinder import CacheConfig, FetchError, LinkCache, LinkResolver, PathFinder
from wiki_pathfinder.source import LinkSource

# Configure logging for tests
logging.basicConfig(level=logging.INFO)


class FakeLinkSource(LinkSource):
    """In-memory link graph standing in for the live wiki."""

    def __init__(self, graph: Dict[str, List[str]], failing: Optional[Set[str]] = None,
                 random_pages: Optional[List[str]] = None):
        self.graph = graph
        self.failing = failing or set()
        self.random_pages = list(random_pages or graph)
        self.fetched: List[str] = []
        self.gates: Dict[str, asyncio.Event] = {}
        self.closed = False

    async def fetch_links(self, page: str) -> List[str]:
        gate = self.gates.get(page)
        if gate is not None:
            await gate.wait()
        self.fetched.append(page)
        if page in self.failing:
            raise FetchError("Bad status code", page=page)
        return [link for link in self.graph.get(page, []) if link != page]

    async def random_page(self) -> str:
        if not self.random_pages:
            raise FetchError("Bad status code")
        return self.random_pages.pop(0)

    async def close(self):
        self.closed = True


class SelfLinkingSource(FakeLinkSource):
    """Variant that returns links verbatim, self-links included."""

    async def fetch_links(self, page: str) -> List[str]:
        self.fetched.append(page)
        if page in self.failing:
            raise FetchError("Bad status code", page=page)
        return list(self.graph.get(page, []))


async def wait_until_stopped(worker, timeout: float = 2.0):
    """Poll until a persistence worker has exited."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while worker.running and loop.time() < deadline:
        await asyncio.sleep(0.01)


@pytest.fixture
def cache_config(tmp_path) -> CacheConfig:
    """Cache settings pointing at a fresh SQLite file."""
    return CacheConfig(db_path=str(tmp_path / "page-cache.sqlite"), queue_maxsize=16)


@pytest_asyncio.fixture
async def cache(cache_config: CacheConfig):
    """A started LinkCache, closed after the test."""
    link_cache = LinkCache(cache_config)
    await link_cache.start()
    yield link_cache
    await link_cache.close()


@pytest.fixture
def graph() -> Dict[str, List[str]]:
    """
    Small link graph:

        A -> B, C
        B -> D
        C -> D, E
        D -> F
        E -> A
    """
    return {
        "A": ["B", "C"],
        "B": ["D"],
        "C": ["D", "E"],
        "D": ["F"],
        "E": ["A"],
        "F": [],
    }


@pytest.fixture
def source(graph) -> FakeLinkSource:
    return FakeLinkSource(graph)


@pytest.fixture
def resolver(cache: LinkCache, source: FakeLinkSource) -> LinkResolver:
    return LinkResolver(cache, source)


@pytest.fixture
def path_finder(resolver: LinkResolver) -> PathFinder:
    return PathFinder(resolver)
