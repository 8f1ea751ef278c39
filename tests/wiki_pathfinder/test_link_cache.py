"""
LinkCache tests against a real SQLite file in a temp directory.
"""

import asyncio

import pytest

from wiki_pathfinder import CacheConfig, LinkCache

pytestmark = pytest.mark.unit


@pytest.mark.asyncio
async def test_insert_is_immediately_visible(cache: LinkCache):
    """A lookup right after an insert sees the new links without waiting for the db."""
    await cache.insert("Berlin", ["Germany", "Spree"])

    assert await cache.lookup("Berlin") == ["Germany", "Spree"]


@pytest.mark.asyncio
async def test_lookup_unknown_page_is_absent(cache: LinkCache):
    assert await cache.lookup("Nowhere") is None
    assert cache.stats().misses == 1


@pytest.mark.asyncio
async def test_lookup_returns_a_copy(cache: LinkCache):
    await cache.insert("Berlin", ["Germany"])

    links = await cache.lookup("Berlin")
    links.append("Mutated")

    assert await cache.lookup("Berlin") == ["Germany"]


@pytest.mark.asyncio
async def test_repeated_insert_overwrites_memory_and_replaces_rows(cache: LinkCache):
    """Two inserts of the same links keep one copy in memory and one set of durable rows."""
    await cache.insert("P", ["X", "Y"])
    await cache.insert("P", ["X", "Y"])
    await cache.flush()

    assert await cache.lookup("P") == ["X", "Y"]
    assert await cache.durable_row_count("P") == 2


@pytest.mark.asyncio
async def test_append_mode_accumulates_duplicate_rows(cache_config: CacheConfig):
    """With upserts disabled the durable tier keeps every write."""
    config = cache_config.model_copy(update={"upsert_rows": False})
    async with LinkCache(config) as cache:
        await cache.insert("P", ["X", "Y"])
        await cache.insert("P", ["X", "Y"])
        await cache.flush()

        assert await cache.lookup("P") == ["X", "Y"]
        assert await cache.durable_row_count("P") == 4


@pytest.mark.asyncio
async def test_invalidate_removes_both_tiers(cache: LinkCache):
    await cache.insert("Berlin", ["Germany", "Spree"])
    await cache.flush()

    await cache.invalidate("Berlin")

    assert await cache.lookup("Berlin") is None
    assert await cache.durable_row_count("Berlin") == 0


@pytest.mark.asyncio
async def test_invalidate_unknown_page_is_noop(cache: LinkCache):
    await cache.invalidate("Nowhere")
    assert await cache.lookup("Nowhere") is None


@pytest.mark.asyncio
async def test_clear_memory_falls_back_to_durable_tier(cache: LinkCache):
    await cache.insert("Berlin", ["Germany", "Spree"])
    await cache.flush()

    await cache.clear_memory()
    assert cache.stats().memory_pages == 0

    assert await cache.lookup("Berlin") == ["Germany", "Spree"]
    stats = cache.stats()
    assert stats.durable_hits == 1
    assert stats.memory_pages == 1  # repopulated from the durable hit

    await cache.lookup("Berlin")
    assert cache.stats().memory_hits == 1


@pytest.mark.asyncio
async def test_durable_hit_without_repopulation(cache_config: CacheConfig):
    config = cache_config.model_copy(update={"repopulate_memory": False})
    async with LinkCache(config) as cache:
        await cache.insert("Berlin", ["Germany"])
        await cache.flush()
        await cache.clear_memory()

        assert await cache.lookup("Berlin") == ["Germany"]
        assert await cache.lookup("Berlin") == ["Germany"]
        stats = cache.stats()
        assert stats.memory_pages == 0
        assert stats.durable_hits == 2


@pytest.mark.asyncio
async def test_empty_link_set_is_absent_in_durable_tier(cache: LinkCache):
    """An empty link set is served from memory but leaves no rows behind."""
    await cache.insert("Stub", [])
    await cache.flush()

    assert await cache.lookup("Stub") == []

    await cache.clear_memory()
    assert await cache.lookup("Stub") is None


@pytest.mark.asyncio
async def test_links_survive_restart(cache_config: CacheConfig):
    async with LinkCache(cache_config) as cache:
        await cache.insert("Berlin", ["Germany", "Spree", "Brandenburg"])

    async with LinkCache(cache_config) as reopened:
        assert await reopened.lookup("Berlin") == ["Germany", "Spree", "Brandenburg"]


@pytest.mark.asyncio
async def test_concurrent_inserts_are_all_visible(cache: LinkCache):
    pages = [f"Page_{i}" for i in range(40)]

    await asyncio.gather(*[cache.insert(page, [f"{page}_link"]) for page in pages])
    results = await asyncio.gather(*[cache.lookup(page) for page in pages])

    assert results == [[f"{page}_link"] for page in pages]
    await cache.flush()
    assert cache.persistence_health().applied_commands == len(pages)


@pytest.mark.asyncio
async def test_lookup_before_start_raises(cache_config: CacheConfig):
    cache = LinkCache(cache_config)
    with pytest.raises(RuntimeError, match="not started"):
        await cache.lookup("Berlin")


@pytest.mark.asyncio
async def test_concurrent_inserts_agree_on_last_writer(tmp_path):
    """With a full queue, memory and the durable tier still end on the same insert."""
    config = CacheConfig(db_path=str(tmp_path / "tiny-queue.sqlite"), queue_maxsize=1)
    async with LinkCache(config) as cache:
        await asyncio.gather(*(cache.insert("Berlin", [f"Link_{i}"]) for i in range(20)))
        await cache.flush()

        in_memory = await cache.lookup("Berlin")
        await cache.clear_memory()

        assert await cache.lookup("Berlin") == in_memory
