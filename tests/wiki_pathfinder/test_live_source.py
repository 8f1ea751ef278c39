import pytest

from wiki_pathfinder import WikipediaLinkSource

# Mark all tests in this file as integration tests
pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_fetch_links_from_live_wiki():
    async with WikipediaLinkSource() as source:
        links = await source.fetch_links("Berlin")

    assert len(links) > 50  # Berlin should have many links
    assert "Berlin" not in links
    assert len(links) == len(set(links))


@pytest.mark.asyncio
async def test_random_page_from_live_wiki():
    async with WikipediaLinkSource() as source:
        page = await source.random_page()

    assert isinstance(page, str)
    assert len(page) > 0
