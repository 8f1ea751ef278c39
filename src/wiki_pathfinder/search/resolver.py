import logging
from typing import List

from wiki_pathfinder.cache import LinkCache
from wiki_pathfinder.source import LinkSource

logger = logging.getLogger(__name__)


class LinkResolver:
    """Answers "what does this page link to?" from the cache, fetching on a miss."""

    def __init__(self, cache: LinkCache, source: LinkSource):
        self.cache = cache
        self.source = source

    async def resolve(self, page: str) -> List[str]:
        """
        Return the outbound links of a page.

        Raises:
            FetchError: If the page is uncached and the source fails. Failures are not cached.
        """
        links = await self.cache.lookup(page)
        if links is not None:
            return links

        logger.debug(f"Cache miss for '{page}', fetching")
        links = await self.source.fetch_links(page)
        await self.cache.insert(page, links)
        return links
