"""
Link sources: where outbound links for an uncached page come from.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

import httpx

from wiki_pathfinder.config import SourceConfig
from wiki_pathfinder.exceptions import FetchError

logger = logging.getLogger(__name__)

ARTICLE_LINK_PATTERN = re.compile(r'<a href="/wiki/([\w()]*)"')


def dedupe_links(page: str, candidates: Iterable[str]) -> List[str]:
    """Keep first occurrences in order, dropping empties and self-links."""
    seen = {page}
    links = []
    for link in candidates:
        if not link or link in seen:
            continue
        seen.add(link)
        links.append(link)
    return links


def extract_links(page: str, html: str) -> List[str]:
    """
    Pull article links out of a rendered wiki page.

    Only plain `/wiki/<Title>` anchors match, so namespaced pages such as
    `Datei:` or `Kategorie:` are skipped by the character class.
    """
    return dedupe_links(page, ARTICLE_LINK_PATTERN.findall(html))


class LinkSource(ABC):
    """Produces the outbound links of a page, usually over the network."""

    @abstractmethod
    async def fetch_links(self, page: str) -> List[str]:
        """
        Return the ordered, deduplicated outbound links of a page, excluding itself.

        Raises:
            FetchError: If the page cannot be retrieved or parsed.
        """
        pass

    @abstractmethod
    async def random_page(self) -> str:
        """Return the identifier of a random page."""
        pass

    async def close(self):
        """Release any held resources."""
        pass


class WikipediaLinkSource(LinkSource):
    """
    Fetches rendered article HTML from a Wikipedia edition and extracts links.

    Usage:
        async with WikipediaLinkSource() as source:
            links = await source.fetch_links("Berlin")
    """

    def __init__(self, config: Optional[SourceConfig] = None, client: Optional[httpx.AsyncClient] = None):
        self.config = config or SourceConfig()
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout_seconds,
                headers={"User-Agent": self.config.user_agent},
            )
        return self._client

    def page_url(self, page: str) -> str:
        return f"{self.config.base_url}{page}"

    async def fetch_links(self, page: str) -> List[str]:
        url = self.page_url(page)
        try:
            response = await self.client.get(url)
        except httpx.RequestError as e:
            logger.warning(f"Request for '{page}' failed: {e}")
            raise FetchError(f"Request failed: {e}", page=page)

        if response.status_code != httpx.codes.OK:
            logger.warning(f"Fetching '{page}' returned status {response.status_code}")
            raise FetchError("Bad status code", page=page)

        try:
            html = response.text
        except (UnicodeDecodeError, LookupError) as e:
            raise FetchError("Failed to get text", page=page) from e

        links = extract_links(page, html)
        logger.debug(f"Extracted {len(links)} links from '{page}'")
        return links

    async def random_page(self) -> str:
        try:
            response = await self.client.head(self.config.random_url, follow_redirects=True)
        except httpx.RequestError as e:
            raise FetchError(f"Request failed: {e}")

        if response.status_code != httpx.codes.OK:
            logger.warning(f"Random page request returned status {response.status_code}")
            raise FetchError("Bad status code")

        page = response.url.path.rstrip("/").rsplit("/", 1)[-1]
        if not page:
            raise FetchError(f"Could not read page from {response.url}")
        logger.info(f"Random page: {page}")
        return page

    async def close(self):
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None
