"""Web search over the DuckDuckGo HTML front-end."""

from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup

from errors.errors import WebSearchError
from models.search_models import SearchEngine, SearchResult
from utils.config import SearchSettings, get_search_settings

from .base_client import BaseAPIClient

logger = logging.getLogger(__name__)


def parse_duckduckgo_html(html: str, count: int) -> list[SearchResult]:
    """Extract up to ``count`` results from a DuckDuckGo HTML result page.

    Only the first ``count`` result blocks are inspected; blocks without a
    title link, a snippet or a link target are skipped, so fewer than
    ``count`` results may come back.
    """
    soup = BeautifulSoup(html, "html.parser")
    results: list[SearchResult] = []
    for block in soup.select(".result")[:count]:
        title_elem = block.select_one(".result__title a")
        snippet_elem = block.select_one(".result__snippet")
        if title_elem is None or snippet_elem is None:
            continue

        url = title_elem.get("href") or ""
        if not url:
            continue
        results.append(
            SearchResult(
                title=title_elem.get_text().strip(),
                content=snippet_elem.get_text().strip(),
                url=url,
            )
        )
    return results


class WebSearchClient(BaseAPIClient):
    BASE_URL = "https://html.duckduckgo.com"
    ERROR_CLASS = WebSearchError

    def __init__(
        self,
        settings: SearchSettings | None = None,
        *,
        engine: SearchEngine = SearchEngine.DUCKDUCKGO,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or get_search_settings()
        super().__init__(
            settings.base_url,
            timeout=settings.timeout,
            headers={"User-Agent": settings.user_agent},
            transport=transport,
        )
        self.engine = engine

    async def search(self, query: str, count: int) -> list[SearchResult]:
        if self.engine is SearchEngine.DUCKDUCKGO:
            return await self._search_duckduckgo(query, count)
        raise WebSearchError(f"Unsupported search engine: {self.engine}")

    async def _search_duckduckgo(self, query: str, count: int) -> list[SearchResult]:
        logger.info("Performing DuckDuckGo search for query: %s", query)
        html = await self._get_text("/html/", params={"q": query})
        results = parse_duckduckgo_html(html, count)
        logger.info("Found %d DuckDuckGo search results", len(results))
        return results
