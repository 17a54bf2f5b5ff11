import asyncio

import httpx
import pytest

from clients.websearch_client import WebSearchClient, parse_duckduckgo_html
from errors.errors import WebSearchError
from utils.config import SearchSettings

RESULT_PAGE = """
<html><body>
<div class="result results_links">
  <h2 class="result__title">
    <a class="result__a" href="https://example.com/one">  First result  </a>
  </h2>
  <a class="result__snippet" href="https://example.com/one">
    Snippet for the first result.
  </a>
</div>
<div class="result results_links">
  <h2 class="result__title"><a class="result__a">No link here</a></h2>
  <a class="result__snippet">Dropped because the title has no href.</a>
</div>
<div class="result results_links">
  <h2 class="result__title"><a class="result__a" href="https://example.com/three">Third</a></h2>
</div>
<div class="result results_links">
  <h2 class="result__title"><a class="result__a" href="https://example.com/four">Fourth</a></h2>
  <a class="result__snippet">Fourth snippet</a>
</div>
</body></html>
"""


def test_parse_keeps_complete_results_only():
    results = parse_duckduckgo_html(RESULT_PAGE, count=10)

    assert [r.url for r in results] == [
        "https://example.com/one",
        "https://example.com/four",
    ]
    assert results[0].title == "First result"
    assert results[0].content == "Snippet for the first result."


def test_parse_count_limits_inspected_blocks():
    # the first three blocks hold only one complete result
    results = parse_duckduckgo_html(RESULT_PAGE, count=3)
    assert len(results) == 1

    assert parse_duckduckgo_html(RESULT_PAGE, count=0) == []


def test_parse_empty_page():
    assert parse_duckduckgo_html("<html><body></body></html>", count=5) == []


@pytest.fixture
def settings():
    return SearchSettings(base_url="https://search.test", user_agent="test-agent")


def test_search_sends_query_and_user_agent(settings):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["q"] = request.url.params["q"]
        seen["ua"] = request.headers["user-agent"]
        return httpx.Response(200, text=RESULT_PAGE)

    async def run():
        async with WebSearchClient(
            settings, transport=httpx.MockTransport(handler)
        ) as client:
            return await client.search("rust async news", 5)

    results = asyncio.run(run())

    assert seen == {"path": "/html/", "q": "rust async news", "ua": "test-agent"}
    assert len(results) == 2


def test_search_http_error_raises_websearch_error(settings):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="busy")

    async def run():
        async with WebSearchClient(
            settings, transport=httpx.MockTransport(handler)
        ) as client:
            await client.search("anything", 5)

    with pytest.raises(WebSearchError) as exc_info:
        asyncio.run(run())
    assert exc_info.value.status == 503


def test_search_network_error_raises_websearch_error(settings):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async def run():
        async with WebSearchClient(
            settings, transport=httpx.MockTransport(handler)
        ) as client:
            await client.search("anything", 5)

    with pytest.raises(WebSearchError, match="Request failed"):
        asyncio.run(run())


def test_search_follows_redirects(settings):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/html/":
            return httpx.Response(
                301, headers={"Location": "https://search.test/moved/"}
            )
        return httpx.Response(200, text=RESULT_PAGE)

    async def run():
        async with WebSearchClient(
            settings, transport=httpx.MockTransport(handler)
        ) as client:
            return await client.search("anything", 5)

    assert len(asyncio.run(run())) == 2
