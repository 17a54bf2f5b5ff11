import asyncio

import pytest

from api import dependencies
from api.dependencies import (
    close_clients,
    get_ollama_client,
    get_query_handler,
    get_web_search_client,
)
from tests.unit.chatbot.fakes import FakeOllamaClient, FakeSearchClient, reply


@pytest.fixture(autouse=True)
def _fresh_dependencies():
    for getter in (get_query_handler, get_ollama_client, get_web_search_client):
        getter.cache_clear()
    yield
    for getter in (get_query_handler, get_ollama_client, get_web_search_client):
        getter.cache_clear()


@pytest.fixture
def fakes(monkeypatch):
    ollama = FakeOllamaClient(
        reply("", ("websearch", {"query": "q"})),
        reply("done"),
    )
    search = FakeSearchClient()
    monkeypatch.setattr(dependencies, "get_ollama_client", lambda: ollama)
    monkeypatch.setattr(dependencies, "get_web_search_client", lambda: search)
    return ollama, search


def _advertised_tools(ollama: FakeOllamaClient) -> set[str]:
    return {tool.function.name for tool in ollama.calls[0]["tools"]}


def test_handler_advertises_both_tools_by_default(fakes):
    ollama, search = fakes

    answer = asyncio.run(get_query_handler().handle_chat("q"))

    assert answer == "done"
    assert _advertised_tools(ollama) == {"websearch", "python_invoker"}
    assert search.calls == [("q", 5)]


def test_disabled_python_tool_is_hidden(fakes, monkeypatch):
    monkeypatch.setenv("AGENT_PYTHON_TOOL_ENABLED", "false")
    ollama, _ = fakes

    handler = get_query_handler()
    asyncio.run(handler.handle_chat("q"))

    assert _advertised_tools(ollama) == {"websearch"}
    assert "python_invoker" not in handler.system_prompt


def test_search_default_count_reaches_chat_tool(fakes, monkeypatch):
    monkeypatch.setenv("SEARCH_DEFAULT_COUNT", "3")
    _, search = fakes

    asyncio.run(get_query_handler().handle_chat("q"))

    assert search.calls == [("q", 3)]


def test_handler_uses_configured_model(fakes, monkeypatch):
    monkeypatch.setenv("OLLAMA_MODEL", "mistral")
    ollama, _ = fakes

    asyncio.run(get_query_handler().handle_chat("q"))

    assert ollama.calls[0]["model"] == "mistral"


def test_close_clients_closes_and_forgets_shared_clients():
    ollama = get_ollama_client()
    search = get_web_search_client()

    asyncio.run(close_clients())

    assert ollama._client.is_closed
    assert search._client.is_closed
    assert get_ollama_client.cache_info().currsize == 0
    assert get_web_search_client.cache_info().currsize == 0
    assert get_ollama_client() is not ollama
