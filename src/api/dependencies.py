"""Process-wide clients shared by the routers.

Each getter is memoised with ``lru_cache`` so every request reuses the same
``httpx`` connection pool. Tests swap them out through
``app.dependency_overrides``.
"""

from functools import lru_cache

from chatbot.handler import QueryHandler
from chatbot.system_prompt import load_system_prompt
from chatbot.python_invoker import PythonInvoker
from chatbot.tools import BaseTool, PythonInvokerTool, WebSearchTool
from clients.ollama_client import OllamaClient
from clients.websearch_client import WebSearchClient
from utils.config import get_agent_settings, get_ollama_settings, get_search_settings


@lru_cache(maxsize=1)
def get_web_search_client() -> WebSearchClient:
    return WebSearchClient(get_search_settings())


@lru_cache(maxsize=1)
def get_ollama_client() -> OllamaClient:
    return OllamaClient(get_ollama_settings())


@lru_cache(maxsize=1)
def get_query_handler() -> QueryHandler:
    agent_settings = get_agent_settings()
    search_settings = get_search_settings()

    tools: list[BaseTool] = [
        WebSearchTool(
            get_web_search_client(), default_count=search_settings.default_count
        )
    ]
    if agent_settings.python_tool_enabled:
        invoker = PythonInvoker(
            agent_settings.python_executable, timeout=agent_settings.python_timeout
        )
        tools.append(PythonInvokerTool(invoker))

    return QueryHandler(
        get_ollama_client(),
        tools,
        default_model=get_ollama_settings().model,
        system_prompt=load_system_prompt(
            agent_settings.system_prompt_path,
            python_tool_enabled=agent_settings.python_tool_enabled,
        ),
        max_tool_rounds=agent_settings.max_tool_rounds,
    )


async def close_clients() -> None:
    """Close whichever shared clients were created, and forget them."""
    for getter in (get_ollama_client, get_web_search_client):
        if getter.cache_info().currsize:
            await getter().aclose()
            getter.cache_clear()
    get_query_handler.cache_clear()
