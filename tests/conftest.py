import pytest

from utils.config import (
    get_agent_settings,
    get_ollama_settings,
    get_search_settings,
    get_server_settings,
)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are memoised per process; start every test from a clean slate."""
    getters = (
        get_agent_settings,
        get_ollama_settings,
        get_search_settings,
        get_server_settings,
    )
    for getter in getters:
        getter.cache_clear()
    yield
    for getter in getters:
        getter.cache_clear()
