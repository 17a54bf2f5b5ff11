import sys
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class ServerSettings(BaseSettings):
    """Where the HTTP server listens and how verbose it is."""

    host: str = Field("127.0.0.1", description="Bind address")
    port: int = Field(8080, description="Bind port")
    log_level: str = Field("INFO", description="Root logging level")

    @field_validator("log_level", mode="before")
    def normalise_log_level(cls, v):  # pylint: disable=no-self-argument
        level = str(v).strip().upper()
        level = LOG_LEVEL_ALIASES.get(level, level)
        if level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}"
            )
        return level

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "APP_",
        "extra": "ignore",
    }


class OllamaSettings(BaseSettings):
    """Settings for the locally hosted Ollama runtime."""

    base_url: str = Field(
        "http://localhost:11434", description="Ollama HTTP endpoint"
    )
    model: str = Field(
        "llama3.1", description="Model used when the request names none"
    )
    timeout: int = Field(
        default=120, description="Chat request timeout in seconds"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "OLLAMA_",
        "extra": "ignore",
    }


class SearchSettings(BaseSettings):
    """Settings for the DuckDuckGo HTML search provider."""

    base_url: str = Field(
        "https://html.duckduckgo.com", description="Search provider host"
    )
    user_agent: str = Field(
        DEFAULT_USER_AGENT, description="User-Agent sent with search requests"
    )
    timeout: int = Field(10, description="Search request timeout in seconds")
    default_count: int = Field(
        5, description="Number of results when the caller does not ask for one"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "SEARCH_",
        "extra": "ignore",
    }


class AgentSettings(BaseSettings):
    """Settings for the tool-calling chat loop."""

    system_prompt_path: str | None = Field(
        default=None,
        description="Optional file whose text replaces the bundled system prompt",
    )
    max_tool_rounds: int = Field(
        8, description="How many tool invocations a single chat may trigger"
    )
    python_tool_enabled: bool = Field(
        True, description="Advertise the python_invoker tool to the model"
    )
    python_executable: str = Field(
        default=sys.executable, description="Interpreter used by python_invoker"
    )
    python_timeout: int = Field(
        30, description="Seconds before a python_invoker script is killed"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "AGENT_",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_server_settings() -> ServerSettings:
    return ServerSettings()


@lru_cache(maxsize=1)
def get_ollama_settings() -> OllamaSettings:
    return OllamaSettings()


@lru_cache(maxsize=1)
def get_search_settings() -> SearchSettings:
    return SearchSettings()


@lru_cache(maxsize=1)
def get_agent_settings() -> AgentSettings:
    return AgentSettings()
