"""Function tools the model may call during a chat."""

import abc
import asyncio
import logging
from typing import Any, ClassVar

from pydantic import BaseModel, ValidationError

from chatbot.python_invoker import PythonInvoker
from clients.websearch_client import WebSearchClient
from errors.errors import APIError, PythonInvokerError, ToolExecutionError
from models.ollama_models import Tool, ToolFunction
from models.search_models import SearchResult
from models.tool_models import PythonInvokerInput, WebSearchInput

logger = logging.getLogger(__name__)


class BaseTool(abc.ABC):
    name: ClassVar[str]
    description: ClassVar[str]
    parameters: ClassVar[dict[str, Any]]
    args_schema: ClassVar[type[BaseModel]]

    def definition(self) -> Tool:
        return Tool(
            function=ToolFunction(
                name=self.name,
                description=self.description,
                parameters=self.parameters,
            )
        )

    def parse(self, arguments: dict[str, Any]) -> BaseModel | None:
        """Validate model-supplied arguments; ``None`` when they are unusable."""
        try:
            return self.args_schema.model_validate(arguments)
        except ValidationError as e:
            logger.warning("Ignoring %s call with bad arguments: %s", self.name, e)
            return None

    @abc.abstractmethod
    async def arun(self, args: BaseModel) -> str: ...


def format_search_results(results: list[SearchResult]) -> str:
    return "\n".join(
        f"Title: {r.title}\nURL: {r.url}\nContent: {r.content}\n---" for r in results
    )


class WebSearchTool(BaseTool):
    name = "websearch"
    description = "Get search results from web for latest events, news."
    parameters = {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "The search query to do web search on.",
            },
            "count": {
                "type": "number",
                "description": "Optional field to mention how many web search results are needed",
            },
        },
        "required": ["query"],
    }
    args_schema = WebSearchInput

    def __init__(self, client: WebSearchClient, *, default_count: int = 5) -> None:
        self.client = client
        self.default_count = default_count

    async def arun(self, args: WebSearchInput) -> str:
        count = args.count
        if count is None or count < 0:
            count = self.default_count
        try:
            results = await self.client.search(args.query, count)
        except APIError as e:
            logger.error("Web search error: %s", e)
            raise ToolExecutionError(f"Web search failed: {e}") from e
        return format_search_results(results)


class PythonInvokerTool(BaseTool):
    name = "python_invoker"
    description = (
        "Executes a python script provided as a string and returns its output."
    )
    parameters = {
        "type": "object",
        "properties": {
            "script": {
                "type": "string",
                "description": "The Python script to execute.",
            },
            "args": {
                "type": "array",
                "description": "Optional arguments to pass to the script.",
                "items": {"type": "string"},
            },
        },
        "required": ["script"],
    }
    args_schema = PythonInvokerInput

    def __init__(self, invoker: PythonInvoker) -> None:
        self.invoker = invoker

    async def arun(self, args: PythonInvokerInput) -> str:
        # subprocess.run blocks; keep the event loop free
        try:
            result = await asyncio.to_thread(
                self.invoker.run_script, args.script, args.args
            )
        except PythonInvokerError as e:
            logger.error("Python invoker error: %s", e)
            raise ToolExecutionError(f"Python script execution failed: {e}") from e
        return result.render()
