from __future__ import annotations

import logging
from datetime import datetime

from pydantic import BaseModel

from chatbot.system_prompt import load_system_prompt, with_current_datetime
from chatbot.tools import BaseTool
from clients.ollama_client import OllamaClient
from errors.errors import APIError, ChatError, ToolExecutionError
from models.ollama_models import ChatMessage, OllamaChatResponse

logger = logging.getLogger(__name__)


class QueryHandler:
    """Runs one chat turn against the model, executing any tools it asks for.

    The model is called with the system prompt, the user message and the tool
    definitions. Whenever its reply names a known tool, the tool output is fed
    back as a ``tool`` message and the model is called again; the first reply
    that triggers no tool is the answer.
    """

    def __init__(
        self,
        ollama_client: OllamaClient,
        tools: list[BaseTool],
        *,
        default_model: str,
        system_prompt: str | None = None,
        max_tool_rounds: int = 8,
    ) -> None:
        self.ollama_client = ollama_client
        self.tools = {tool.name: tool for tool in tools}
        self.default_model = default_model
        self.system_prompt = system_prompt or load_system_prompt()
        self.max_tool_rounds = max_tool_rounds

    def build_messages(
        self, message: str, now: datetime | None = None
    ) -> list[ChatMessage]:
        return [
            ChatMessage(
                role="system",
                content=with_current_datetime(self.system_prompt, now),
            ),
            ChatMessage(role="user", content=message),
        ]

    def select_tool_call(
        self, chat_response: OllamaChatResponse
    ) -> tuple[BaseTool, BaseModel] | None:
        """First usable tool call as ``(tool, parsed_args)``, or ``None``."""
        for tool_call in chat_response.message.tool_calls or []:
            name = tool_call.function.name
            tool = self.tools.get(name)
            if tool is None:
                logger.warning("Model requested unknown tool: %s", name)
                continue

            args = tool.parse(tool_call.function.arguments)
            if args is None:
                continue

            return tool, args

        return None

    async def handle_chat(self, message: str, model: str | None = None) -> str:
        model = model or self.default_model
        logger.info("Processing chat request for model: %s", model)

        messages = self.build_messages(message)
        definitions = [tool.definition() for tool in self.tools.values()]
        tools_run = 0

        while True:
            try:
                chat_response = await self.ollama_client.chat(
                    messages, model, definitions
                )
            except APIError as e:
                logger.error("Ollama chat error: %s", e)
                raise ChatError(str(e)) from e

            logger.info("Tool calls: %s", chat_response.message.tool_calls)
            selected = self.select_tool_call(chat_response)
            if selected is None:
                logger.info("Final response received from the model.")
                return chat_response.message.content

            if tools_run >= self.max_tool_rounds:
                raise ChatError(
                    f"Model kept calling tools after {self.max_tool_rounds} rounds"
                )

            tool, args = selected
            logger.info("Invoking tool %s", tool.name)
            try:
                tool_output = await tool.arun(args)
            except ToolExecutionError as e:
                logger.error("Tool processing error: %s", e)
                raise ChatError(str(e)) from e
            tools_run += 1

            messages.append(
                ChatMessage(
                    role="assistant",
                    content=chat_response.message.content,
                    tool_calls=chat_response.message.tool_calls,
                )
            )
            messages.append(ChatMessage(role="tool", content=tool_output))
