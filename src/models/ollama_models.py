"""Wire structs for the Ollama ``/api/chat`` endpoint."""

from typing import Any

import msgspec


class FunctionCall(msgspec.Struct):
    """Function name and arguments chosen by the model."""

    name: str
    arguments: dict[str, Any] = {}


class ToolCall(msgspec.Struct):
    function: FunctionCall


class ChatMessage(msgspec.Struct, omit_defaults=True):
    """One message of the conversation sent to (or returned by) the model."""

    role: str
    content: str
    tool_calls: list[ToolCall] | None = None


class ToolFunction(msgspec.Struct):
    name: str
    description: str
    parameters: dict[str, Any]


class Tool(msgspec.Struct):
    """Function tool advertised to the model."""

    function: ToolFunction
    type: str = "function"


class OllamaChatRequest(msgspec.Struct):
    model: str
    messages: list[ChatMessage]
    tools: list[Tool] = []
    stream: bool = False


class OllamaChatResponse(msgspec.Struct):
    """Non-streaming chat reply; unknown fields (timings, counts) are ignored."""

    model: str
    message: ChatMessage
    done: bool = True
