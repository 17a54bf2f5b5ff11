"""Asynchronous wrapper for the **Ollama** chat API running on localhost."""

from __future__ import annotations

import logging

import httpx
import msgspec

from errors.errors import OllamaAPIError
from models.ollama_models import (
    ChatMessage,
    OllamaChatRequest,
    OllamaChatResponse,
    Tool,
)
from utils.config import OllamaSettings, get_ollama_settings

from .base_client import BaseAPIClient

logger = logging.getLogger(__name__)

_decoder = msgspec.json.Decoder(OllamaChatResponse)


class OllamaClient(BaseAPIClient):
    """Non-streaming `/api/chat` calls with function tools."""

    BASE_URL = "http://localhost:11434"
    ERROR_CLASS = OllamaAPIError

    def __init__(
        self,
        settings: OllamaSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or get_ollama_settings()
        super().__init__(
            settings.base_url, timeout=settings.timeout, transport=transport
        )

    async def chat(
        self,
        messages: list[ChatMessage],
        model: str,
        tools: list[Tool] | None = None,
    ) -> OllamaChatResponse:
        logger.info("Sending chat request to Ollama with model: %s", model)
        request = OllamaChatRequest(
            model=model, messages=messages, tools=tools or [], stream=False
        )
        raw = await self._post_json("/api/chat", msgspec.json.encode(request))
        try:
            chat_response = _decoder.decode(raw)
        except msgspec.DecodeError as e:
            logger.error("Ollama returned an unexpected payload: %s", e)
            raise OllamaAPIError(f"Invalid response from Ollama: {e}") from e

        logger.info("Received response from Ollama chat")
        return chat_response
