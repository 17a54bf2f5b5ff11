from pydantic import BaseModel, Field

from models.search_models import SearchResult


class ChatRequest(BaseModel):
    """Chat request model."""

    message: str = Field(..., description="The user message sent to the model.")
    model: str | None = Field(
        default=None,
        description="Ollama model name; the configured default when omitted.",
    )


class ChatResponse(BaseModel):
    response: str


class SearchRequest(BaseModel):
    """Search request model."""

    query: str = Field(..., description="The search query string.")
    count: int | None = Field(
        default=None,
        ge=0,
        description="How many results to return; 5 unless configured otherwise.",
    )


__all__ = ["ChatRequest", "ChatResponse", "SearchRequest", "SearchResult"]
