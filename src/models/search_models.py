from enum import Enum

from pydantic import BaseModel


class SearchEngine(str, Enum):
    DUCKDUCKGO = "duckduckgo"


class SearchResult(BaseModel):
    """Single organic result scraped from the search provider."""

    title: str
    content: str
    url: str
