import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_web_search_client
from api.models.api_models import SearchRequest, SearchResult
from clients.websearch_client import WebSearchClient
from errors.errors import APIError
from utils.config import SearchSettings, get_search_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/search", response_model=list[SearchResult])
async def search(
    request: SearchRequest,
    client: WebSearchClient = Depends(get_web_search_client),
    settings: SearchSettings = Depends(get_search_settings),
):
    logger.info("Received search request with query: %s", request.query)
    count = request.count if request.count is not None else settings.default_count
    try:
        results = await client.search(request.query, count)
    except APIError as e:
        logger.error("Web search error: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e

    logger.info("Found %d search results", len(results))
    return results
