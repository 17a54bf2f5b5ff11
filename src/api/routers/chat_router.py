from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_query_handler
from api.models.api_models import ChatRequest, ChatResponse
from chatbot.handler import QueryHandler
from errors.errors import ChatError

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest, handler: QueryHandler = Depends(get_query_handler)
):
    try:
        answer = await handler.handle_chat(request.message, request.model)
    except ChatError as e:
        return JSONResponse(
            status_code=500,
            content=ChatResponse(response=f"Error: {e}").model_dump(),
        )
    return ChatResponse(response=answer)
