from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from api.dependencies import close_clients
from api.routers.chat_router import router as chat_router
from api.routers.search_router import router as search_router
from utils.config import get_ollama_settings, get_server_settings
from utils.logging_utils import setup_logging

logger = setup_logging(__name__, get_server_settings().log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting chat server...")
    yield
    await close_clients()


# FastAPI Instance
app = FastAPI(title="Local Chat API", version="1.0.0", lifespan=lifespan)

app.include_router(chat_router, tags=["chat"])
app.include_router(search_router, tags=["search"])


@app.get("/health")
async def health():
    return {"status": "ok", "model": get_ollama_settings().model}


def run() -> None:
    settings = get_server_settings()
    logger.info(
        "Server will be available at http://%s:%s", settings.host, settings.port
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
