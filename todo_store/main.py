"""FastAPI application exposing the todo store."""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from todo_store.api.routes import router as api_router
from todo_store.logging_utils import configure_logging, reset_request_id, set_request_id
from todo_store.settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting todo store API (collection=%s)", settings.store_name)
    yield
    logger.info("Shutting down todo store API")


app = FastAPI(
    title="Todo Store API",
    description="In-memory todo store for the demo client",
    version="1.0.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request_token = set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        reset_request_id(request_token)
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with basic API info."""
    return {
        "message": "Todo Store API",
        "endpoints": "/api/todos",
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(api_router, prefix="/api")


def main() -> int:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
