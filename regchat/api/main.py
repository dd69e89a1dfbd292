"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, regchat.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from regchat.api.deps.dependencies import get_service_cache
from regchat.api.routers.error_handling import error_response
from regchat.boundary.db import create_all_tables
from regchat.configs import get_settings
from regchat.observability import configure_logging
from regchat.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import chat_history_router, chat_router, documents_router, health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger("uvicorn")

    # Startup
    if settings.database.auto_create_tables:
        await create_all_tables()
        logger.info("Database tables ensured")

    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    # Trigger property access to load instances
    _ = cache.embedder
    _ = cache.vector_index
    _ = cache.generator
    _ = cache.interaction_logger
    logger.info("Service cache pre-warmed")

    yield

    # Shutdown: pending chat log writes finish before the process exits
    await cache.aclose()
    logger.info("Service cache cleared")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return malformed bodies and wrong field types as 400 envelopes."""
    return error_response(400, "Invalid request", exc.errors())


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Regulatory Compliance Chat API",
        description="Retrieval-augmented chat over federal documents and regulations",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Register all routers with /api prefix
    app.include_router(health_router, prefix="/api")
    app.include_router(chat_router, prefix="/api")
    app.include_router(chat_history_router, prefix="/api")
    app.include_router(documents_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "regchat.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
