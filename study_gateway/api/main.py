"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, study_gateway.api, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from study_gateway import __version__
from study_gateway.api import api_router
from study_gateway.api.deps.dependencies import get_service_cache
from study_gateway.configs import get_settings
from study_gateway.observability import configure_logging
from study_gateway.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.observability.level)
    logger = logging.getLogger("uvicorn")

    # Startup
    cache = get_service_cache()
    _ = cache.completion_client
    logger.info(
        f"Study gateway starting env={settings.environment} "
        f"completion_gateway={settings.gateway.functions_url}"
    )

    yield

    # Shutdown
    await cache.aclose()
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Study Gateway API",
        description="Study-content generation gateway: summaries, flashcards, quizzes, exercises and tutor chat",
        version=__version__,
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

    # Add observability middleware; the last added runs first
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "study_gateway.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
