"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, coursehub.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from coursehub.api.deps.dependencies import get_service_cache
from coursehub.configs import get_settings
from coursehub.observability import configure_logging
from coursehub.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import courses_router, health_router, platforms_router, users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    logger = logging.getLogger("uvicorn")

    # Startup
    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    _ = cache.document_store
    logger.info("Service cache pre-warmed")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=settings.service_name,
        description="Platform catalog with a denormalized platform document projection",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers under the versioned prefix
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(platforms_router, prefix=settings.api_prefix)
    app.include_router(courses_router, prefix=settings.api_prefix)
    app.include_router(users_router, prefix=settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "coursehub.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
