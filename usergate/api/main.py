"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
mounts the route table, and wires the business handlers in lifespan.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from usergate.api.dependencies import load_user_handlers
from usergate.api.v1 import router as v1_router
from usergate.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "User management API v1 - Registration, login, avatars, bulk deletion and transactions",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Applies the configured log level to the package loggers
    - Loads the user handlers into app state
    """
    settings = get_settings()
    logging.getLogger("usergate").setLevel(settings.log_level.upper())

    logger.info("Starting application...")

    # Store handlers in app state for dependency injection
    app.state.user_handlers = load_user_handlers(settings.user_handlers)

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title="usergate",
    description="User management API - Validated route table in front of pluggable business handlers",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix=get_settings().api_prefix)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint. Returns 200 OK while the application is serving."""
    return {"status": "healthy"}
