"""
App factory for gqlhttp.

Creates a pre-configured FastAPI application with:
- GraphQL endpoint (and optional playground)
- CORS middleware
- Health check endpoint
- Logging filter to suppress noisy healthcheck logs
"""

from __future__ import annotations

import logging
from dataclasses import replace
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import create_graphql_router
from .config import HandlerConfig, Settings

logger = logging.getLogger(__name__)

HEALTH_PATH = "/health"


class HealthcheckLogFilter(logging.Filter):
    """Drop uvicorn access log records for the health endpoint."""

    def filter(self, record: logging.LogRecord) -> bool:
        # uvicorn.access args: (client, method, path, http_version, status)
        args = record.args
        if isinstance(args, tuple) and len(args) >= 3:
            return str(args[2]).partition("?")[0] != HEALTH_PATH
        return True


def _setup_logging_filter():
    """Add filter to uvicorn access logger to suppress healthcheck logs."""
    uvicorn_access = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, HealthcheckLogFilter) for f in uvicorn_access.filters):
        uvicorn_access.addFilter(HealthcheckLogFilter())


def create_app(
    config: HandlerConfig,
    settings: Optional[Settings] = None,
    *,
    title: str = "GraphQL API",
) -> FastAPI:
    """
    Create a FastAPI app serving a GraphQL endpoint.

    Args:
        config: Handler configuration (schema, resolvers, hooks)
        settings: Server settings (path, CORS, playground); loaded from
            the environment when omitted
        title: FastAPI app title

    Returns:
        Configured FastAPI application
    """
    settings = settings or Settings()
    if settings.playground and not config.playground:
        config = replace(config, playground=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _setup_logging_filter()
        logger.info(f"GraphQL endpoint ready at {settings.path}")
        yield

    app = FastAPI(title=title, version="1.0.0", lifespan=lifespan)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_graphql_router(config, path=settings.path))

    @app.get(HEALTH_PATH)
    async def health_check():
        return {"status": "ok"}

    return app
