"""Application entry point.

Creates the FastAPI application and wires together routers, middleware,
centralized error handlers and the outbound clients. No business logic
belongs here.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from starter_api.clients import AstroClient
from starter_api.core.config import Settings
from starter_api.core.config import settings as default_settings
from starter_api.core.exception_handlers import register_exception_handlers
from starter_api.core.logging_config import configure_logging
from starter_api.core.middleware import RequestContextMiddleware
from starter_api.routers import health, hello

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, *, astro_client: AstroClient | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Configuration to use; defaults to values from the environment.
        astro_client: Pre-built client, mainly for tests. Built from
            ``settings.astro_base_url`` when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        configure_logging(level=settings.effective_log_level, structured=settings.log_structured)
        logger.info("Application starting up...")
        yield
        app.state.astro_client.close()
        logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
    )

    # Immutable for the life of the process
    app.state.settings = settings
    app.state.trace_header = settings.trace_header
    app.state.astro_client = astro_client or AstroClient.from_base_url(settings.astro_base_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        RequestContextMiddleware,
        header=settings.trace_header,
        generate=settings.generate_trace_id,
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(hello.router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "starter_api.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_config=None,
    )
