"""FastAPI application factory for the embed service."""

from __future__ import annotations

from fastapi import FastAPI

from ..config import EmbedSettings
from ..exception_handler import setup_logging
from ..mcpserver import mcp
from .route import router


def create_app(settings: EmbedSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    # setup mcp
    mcp_app = mcp.http_app("/")

    settings = settings or EmbedSettings.from_env()
    setup_logging(settings.log_level)
    app = FastAPI(
        title="Code Embed API",
        version="0.1.0",
        lifespan=mcp_app.lifespan,
    )
    app.state.settings = settings
    app.include_router(router)

    # mount mcp
    app.mount("/mcp", mcp_app)

    return app


app = create_app()


__all__ = ["app", "create_app"]
