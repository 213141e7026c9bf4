"""
FastAPI application factory.
create_app() is the single entry point for building the app.

The Lambda entry point (lambda_function.py) is what runs in production; this
app serves the same pipeline for local development and container hosts.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import AppSettings
from dependencies import Container, build_container
from errors import register_error_handlers
from routes.contact_routes import router as contact_router
from routes.health_routes import router as health_router
from shared.logging import setup_logging
from shared.monitoring import init_sentry


def create_app(
    settings: Optional[AppSettings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """Create and return a fully configured FastAPI application."""
    if settings is None:
        settings = container.settings if container is not None else AppSettings()

    setup_logging(settings.logging)
    # Initialise Sentry before anything else so it captures startup errors
    init_sentry(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # ── Startup ──────────────────────────────────────────────────────────
        c = container if container is not None else build_container(settings)
        app.state.settings = settings
        app.state.secrets_store = c.secrets_store
        app.state.contact_service = c.contact_service

        # Failure is logged and surfaces as SECRET_RETRIEVAL_ERROR per request
        await c.secrets_store.load()

        yield

        # ── Shutdown ─────────────────────────────────────────────────────────
        await c.http_client.aclose()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url=settings.docs_url,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["OPTIONS", "POST"],
        allow_headers=["Content-Type"],
    )

    register_error_handlers(app)
    app.include_router(contact_router)
    app.include_router(health_router)

    return app
