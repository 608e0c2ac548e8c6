"""Parcel Ledger API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LedgerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Stores, registry and ledger built on startup via lifespan, attached to app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app factory: tests attach their own components without the lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from parcel_ledger.api.error_handlers import register_error_handlers
from parcel_ledger.api.routes import health, holders, packages
from parcel_ledger.config import Settings, get_settings
from parcel_ledger.infrastructure.observability import setup_logging
from parcel_ledger.services.bootstrap import LedgerComponents, build_components

logger = logging.getLogger(__name__)


def attach_components(app: FastAPI, components: LedgerComponents) -> None:
    """Expose components to route dependencies."""
    app.state.components = components
    app.state.registry = components.registry
    app.state.ledger = components.ledger
    app.state.stores = components.stores


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    components = await build_components(settings)
    attach_components(app, components)
    logger.info("Parcel Ledger API started")
    yield
    await components.close()
    logger.info("Parcel Ledger API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Parcel Ledger API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(holders.router)
    app.include_router(packages.router)

    register_error_handlers(app)
    return app


app = create_app()
