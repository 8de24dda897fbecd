"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus), error handlers, startup (logging, tables).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import make_asgi_app

from catalog_api.api.error_handlers import register_error_handlers
from catalog_api.api.router import api_router
from catalog_api.config import get_settings
from catalog_api.core.logging import setup_logging
from catalog_api.db.session import create_tables

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: configure logging, create missing tables when synchronize is on."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.db_synchronize:
        await create_tables()
    logger.info(f"{settings.app_name} started")
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="CRUD API for users, products and categories backed by PostgreSQL.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    register_error_handlers(app)
    app.include_router(api_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Hello World!"

    return app


app = create_app()
