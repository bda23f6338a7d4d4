"""Products API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProductsApiError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager built and connected on startup, disposed on shutdown;
      a failed connection is logged and the API still starts

Design Decisions:
    - Lifespan over @app.on_event
    - /docs and /redoc served by FastAPI unless settings.docs_enabled is False
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from products_api.api.error_handlers import register_error_handlers
from products_api.api.routes import health, products
from products_api.config import get_settings
from products_api.infrastructure.database import close_db, init_db
from products_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    await manager.connect()
    logger.info("Products API started")
    yield
    await close_db()
    logger.info("Products API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Products API",
        description="REST API para administrar un catálogo de productos",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(products.router)
    return app


app = create_app()
