"""Item Catalog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → {"message": ...} JSON responses
    - CORS allows exactly one origin, FRONT_URL from settings (not hardcoded)
    - Item store (and database, for the sql backend) initialized on startup
      via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py (keeps this module's import fan-out small)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.error_handlers import register_error_handlers
from catalog.api.routes import health, images, items
from catalog.config import get_settings
from catalog.core.domain_types import StoreBackend
from catalog.infrastructure.database import init_db
from catalog.infrastructure.observability import setup_logging
from catalog.services.catalog_service import build_catalog_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = None
    if settings.item_store_backend == StoreBackend.SQL:
        db = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_auto_create:
            await db.create_schema()
    app.state.catalog_service = build_catalog_service(settings, db)
    logger.info(
        "Item catalog API started",
        extra={"backend": settings.item_store_backend.value},
    )
    yield
    if db is not None:
        await db.dispose()
    logger.info("Item catalog API shutting down")


app = FastAPI(
    title="Item Catalog API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.front_url],
    allow_methods=["GET", "PUT", "POST", "DELETE"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.root_router)
app.include_router(health.router)
app.include_router(items.router)
app.include_router(images.router)

register_error_handlers(app)
