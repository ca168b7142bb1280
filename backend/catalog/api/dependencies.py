"""Route Dependencies — hands the process-wide CatalogService to handlers.

Invariants:
    - The service is built once in the lifespan and stored on app.state

Design Decisions:
    - Dependency function (not a module global): tests override it via
      app.dependency_overrides without touching startup
"""

from fastapi import Request

from catalog.services.catalog_service import CatalogService


def get_catalog_service(request: Request) -> CatalogService:
    """FastAPI dependency for the catalog service."""
    service = getattr(request.app.state, "catalog_service", None)
    if service is None:
        raise RuntimeError("Catalog service not initialized")
    return service
