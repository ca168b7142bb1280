"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET / always returns the greeting if the process is up
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the item store is unreachable (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      load balancer (ADR: production readiness)
    - Readiness asks the configured ItemStore, so it covers both backends
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from catalog.api.dependencies import get_catalog_service
from catalog.schemas.item import MessageResponse
from catalog.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)
root_router = APIRouter(tags=["health"])
router = APIRouter(prefix="/health", tags=["health"])


@root_router.get("/", response_model=MessageResponse)
async def root():
    return MessageResponse(message="Hello, world!")


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "item-catalog-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(service: CatalogService = Depends(get_catalog_service)):
    """Readiness probe — includes item store availability."""
    if not await service.is_ready():
        logger.warning("Readiness check failed: item store unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "item_store_unavailable",
            },
        )
    return {"status": "ready", "checks": {"item_store": "healthy"}}
