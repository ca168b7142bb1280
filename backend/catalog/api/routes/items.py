"""Item Routes — add, list, and fetch catalog items.

Invariants:
    - POST /items takes form fields name, category, image (an image path/reference)
    - item_id arrives as a raw string; the service decides 400 vs 404
    - Routes never contain business logic (delegate to CatalogService)

Design Decisions:
    - Form fields default to "" so missing fields reach the service's own
      validation (uniform 400 InvalidInput body) instead of FastAPI's 422
"""

import logging

from fastapi import APIRouter, Depends, Form

from catalog.api.dependencies import get_catalog_service
from catalog.schemas.item import ItemListResponse, ItemResponse, MessageResponse
from catalog.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/items", tags=["items"])


@router.post("", response_model=MessageResponse)
async def add_item(
    name: str = Form(""),
    category: str = Form(""),
    image: str = Form(""),
    service: CatalogService = Depends(get_catalog_service),
):
    """Register a new item; the image filename is derived from `image`."""
    item = await service.add_item(name, category, image)
    return MessageResponse(message=f"item received: {item.name}")


@router.get("", response_model=ItemListResponse)
async def list_items(service: CatalogService = Depends(get_catalog_service)):
    """All items in insertion order."""
    return ItemListResponse.from_items(await service.list_items())


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(
    item_id: str, service: CatalogService = Depends(get_catalog_service),
):
    return ItemResponse.from_item(await service.get_item(item_id))
