"""Catalog Service — orchestration boundary between the HTTP adapter and storage.

Invariants:
    - Only component touched by the routes; composes ContentNamer, ItemStore, ImageResolver
    - name/category validated (non-empty) before any store is touched
    - Stored image filenames are always derived, never taken from the caller
    - Every failure surfaces as a CatalogError subclass, never a raw exception

Design Decisions:
    - Store chosen once at startup from settings (json | sql); the service only
      sees the ItemStore protocol
    - fetch_image returns the resolved Path; the route streams it with FileResponse
"""

import logging
from pathlib import Path

from catalog.config import Settings
from catalog.core.content_namer import derive_image_filename
from catalog.core.domain_types import Item, NewItem, StoreBackend
from catalog.core.enforce_item_input import check_required_field, parse_item_id
from catalog.core.errors import NotFoundError
from catalog.core.repository_protocols import ItemStore
from catalog.infrastructure.database import DatabaseSessionManager
from catalog.infrastructure.image_resolver import ImageResolver
from catalog.infrastructure.json_item_store import JsonFileItemStore
from catalog.infrastructure.sql_item_store import SqlItemStore

logger = logging.getLogger(__name__)


class CatalogService:
    """Add, list, and fetch catalog items and their images."""

    def __init__(self, store: ItemStore, resolver: ImageResolver):
        self.store = store
        self.resolver = resolver

    async def add_item(
        self, name: str | None, category: str | None, image_reference: str | None,
    ) -> Item:
        """Validate, derive the image filename, persist. Returns the stored item."""
        name = check_required_field(name, "name")
        category = check_required_field(category, "category")
        image_filename = derive_image_filename(image_reference or "")
        item = await self.store.append(
            NewItem(name=name, category=category, image_filename=image_filename),
        )
        logger.info(
            f"Item received: {item.name}",
            extra={"item_id": item.id, "image_filename": image_filename},
        )
        return item

    async def list_items(self) -> list[Item]:
        return await self.store.list_all()

    async def get_item(self, raw_id: str) -> Item:
        item_id = parse_item_id(raw_id)
        item = await self.store.get_by_id(item_id)
        if item is None:
            raise NotFoundError(item_id)
        return item

    def fetch_image(self, filename: str) -> Path:
        return self.resolver.resolve(filename)

    async def is_ready(self) -> bool:
        return await self.store.health_check()


def build_item_store(
    settings: Settings, db_manager: DatabaseSessionManager | None = None,
) -> ItemStore:
    """Instantiate the configured ItemStore backend."""
    if settings.item_store_backend == StoreBackend.SQL:
        if db_manager is None:
            raise RuntimeError("Database not initialized")
        return SqlItemStore(db_manager)
    return JsonFileItemStore(settings.items_json_path)


def build_catalog_service(
    settings: Settings, db_manager: DatabaseSessionManager | None = None,
) -> CatalogService:
    return CatalogService(
        store=build_item_store(settings, db_manager),
        resolver=ImageResolver(settings.image_dir),
    )
