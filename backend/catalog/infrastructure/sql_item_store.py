"""SQL Item Store — items persisted in the relational `items` table.

Invariants:
    - id is the engine's primary-key sequence; never computed by this module
    - Each operation is one session (one unit of work); append commits once
    - list_all orders by id, which matches insertion order
    - SQLAlchemy failures surface as StorageUnavailableError (via DatabaseSessionManager)

Design Decisions:
    - Session manager injected, not imported as a global: tests pass their own engine
    - Engine transactions satisfy the read-modify-write concern; no extra locking
"""

import logging

from sqlalchemy import select

from catalog.core.domain_types import Item, NewItem
from catalog.infrastructure.database import DatabaseSessionManager
from catalog.models.item import Item as ItemModel

logger = logging.getLogger(__name__)


class SqlItemStore:
    """ItemStore backed by a SQLAlchemy async engine."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def append(self, new_item: NewItem) -> Item:
        async with self._db.session() as db:
            row = ItemModel(
                name=new_item.name,
                category=new_item.category,
                image_filename=new_item.image_filename,
            )
            db.add(row)
            await db.commit()
            await db.refresh(row)
            item = row.to_record()
        logger.info(
            "Inserted item row", extra={"item_id": item.id, "backend": "sql"},
        )
        return item

    async def list_all(self) -> list[Item]:
        async with self._db.session() as db:
            result = await db.execute(select(ItemModel).order_by(ItemModel.id))
            return [row.to_record() for row in result.scalars().all()]

    async def get_by_id(self, item_id: int) -> Item | None:
        async with self._db.session() as db:
            row = await db.get(ItemModel, item_id)
            return row.to_record() if row else None

    async def health_check(self) -> bool:
        return await self._db.health_check()
