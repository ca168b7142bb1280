"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ItemId wraps int — store-assigned, unique, never reused
    - Item is immutable once persisted (no update/delete operations exist)
    - NewItem never carries an id: ids are assigned by the store only
    - All valid backends encoded as an Enum — no raw string matching

Design Decisions:
    - NewType for ids: zero runtime cost, full type-checker support
    - Frozen dataclasses over ORM/pydantic objects: core stays free of IO libraries
    - str Enum: reads straight from environment settings
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ItemId = NewType("ItemId", int)


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class NewItem:
    """An item as submitted, before the store assigns its id."""
    name: str
    category: str
    image_filename: str


@dataclass(frozen=True)
class Item:
    """A persisted catalog record."""
    id: ItemId
    name: str
    category: str
    image_filename: str

    @classmethod
    def from_new(cls, item_id: int, new_item: NewItem) -> "Item":
        return cls(
            id=ItemId(item_id),
            name=new_item.name,
            category=new_item.category,
            image_filename=new_item.image_filename,
        )


# ─── Enums ───────────────────────────────────────────────────────

class StoreBackend(str, Enum):
    """ItemStore implementations selectable from settings."""
    JSON = "json"
    SQL = "sql"
