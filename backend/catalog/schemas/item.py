"""Item Schemas — Pydantic response models for the HTTP boundary.

Invariants:
    - Items serialize with img_filename (legacy frontend contract), not image_filename
    - Lists wrap items under the top-level "items" key, insertion order preserved

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, core types are domain (ADR: DDD boundary)
"""

from pydantic import BaseModel

from catalog.core.domain_types import Item


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""
    message: str


class ItemResponse(BaseModel):
    """Public-facing item data."""
    id: int
    name: str
    category: str
    img_filename: str

    @classmethod
    def from_item(cls, item: Item) -> "ItemResponse":
        return cls(
            id=item.id,
            name=item.name,
            category=item.category,
            img_filename=item.image_filename,
        )


class ItemListResponse(BaseModel):
    """All items, insertion order."""
    items: list[ItemResponse]

    @classmethod
    def from_items(cls, items: list[Item]) -> "ItemListResponse":
        return cls(items=[ItemResponse.from_item(i) for i in items])
