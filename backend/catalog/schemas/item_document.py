"""Item Document Schema — on-disk shape of the JSON-file item store.

Invariants:
    - Top-level object with exactly one meaningful key: "items" (ordered array)
    - Each entry carries name, category, img_filename (all strings)
    - No id is written: ids are 1-based positions recomputed on read
    - Entries from older files that still carry "id" are accepted, the key ignored

Design Decisions:
    - Pydantic validation doubles as the corruption check: a ValidationError
      means present-but-undecodable data, never "empty"
"""

from pydantic import BaseModel, ConfigDict

from catalog.core.domain_types import Item, ItemId, NewItem


class StoredItem(BaseModel):
    """One entry of the "items" array."""
    model_config = ConfigDict(extra="ignore")

    name: str
    category: str
    img_filename: str

    @classmethod
    def from_new(cls, new_item: NewItem) -> "StoredItem":
        return cls(
            name=new_item.name,
            category=new_item.category,
            img_filename=new_item.image_filename,
        )

    def to_item(self, position: int) -> Item:
        """Build the domain record; position is 0-based."""
        return Item(
            id=ItemId(position + 1),
            name=self.name,
            category=self.category,
            image_filename=self.img_filename,
        )


class ItemDocument(BaseModel):
    """The whole persisted collection."""
    items: list[StoredItem] = []

    def to_items(self) -> list[Item]:
        return [stored.to_item(pos) for pos, stored in enumerate(self.items)]
