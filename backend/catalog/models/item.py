"""Item ORM — the relational backing table for the catalog.

Invariants:
    - id is an INTEGER primary key assigned by the engine (never by the caller)
    - Insertion order matches ascending id
    - image_filename holds the derived `<sha256>.jpg`, never the submitted path

Design Decisions:
    - Column named image_filename (matches the legacy mercari.sqlite3 schema);
      exposed as img_filename only at the API/JSON boundary
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.core.domain_types import Item as ItemRecord, ItemId
from catalog.db.base import Base


class Item(Base):
    """A catalog item row."""
    __tablename__ = "items"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    image_filename: Mapped[str] = mapped_column(Text, nullable=False)

    def to_record(self) -> ItemRecord:
        return ItemRecord(
            id=ItemId(self.id),
            name=self.name,
            category=self.category,
            image_filename=self.image_filename,
        )
