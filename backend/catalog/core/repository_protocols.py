"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Both ItemStore implementations (JSON file, relational table) satisfy one Protocol
    - Callers (CatalogService, health probe) depend only on this capability set

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO (file or database)
    - get_by_id returns None for absent ids; the service decides it is a 404
"""

from typing import Protocol

from catalog.core.domain_types import Item, NewItem


class ItemStore(Protocol):
    """Contract for item persistence — implemented by shell."""

    async def append(self, new_item: NewItem) -> Item:
        """Assign the next id, persist the record, return it.

        Raises StorageUnavailableError when the medium cannot be written,
        CorruptStoreError when existing data cannot be decoded.
        """
        ...

    async def list_all(self) -> list[Item]:
        """All items in insertion order. Empty store is not an error."""
        ...

    async def get_by_id(self, item_id: int) -> Item | None: ...

    async def health_check(self) -> bool: ...
