"""Item Input Enforcement — validates caller-supplied fields before they reach a store.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - name and category must be non-empty after stripping surrounding whitespace,
      but are stored exactly as submitted
    - Item ids arrive as strings from the URL and must be decimal integers
      within the signed 64-bit range (SQL INTEGER primary key)
    - A non-numeric or out-of-range id is InvalidInputError, never NotFoundError

Design Decisions:
    - Raise typed errors (not return dicts): the HTTP layer maps CatalogError
      subclasses to status codes in one global handler
"""

from catalog.core.domain_types import ItemId
from catalog.core.errors import InvalidInputError

MAX_ITEM_ID = 2**63 - 1


def check_required_field(value: str | None, field: str) -> str:
    """Return the value as given, or raise if it is missing/blank."""
    if value is None or not value.strip():
        raise InvalidInputError(f"{field} is required", field)
    return value


def parse_item_id(raw_id: str) -> ItemId:
    """Parse a decimal item id from its external string form."""
    candidate = raw_id.strip()
    # isdecimal() rejects signs, whitespace and unicode digits int() would accept
    if not candidate.isascii() or not candidate.isdecimal():
        raise InvalidInputError(f"item id must be an integer: {raw_id!r}", "item_id")
    item_id = int(candidate)
    if item_id > MAX_ITEM_ID:
        raise InvalidInputError(f"item id out of range: {raw_id!r}", "item_id")
    return ItemId(item_id)
