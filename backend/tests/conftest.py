"""Root conftest — shared test configuration."""

import os

# Ensure tests never touch the developer's real item store or database
os.environ.setdefault("ITEM_STORE_BACKEND", "json")
os.environ.setdefault("ITEMS_JSON_PATH", "test-items.json")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("FRONT_URL", "http://localhost:3000")
