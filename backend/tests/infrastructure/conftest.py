"""Infrastructure test fixtures — file stores, image directories, SQLite engine.

Invariants:
    - Every test gets its own tmp_path: no shared files between tests
    - The SQL store runs against a fresh on-disk SQLite database per test

Design Decisions:
    - On-disk SQLite over :memory: so several sessions see the same data
"""

import pytest

from catalog.infrastructure.database import DatabaseSessionManager
from catalog.infrastructure.json_item_store import JsonFileItemStore
from catalog.infrastructure.sql_item_store import SqlItemStore


@pytest.fixture
def items_path(tmp_path):
    return tmp_path / "items.json"


@pytest.fixture
def json_store(items_path):
    return JsonFileItemStore(items_path)


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'catalog.sqlite3'}",
    )
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def sql_store(db_manager):
    return SqlItemStore(db_manager)


@pytest.fixture
def image_dir(tmp_path):
    directory = tmp_path / "images"
    directory.mkdir()
    (directory / "default.jpg").write_bytes(b"placeholder-bytes")
    return directory
