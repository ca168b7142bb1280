"""API test fixtures — FastAPI app with the catalog service overridden.

Invariants:
    - Every test gets a fresh JSON store and image directory under tmp_path
    - get_catalog_service dependency overridden; lifespan never runs

Design Decisions:
    - httpx ASGITransport: in-process, no sockets
    - make_client lets a test swap in another store (SQL, unavailable dir)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from catalog.api.dependencies import get_catalog_service
from catalog.infrastructure.database import DatabaseSessionManager
from catalog.infrastructure.image_resolver import ImageResolver
from catalog.infrastructure.json_item_store import JsonFileItemStore
from catalog.main import app
from catalog.services.catalog_service import CatalogService


@pytest.fixture
def image_dir(tmp_path):
    directory = tmp_path / "images"
    directory.mkdir()
    (directory / "default.jpg").write_bytes(b"placeholder-bytes")
    return directory


@pytest.fixture
def items_path(tmp_path):
    return tmp_path / "items.json"


@pytest.fixture
async def make_client(image_dir):
    """Factory: AsyncClient bound to a CatalogService over the given store."""
    clients = []

    async def _make(store):
        service = CatalogService(store=store, resolver=ImageResolver(image_dir))
        app.dependency_overrides[get_catalog_service] = lambda: service
        c = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(c)
        return c

    yield _make

    for c in clients:
        await c.aclose()
    app.dependency_overrides.clear()


@pytest.fixture
async def client(make_client, items_path):
    """FastAPI test client over a JSON-file store."""
    return await make_client(JsonFileItemStore(items_path))


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'catalog.sqlite3'}",
    )
    await manager.create_schema()
    yield manager
    await manager.dispose()
