"""Service test fixtures — CatalogService over a tmp JSON store and image dir."""

import pytest

from catalog.infrastructure.image_resolver import ImageResolver
from catalog.infrastructure.json_item_store import JsonFileItemStore
from catalog.services.catalog_service import CatalogService


@pytest.fixture
def image_dir(tmp_path):
    directory = tmp_path / "images"
    directory.mkdir()
    (directory / "default.jpg").write_bytes(b"placeholder-bytes")
    return directory


@pytest.fixture
def service(tmp_path, image_dir):
    return CatalogService(
        store=JsonFileItemStore(tmp_path / "items.json"),
        resolver=ImageResolver(image_dir),
    )
