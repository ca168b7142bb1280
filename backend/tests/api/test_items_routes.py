"""Item Routes — HTTP contract for add/list/get over both backends.

Invariants:
    - POST /items → {"message": "item received: <name>"}
    - GET /items → {"items": [...]} in insertion order, img_filename key
    - GET /items/{id} → 404 {"message": "Not found"} / 400 for non-numeric id
    - Storage errors → 5xx with a generic message
"""

import hashlib

from catalog.infrastructure.json_item_store import JsonFileItemStore
from catalog.infrastructure.sql_item_store import SqlItemStore

MUG = {"name": "mug", "category": "kitchen", "image": "/tmp/mug.jpg"}
MUG_FILENAME = hashlib.sha256(b"mug").hexdigest() + ".jpg"


async def test_add_item_returns_message(client):
    res = await client.post("/items", data=MUG)
    assert res.status_code == 200
    assert res.json() == {"message": "item received: mug"}


async def test_list_after_add(client):
    await client.post("/items", data=MUG)
    await client.post("/items", data={**MUG, "name": "pan", "image": "pan.png"})
    res = await client.get("/items")
    assert res.status_code == 200
    assert res.json() == {
        "items": [
            {"id": 1, "name": "mug", "category": "kitchen", "img_filename": MUG_FILENAME},
            {
                "id": 2, "name": "pan", "category": "kitchen",
                "img_filename": hashlib.sha256(b"pan").hexdigest() + ".jpg",
            },
        ],
    }


async def test_list_empty_store(client):
    res = await client.get("/items")
    assert res.status_code == 200
    assert res.json() == {"items": []}


async def test_get_item(client):
    await client.post("/items", data=MUG)
    res = await client.get("/items/1")
    assert res.status_code == 200
    assert res.json() == {
        "id": 1, "name": "mug", "category": "kitchen", "img_filename": MUG_FILENAME,
    }


async def test_get_missing_item_is_404(client):
    res = await client.get("/items/7")
    assert res.status_code == 404
    assert res.json() == {"message": "Not found"}


async def test_get_non_numeric_item_is_400(client):
    res = await client.get("/items/abc")
    assert res.status_code == 400
    assert "integer" in res.json()["message"]


async def test_missing_name_is_400(client):
    res = await client.post("/items", data={"category": "kitchen", "image": "a.jpg"})
    assert res.status_code == 400
    assert res.json() == {"message": "name is required"}


async def test_blank_category_is_400(client, items_path):
    res = await client.post("/items", data={**MUG, "category": " "})
    assert res.status_code == 400
    assert res.json() == {"message": "category is required"}
    assert not items_path.exists()


async def test_corrupt_store_is_500_not_empty(client, items_path):
    items_path.write_text('{"items": [')
    res = await client.get("/items")
    assert res.status_code == 500
    assert res.json() == {"message": "Stored data is corrupt"}


async def test_unavailable_store_is_503(make_client, tmp_path):
    c = await make_client(JsonFileItemStore(tmp_path / "missing" / "items.json"))
    res = await c.post("/items", data=MUG)
    assert res.status_code == 503
    assert res.json() == {"message": "Storage unavailable"}


async def test_sql_backend_round_trip(make_client, db_manager):
    c = await make_client(SqlItemStore(db_manager))
    assert (await c.post("/items", data=MUG)).status_code == 200
    listed = (await c.get("/items")).json()["items"]
    assert listed == [
        {"id": 1, "name": "mug", "category": "kitchen", "img_filename": MUG_FILENAME},
    ]
    assert (await c.get("/items/1")).json()["name"] == "mug"
    assert (await c.get("/items/2")).status_code == 404


async def test_sql_backend_oversized_id_is_400(make_client, db_manager):
    c = await make_client(SqlItemStore(db_manager))
    await c.post("/items", data=MUG)
    res = await c.get("/items/99999999999999999999")
    assert res.status_code == 400
    assert "out of range" in res.json()["message"]


async def test_sql_backend_max_id_is_404(make_client, db_manager):
    c = await make_client(SqlItemStore(db_manager))
    res = await c.get(f"/items/{2**63 - 1}")
    assert res.status_code == 404
    assert res.json() == {"message": "Not found"}
