"""Image Routes — streaming, placeholder fallback, suffix guard."""

import threading

from catalog.infrastructure.image_resolver import ImageResolver


async def test_existing_image_is_streamed(client, image_dir):
    (image_dir / "abc.jpg").write_bytes(b"\xff\xd8abc")
    res = await client.get("/image/abc.jpg")
    assert res.status_code == 200
    assert res.headers["content-type"] == "image/jpeg"
    assert res.content == b"\xff\xd8abc"


async def test_missing_image_serves_placeholder(client):
    res = await client.get("/image/missing.jpg")
    assert res.status_code == 200
    assert res.content == b"placeholder-bytes"


async def test_non_jpg_is_400(client):
    res = await client.get("/image/x.png")
    assert res.status_code == 400
    assert res.json() == {"message": "Image path does not end with .jpg"}


async def test_missing_placeholder_is_500(client, image_dir):
    (image_dir / "default.jpg").unlink()
    res = await client.get("/image/missing.jpg")
    assert res.status_code == 500
    assert res.json() == {"message": "Image unavailable"}


async def test_resolution_runs_off_the_event_loop_thread(client, image_dir, monkeypatch):
    loop_thread = threading.current_thread()
    seen = []
    original = ImageResolver.resolve

    def _recording_resolve(self, requested_filename):
        seen.append(threading.current_thread())
        return original(self, requested_filename)

    monkeypatch.setattr(ImageResolver, "resolve", _recording_resolve)
    res = await client.get("/image/missing.jpg")
    assert res.status_code == 200
    assert seen and seen[0] is not loop_thread
