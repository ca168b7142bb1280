"""JSON File Item Store — the whole collection as one JSON document on disk.

Invariants:
    - Document shape: {"items": [{"name", "category", "img_filename"}, ...]}
    - id = 1-based position in the array; never written to disk
    - append holds self._lock for the full read-decode-append-encode-write cycle,
      so concurrent appends never read the same pre-append state (no lost updates)
    - Writes go to a temp file in the same directory, fsync, then os.replace:
      readers see the old or the new complete document, never a partial one
    - Missing or zero-byte file = empty collection (initialized on first read)
    - Undecodable content = CorruptStoreError, never an empty collection
    - Missing directory or any other OSError = StorageUnavailableError

Design Decisions:
    - asyncio.Lock over a file lock: single-process uvicorn deployment
      (ADR: one worker; the relational backend covers multi-process setups)
    - Blocking file IO pushed to asyncio.to_thread so the event loop keeps serving
    - Reads take no lock: atomic replace makes them safe against a concurrent append
"""

import asyncio
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from catalog.core.domain_types import Item, NewItem
from catalog.core.errors import CorruptStoreError, StorageUnavailableError
from catalog.schemas.item_document import ItemDocument, StoredItem

logger = logging.getLogger(__name__)

FILE_MODE = 0o644


class JsonFileItemStore:
    """ItemStore backed by a single JSON document."""

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    # ─── ItemStore protocol ──────────────────────────────────────

    async def append(self, new_item: NewItem) -> Item:
        async with self._lock:
            item = await asyncio.to_thread(self._append_locked, new_item)
        logger.info(
            f"Appended item to {self.path}",
            extra={"item_id": item.id, "backend": "json"},
        )
        return item

    async def list_all(self) -> list[Item]:
        document = await self._load()
        return document.to_items()

    async def get_by_id(self, item_id: int) -> Item | None:
        document = await self._load()
        if not 1 <= item_id <= len(document.items):
            return None
        return document.items[item_id - 1].to_item(item_id - 1)

    async def health_check(self) -> bool:
        parent = self.path.parent
        return parent.is_dir() and os.access(parent, os.W_OK)

    # ─── Read path ───────────────────────────────────────────────

    async def _load(self) -> ItemDocument:
        raw = await asyncio.to_thread(self._read_raw)
        if raw:
            return self._decode(raw)
        async with self._lock:
            return await asyncio.to_thread(self._initialize_locked)

    def _initialize_locked(self) -> ItemDocument:
        """Persist an empty document unless another writer got there first."""
        raw = self._read_raw()
        if raw:
            return self._decode(raw)
        document = ItemDocument()
        self._write(document)
        logger.debug(f"Initialized empty item store at {self.path}")
        return document

    def _read_raw(self) -> bytes | None:
        """File contents, or None when the file does not exist yet."""
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            if not self.path.parent.is_dir():
                raise StorageUnavailableError(
                    f"directory {self.path.parent} does not exist", "open",
                )
            return None
        except OSError as e:
            raise StorageUnavailableError(str(e), "read")

    def _decode(self, raw: bytes) -> ItemDocument:
        try:
            return ItemDocument.model_validate_json(raw)
        except ValidationError as e:
            logger.error(
                f"Cannot decode {self.path}: {e.error_count()} error(s)",
                extra={"backend": "json"},
            )
            raise CorruptStoreError(f"{self.path} is not a valid item document")

    # ─── Write path (caller holds self._lock) ────────────────────

    def _append_locked(self, new_item: NewItem) -> Item:
        raw = self._read_raw()
        document = self._decode(raw) if raw else ItemDocument()
        document.items.append(StoredItem.from_new(new_item))
        self._write(document)
        return Item.from_new(len(document.items), new_item)

    def _write(self, document: ItemDocument) -> None:
        payload = document.model_dump_json().encode("utf-8")
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp",
            )
        except OSError as e:
            raise StorageUnavailableError(str(e), "write")
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp_name, FILE_MODE)
            os.replace(tmp_name, self.path)
        except BaseException as e:
            Path(tmp_name).unlink(missing_ok=True)
            if isinstance(e, OSError):
                raise StorageUnavailableError(str(e), "write")
            raise
