"""Local JSON-file entity store — fallback persistence when no database is used.

File layout (wire form, see ``host_manager.application.conversion``)::

    {
        "clients":   [{"id": ..., "name": ..., "ip_address": ..., ...}],
        "platforms": [{"id": ..., "name": ..., ...}],
        "records":   [{"id": ..., "client_id": ..., "date": "2023-10-15", ...}]
    }

Only the three entity collections are stored. Dashboard figures are always
recomputed and credentials live in the database.
"""

import asyncio
import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generic, TypeVar

from host_manager.application.conversion import (
    to_domain_client,
    to_domain_platform,
    to_domain_record,
    to_wire_client,
    to_wire_platform,
    to_wire_record,
)
from host_manager.application.interfaces import (
    ClientRepository,
    PlatformRepository,
    RecordRepository,
)
from host_manager.domain.entities import Client, Platform, Record
from host_manager.domain.exceptions import RecordParseError

logger = logging.getLogger(__name__)

COLLECTIONS = ("clients", "platforms", "records")

T = TypeVar("T")


class JsonEntityStore:
    """Reads and writes all collections in a single JSON file.

    A lock serialises read-modify-write cycles within one process.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self.lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def read(self, collection: str) -> list[dict[str, Any]]:
        """Return the raw rows of ``collection``; [] if the file does not exist yet."""
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except json.JSONDecodeError:
            logger.exception("Entity store %s is not valid JSON", self._path)
            raise
        rows = data.get(collection, [])
        return rows if isinstance(rows, list) else []

    def write(self, collection: str, rows: list[dict[str, Any]]) -> None:
        """Replace ``collection`` with ``rows``, keeping the other collections."""
        data: dict[str, Any] = {name: [] for name in COLLECTIONS}
        if self._path.exists():
            data.update(json.loads(self._path.read_text("utf-8")))
        data[collection] = rows
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self._path)


class _JsonCollection(Generic[T]):
    """Entity repository over one collection of a JsonEntityStore."""

    collection: str = ""
    entity_name: str = ""

    def __init__(
        self,
        store: JsonEntityStore,
        to_domain: Callable[[dict[str, Any]], T],
        to_wire: Callable[[T], dict[str, Any]],
    ):
        self._store = store
        self._to_domain = to_domain
        self._to_wire = to_wire

    def _load(self) -> list[T]:
        entities: list[T] = []
        for row in self._store.read(self.collection):
            try:
                entities.append(self._to_domain(row))
            except RecordParseError as exc:
                logger.warning("Skipping unreadable %s row %r: %s", self.entity_name, row.get("id"), exc)
        return entities

    async def get_by_id(self, entity_id: str) -> T | None:
        for row in self._store.read(self.collection):
            if row.get("id") == entity_id:
                return self._to_domain(row)
        return None

    async def list_all(self) -> list[T]:
        return self._load()

    async def create(self, entity: T) -> T:
        async with self._store.lock:
            rows = self._store.read(self.collection)
            rows.append(self._to_wire(entity))
            self._store.write(self.collection, rows)
        return entity

    async def update(self, entity: T) -> T:
        wire = self._to_wire(entity)
        async with self._store.lock:
            rows = self._store.read(self.collection)
            for index, row in enumerate(rows):
                if row.get("id") == wire["id"]:
                    rows[index] = wire
                    break
            else:
                raise ValueError(f"{self.entity_name} {wire['id']} not found in store")
            self._store.write(self.collection, rows)
        return entity

    async def delete(self, entity_id: str) -> bool:
        async with self._store.lock:
            rows = self._store.read(self.collection)
            remaining = [row for row in rows if row.get("id") != entity_id]
            if len(remaining) == len(rows):
                return False
            self._store.write(self.collection, remaining)
        return True


class JsonClientRepository(_JsonCollection[Client], ClientRepository):
    collection = "clients"
    entity_name = "Client"

    def __init__(self, store: JsonEntityStore):
        super().__init__(store, to_domain_client, to_wire_client)


class JsonPlatformRepository(_JsonCollection[Platform], PlatformRepository):
    collection = "platforms"
    entity_name = "Platform"

    def __init__(self, store: JsonEntityStore):
        super().__init__(store, to_domain_platform, to_wire_platform)


class JsonRecordRepository(_JsonCollection[Record], RecordRepository):
    collection = "records"
    entity_name = "Record"

    def __init__(self, store: JsonEntityStore):
        super().__init__(store, to_domain_record, to_wire_record)
