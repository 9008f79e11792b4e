"""In-memory fake repositories shared by unit and integration tests."""

from typing import Generic, TypeVar

from host_manager.application.interfaces import (
    AdminCredentialRepository,
    ClientRepository,
    PlatformRepository,
    RecordRepository,
)
from host_manager.domain.entities import AdminCredential, Client, Platform, Record

T = TypeVar("T")


class _InMemoryRepository(Generic[T]):
    """Dict-backed repository keyed by entity id, preserving insertion order."""

    def __init__(self, entities: list[T] | None = None):
        self._items: dict[str, T] = {}
        for entity in entities or []:
            self._items[entity.id] = entity

    async def get_by_id(self, entity_id: str) -> T | None:
        return self._items.get(entity_id)

    async def list_all(self) -> list[T]:
        return list(self._items.values())

    async def create(self, entity: T) -> T:
        self._items[entity.id] = entity
        return entity

    async def update(self, entity: T) -> T:
        if entity.id not in self._items:
            raise ValueError(f"{entity.id} not found")
        self._items[entity.id] = entity
        return entity

    async def delete(self, entity_id: str) -> bool:
        return self._items.pop(entity_id, None) is not None


class FakeClientRepository(_InMemoryRepository[Client], ClientRepository):
    pass


class FakePlatformRepository(_InMemoryRepository[Platform], PlatformRepository):
    pass


class FakeRecordRepository(_InMemoryRepository[Record], RecordRepository):
    pass


class FakeAdminCredentialRepository(AdminCredentialRepository):
    def __init__(self):
        self.credential: AdminCredential | None = None

    async def get(self) -> AdminCredential | None:
        return self.credential

    async def save(self, credential: AdminCredential) -> AdminCredential:
        self.credential = credential
        return credential
