"""Abstract repository interfaces (ports) for entity persistence."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from host_manager.domain.entities import Client, Platform, Record

T = TypeVar("T")


class EntityRepository(ABC, Generic[T]):
    """Port for a single entity collection — implemented in the infrastructure layer.

    Collections are small, so reads always return the full list and all
    filtering and aggregation happens in the application layer.
    """

    @abstractmethod
    async def get_by_id(self, entity_id: str) -> T | None:
        """Retrieve a single entity by its id."""
        ...

    @abstractmethod
    async def list_all(self) -> list[T]:
        """Retrieve every entity in the collection."""
        ...

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity and return it."""
        ...

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Update an existing entity."""
        ...

    @abstractmethod
    async def delete(self, entity_id: str) -> bool:
        """Delete an entity. Returns True if deleted, False if not found."""
        ...


class ClientRepository(EntityRepository[Client]):
    """Port for Client persistence."""


class PlatformRepository(EntityRepository[Platform]):
    """Port for Platform persistence."""


class RecordRepository(EntityRepository[Record]):
    """Port for Record persistence."""
