"""Application service (use case) for Client operations."""

import logging

from host_manager.application.interfaces import ClientRepository
from host_manager.application.schemas import ClientCreate, ClientUpdate
from host_manager.application.services.change_notifier import ChangeNotifier
from host_manager.domain.entities import Client
from host_manager.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ClientService:
    """Orchestrates client CRUD logic. Depends on the repository port (DI).

    Deleting a client leaves its records in place; they show as
    "Unknown Client" afterwards.
    """

    def __init__(self, repository: ClientRepository, notifier: ChangeNotifier | None = None):
        self._repository = repository
        self._notifier = notifier

    async def get_client(self, client_id: str) -> Client:
        client = await self._repository.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    async def list_clients(self) -> list[Client]:
        return await self._repository.list_all()

    async def create_client(self, data: ClientCreate) -> Client:
        client = Client(
            name=data.name,
            ip_address=data.ip_address,
            platform=data.platform,
        )
        created = await self._repository.create(client)
        logger.info("Created client %s (%s)", created.id, created.name)
        await self._notify("created", created.id)
        return created

    async def update_client(self, client_id: str, data: ClientUpdate) -> Client:
        client = await self.get_client(client_id)
        client.update(
            name=data.name,
            ip_address=data.ip_address,
            platform=data.platform,
        )
        updated = await self._repository.update(client)
        await self._notify("updated", updated.id)
        return updated

    async def delete_client(self, client_id: str) -> bool:
        exists = await self._repository.get_by_id(client_id)
        if exists is None:
            raise EntityNotFoundError("Client", client_id)
        deleted = await self._repository.delete(client_id)
        logger.info("Deleted client %s", client_id)
        await self._notify("deleted", client_id)
        return deleted

    async def _notify(self, action: str, client_id: str) -> None:
        if self._notifier is not None:
            await self._notifier.broadcast("clients", action, client_id)
