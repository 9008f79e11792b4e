"""Concrete repository implementation for Client backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from host_manager.application.interfaces import ClientRepository
from host_manager.domain.entities import Client
from host_manager.infrastructure.database.models import ClientModel


class SQLAlchemyClientRepository(ClientRepository):
    """Implements the ClientRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ClientModel) -> Client:
        """Map ORM model → domain entity. NULL optional columns become ''."""
        return Client(
            id=model.id,
            name=model.name,
            ip_address=model.ip_address or "",
            platform=model.platform or "",
            created_at=model.created_at,
        )

    def _to_model(self, entity: Client) -> ClientModel:
        """Map domain entity → ORM model (for creation)."""
        return ClientModel(
            id=entity.id,
            name=entity.name,
            ip_address=entity.ip_address or None,
            platform=entity.platform or None,
            created_at=entity.created_at,
        )

    async def get_by_id(self, entity_id: str) -> Client | None:
        result = await self._session.get(ClientModel, entity_id)
        return self._to_entity(result) if result else None

    async def list_all(self) -> list[Client]:
        stmt = select(ClientModel).order_by(ClientModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, entity: Client) -> Client:
        model = self._to_model(entity)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, entity: Client) -> Client:
        model = await self._session.get(ClientModel, entity.id)
        if model is None:
            raise ValueError(f"Client {entity.id} not found in database")
        model.name = entity.name
        model.ip_address = entity.ip_address or None
        model.platform = entity.platform or None
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, entity_id: str) -> bool:
        model = await self._session.get(ClientModel, entity_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
