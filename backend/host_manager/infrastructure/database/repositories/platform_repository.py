"""Concrete repository implementation for Platform backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from host_manager.application.interfaces import PlatformRepository
from host_manager.domain.entities import Platform
from host_manager.infrastructure.database.models import PlatformModel


class SQLAlchemyPlatformRepository(PlatformRepository):
    """Implements the PlatformRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: PlatformModel) -> Platform:
        return Platform(id=model.id, name=model.name, created_at=model.created_at)

    async def get_by_id(self, entity_id: str) -> Platform | None:
        result = await self._session.get(PlatformModel, entity_id)
        return self._to_entity(result) if result else None

    async def list_all(self) -> list[Platform]:
        stmt = select(PlatformModel).order_by(PlatformModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, entity: Platform) -> Platform:
        model = PlatformModel(id=entity.id, name=entity.name, created_at=entity.created_at)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, entity: Platform) -> Platform:
        model = await self._session.get(PlatformModel, entity.id)
        if model is None:
            raise ValueError(f"Platform {entity.id} not found in database")
        model.name = entity.name
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, entity_id: str) -> bool:
        model = await self._session.get(PlatformModel, entity_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
