"""Concrete repository implementation for the admin credential backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from host_manager.application.interfaces import AdminCredentialRepository
from host_manager.domain.entities import AdminCredential
from host_manager.infrastructure.database.models import AdminCredentialModel


class SQLAlchemyAdminCredentialRepository(AdminCredentialRepository):
    """Implements the AdminCredentialRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AdminCredentialModel) -> AdminCredential:
        return AdminCredential(
            id=model.id,
            username=model.username,
            password_hash=model.password_hash,
            updated_at=model.updated_at,
        )

    async def get(self) -> AdminCredential | None:
        result = await self._session.execute(select(AdminCredentialModel).limit(1))
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def save(self, credential: AdminCredential) -> AdminCredential:
        model = await self._session.get(AdminCredentialModel, credential.id)
        if model is None:
            model = AdminCredentialModel(id=credential.id)
            self._session.add(model)
        model.username = credential.username
        model.password_hash = credential.password_hash
        model.updated_at = credential.updated_at
        await self._session.flush()
        return self._to_entity(model)
