"""Application service (use case) for Platform operations."""

import logging

from host_manager.application.interfaces import PlatformRepository
from host_manager.application.schemas import PlatformCreate, PlatformUpdate
from host_manager.application.services.change_notifier import ChangeNotifier
from host_manager.domain.entities import Platform
from host_manager.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class PlatformService:
    """Orchestrates platform CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: PlatformRepository, notifier: ChangeNotifier | None = None):
        self._repository = repository
        self._notifier = notifier

    async def get_platform(self, platform_id: str) -> Platform:
        platform = await self._repository.get_by_id(platform_id)
        if platform is None:
            raise EntityNotFoundError("Platform", platform_id)
        return platform

    async def list_platforms(self) -> list[Platform]:
        return await self._repository.list_all()

    async def create_platform(self, data: PlatformCreate) -> Platform:
        created = await self._repository.create(Platform(name=data.name))
        logger.info("Created platform %s (%s)", created.id, created.name)
        await self._notify("created", created.id)
        return created

    async def update_platform(self, platform_id: str, data: PlatformUpdate) -> Platform:
        platform = await self.get_platform(platform_id)
        platform.update(name=data.name)
        updated = await self._repository.update(platform)
        await self._notify("updated", updated.id)
        return updated

    async def delete_platform(self, platform_id: str) -> bool:
        exists = await self._repository.get_by_id(platform_id)
        if exists is None:
            raise EntityNotFoundError("Platform", platform_id)
        deleted = await self._repository.delete(platform_id)
        logger.info("Deleted platform %s", platform_id)
        await self._notify("deleted", platform_id)
        return deleted

    async def _notify(self, action: str, platform_id: str) -> None:
        if self._notifier is not None:
            await self._notifier.broadcast("platforms", action, platform_id)
