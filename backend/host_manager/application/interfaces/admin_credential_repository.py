"""Abstract repository interface (port) for the admin credential."""

from abc import ABC, abstractmethod

from host_manager.domain.entities import AdminCredential


class AdminCredentialRepository(ABC):
    """Port for the single admin credential row."""

    @abstractmethod
    async def get(self) -> AdminCredential | None:
        """Return the stored credential, or None before bootstrap."""
        ...

    @abstractmethod
    async def save(self, credential: AdminCredential) -> AdminCredential:
        """Insert or replace the stored credential."""
        ...
