from .entity_repository import (
    EntityRepository,
    ClientRepository,
    PlatformRepository,
    RecordRepository,
)
from .admin_credential_repository import AdminCredentialRepository
from .security import PasswordHasher, TokenIssuer

__all__ = [
    "EntityRepository",
    "ClientRepository",
    "PlatformRepository",
    "RecordRepository",
    "AdminCredentialRepository",
    "PasswordHasher",
    "TokenIssuer",
]
