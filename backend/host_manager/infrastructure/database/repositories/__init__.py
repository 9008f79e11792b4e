from .client_repository import SQLAlchemyClientRepository
from .platform_repository import SQLAlchemyPlatformRepository
from .record_repository import SQLAlchemyRecordRepository
from .admin_credential_repository import SQLAlchemyAdminCredentialRepository

__all__ = [
    "SQLAlchemyClientRepository",
    "SQLAlchemyPlatformRepository",
    "SQLAlchemyRecordRepository",
    "SQLAlchemyAdminCredentialRepository",
]
