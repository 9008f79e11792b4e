from .base import Base
from .session import engine, async_session_factory, create_tables, get_db_session
from .models import ClientModel, PlatformModel, RecordModel, AdminCredentialModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "create_tables",
    "get_db_session",
    "ClientModel",
    "PlatformModel",
    "RecordModel",
    "AdminCredentialModel",
]
