from .client import ClientModel
from .platform import PlatformModel
from .record import RecordModel
from .admin_credential import AdminCredentialModel

__all__ = [
    "ClientModel",
    "PlatformModel",
    "RecordModel",
    "AdminCredentialModel",
]
