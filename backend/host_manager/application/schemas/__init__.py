from .client import ClientCreate, ClientUpdate, ClientResponse
from .platform import PlatformCreate, PlatformUpdate, PlatformResponse
from .record import RecordCreate, RecordUpdate, RecordResponse
from .dashboard import DashboardStatsResponse
from .auth import LoginRequest, TokenResponse, CredentialsUpdate

__all__ = [
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "PlatformCreate",
    "PlatformUpdate",
    "PlatformResponse",
    "RecordCreate",
    "RecordUpdate",
    "RecordResponse",
    "DashboardStatsResponse",
    "LoginRequest",
    "TokenResponse",
    "CredentialsUpdate",
]
