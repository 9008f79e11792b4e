from .auth_service import AuthService
from .change_notifier import ChangeNotifier
from .client_service import ClientService
from .dashboard_service import DashboardService
from .platform_service import PlatformService
from .record_service import RecordService

__all__ = [
    "AuthService",
    "ChangeNotifier",
    "ClientService",
    "DashboardService",
    "PlatformService",
    "RecordService",
]
