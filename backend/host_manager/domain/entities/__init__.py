from .client import Client
from .platform import Platform
from .record import Record, RenewalStatus, PaymentStatus
from .dashboard import DashboardStats, ReportingPeriod
from .admin_credential import AdminCredential

__all__ = [
    "Client",
    "Platform",
    "Record",
    "RenewalStatus",
    "PaymentStatus",
    "DashboardStats",
    "ReportingPeriod",
    "AdminCredential",
]
