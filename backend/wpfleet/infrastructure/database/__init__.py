from .base import Base
from .session import engine, async_session_factory
from .models import (
    ClientModel,
    MaintenanceReportModel,
    PerformanceScanModel,
    SecurityScanModel,
    UpdateLogModel,
    UserModel,
    WebsiteModel,
)

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "ClientModel",
    "MaintenanceReportModel",
    "PerformanceScanModel",
    "SecurityScanModel",
    "UpdateLogModel",
    "UserModel",
    "WebsiteModel",
]
