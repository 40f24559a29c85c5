from .user import UserModel
from .website import ClientModel, WebsiteModel
from .maintenance_report import MaintenanceReportModel
from .telemetry import PerformanceScanModel, SecurityScanModel, UpdateLogModel

__all__ = [
    "UserModel",
    "ClientModel",
    "WebsiteModel",
    "MaintenanceReportModel",
    "PerformanceScanModel",
    "SecurityScanModel",
    "UpdateLogModel",
]
