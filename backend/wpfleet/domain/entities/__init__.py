from .user import User
from .website import Client, Website
from .maintenance_report import (
    MAINTENANCE_REPORT_TYPE,
    MaintenanceReport,
    ReportStatus,
    coerce_website_ids,
)
from .telemetry import PerformanceScan, SecurityScan, UpdateLogEntry

__all__ = [
    "User",
    "Client",
    "Website",
    "MAINTENANCE_REPORT_TYPE",
    "MaintenanceReport",
    "ReportStatus",
    "coerce_website_ids",
    "PerformanceScan",
    "SecurityScan",
    "UpdateLogEntry",
]
