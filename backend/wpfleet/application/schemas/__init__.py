from .maintenance_report import (
    BackupsSection,
    ClientSection,
    HealthSection,
    MaintenanceReportDocument,
    MaintenanceReportList,
    MaintenanceReportSummary,
    OverviewSection,
    PerformanceHistoryEntry,
    PerformanceSection,
    SecurityHistoryEntry,
    SecuritySection,
    UpdateEntry,
    UpdatesSection,
    WebsiteSection,
)

__all__ = [
    "BackupsSection",
    "ClientSection",
    "HealthSection",
    "MaintenanceReportDocument",
    "MaintenanceReportList",
    "MaintenanceReportSummary",
    "OverviewSection",
    "PerformanceHistoryEntry",
    "PerformanceSection",
    "SecurityHistoryEntry",
    "SecuritySection",
    "UpdateEntry",
    "UpdatesSection",
    "WebsiteSection",
]
