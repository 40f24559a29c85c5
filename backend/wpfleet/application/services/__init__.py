from .identifier_validator import parse_identifier, parse_report_identifiers
from .report_access import AuthorizedReport, OwnershipAuthorizer
from .report_sources import CollectedSources, ReportSourceCollector, SourceResult
from .report_normalizer import NormalizedSources, normalize_sources
from .report_shaper import shape_report
from .maintenance_report_service import MaintenanceReportService

__all__ = [
    "parse_identifier",
    "parse_report_identifiers",
    "AuthorizedReport",
    "OwnershipAuthorizer",
    "CollectedSources",
    "ReportSourceCollector",
    "SourceResult",
    "NormalizedSources",
    "normalize_sources",
    "shape_report",
    "MaintenanceReportService",
]
