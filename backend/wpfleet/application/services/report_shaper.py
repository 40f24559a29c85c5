"""Assembly of normalized sources into the maintenance report document."""

import math
from datetime import datetime
from numbers import Real
from typing import Any

from wpfleet.application.schemas.maintenance_report import (
    BackupsSection,
    HealthSection,
    MaintenanceReportDocument,
    OverviewSection,
    PerformanceSection,
    SecuritySection,
    UpdatesSection,
)
from wpfleet.application.services.report_normalizer import (
    DEFAULT_LOAD_TIME_SECONDS,
    DEFAULT_PAGESPEED_SCORE,
    NormalizedSources,
    normalize_website,
    to_iso,
    to_iso_or_none,
)
from wpfleet.domain.entities import MAINTENANCE_REPORT_TYPE, MaintenanceReport, Website

DEFAULT_UPTIME_PERCENTAGE = 99.9
DEFAULT_OVERALL_HEALTH_SCORE = 85
UNKNOWN_PHP_VERSION = "Unknown"


def _stored_value(data: dict[str, Any], section: str, key: str) -> Any:
    block = data.get(section)
    if isinstance(block, dict):
        return block.get(key)
    return None


def _stored_number(data: dict[str, Any], section: str, key: str, default: float) -> Any:
    value = _stored_value(data, section, key)
    if isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value):
        return value
    return default


def _stored_text(data: dict[str, Any], section: str, key: str, default: str) -> str:
    value = _stored_value(data, section, key)
    return value if isinstance(value, str) and value else default


def shape_report(
    website: Website,
    report: MaintenanceReport,
    sources: NormalizedSources,
    now: datetime,
) -> MaintenanceReportDocument:
    """Build the fixed-layout report document.

    Derived fields:
      * ``security.status`` is "issues" when any scan has issues, else "good";
        ``overview.securityStatus`` uses "warning"/"safe" for the same test.
      * ``performance.score`` is the newest page-speed score, else 85.
      * ``backups.status`` is "current" when the website ever recorded a backup.
    """
    stored = report.stored_data
    updates = sources.updates
    security_history = sources.security
    performance_history = sources.performance

    has_security_issues = any(s.status == "issues" for s in security_history)
    latest_performance = performance_history[0] if performance_history else None
    performance_score = (
        latest_performance.score if latest_performance else DEFAULT_PAGESPEED_SCORE
    )
    backups_total = int(_stored_number(stored, "backups", "total", 0))

    website_section = normalize_website(website, now)

    return MaintenanceReportDocument(
        id=report.id,
        website_id=website.id,
        title=report.title,
        report_type=MAINTENANCE_REPORT_TYPE,
        status=report.status,
        created_at=to_iso(report.created_at, now),
        generated_at=to_iso_or_none(report.generated_at),
        website=website_section,
        client=sources.client,
        updates=UpdatesSection(
            plugins=updates.plugins,
            themes=updates.themes,
            wordpress=updates.core[0] if updates.core else None,
            total=updates.total,
        ),
        security=SecuritySection(
            last_scan=(
                security_history[0].date if security_history else to_iso(None, now)
            ),
            vulnerabilities=(
                security_history[0].vulnerabilities if security_history else 0
            ),
            status="issues" if has_security_issues else "good",
            scan_history=security_history,
        ),
        performance=PerformanceSection(
            last_scan=(
                latest_performance.date if latest_performance else to_iso(None, now)
            ),
            score=performance_score,
            load_time=(
                latest_performance.load_time
                if latest_performance
                else DEFAULT_LOAD_TIME_SECONDS
            ),
            metrics=sources.latest_metrics,
            history=performance_history,
        ),
        backups=BackupsSection(
            last_backup=to_iso_or_none(website.last_backup),
            status="current" if website.last_backup else "none",
            total=backups_total,
        ),
        health=HealthSection(
            wp_version=website_section.wp_version,
            php_version=_stored_text(stored, "health", "phpVersion", UNKNOWN_PHP_VERSION),
            overall_score=_stored_number(
                stored, "health", "overallScore", DEFAULT_OVERALL_HEALTH_SCORE
            ),
        ),
        overview=OverviewSection(
            updates_performed=updates.total,
            backups_created=backups_total,
            uptime_percentage=_stored_number(
                stored, "overview", "uptimePercentage", DEFAULT_UPTIME_PERCENTAGE
            ),
            security_status="warning" if has_security_issues else "safe",
            performance_score=performance_score,
        ),
        degraded_sources=list(sources.degraded),
    )
