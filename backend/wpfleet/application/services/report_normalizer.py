"""Normalization of raw store records into the report vocabulary.

Defaults are applied field by field: a record with some missing fields keeps
its real values and gets placeholders only where data is absent. Timestamps
without a value are replaced by ``now``, which means "freshness unknown",
not a real event time.
"""

import logging
import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from numbers import Real
from typing import Any, TypeVar

from pydantic import ValidationError

from wpfleet.application.schemas.maintenance_report import (
    ClientSection,
    PerformanceHistoryEntry,
    SecurityHistoryEntry,
    UpdateEntry,
    WebsiteSection,
)
from wpfleet.application.services.report_sources import (
    SOURCE_CLIENT,
    SOURCE_PERFORMANCE,
    SOURCE_SECURITY,
    SOURCE_UPDATES,
    CollectedSources,
)
from wpfleet.domain.entities import (
    Client,
    PerformanceScan,
    SecurityScan,
    UpdateLogEntry,
    Website,
)

logger = logging.getLogger(__name__)

# ── Fallback constants ───────────────────────────────────────────────

UNKNOWN_CLIENT_NAME = "Unknown Client"
UNKNOWN_CLIENT_EMAIL = "N/A"
UNKNOWN_WEBSITE_NAME = "Unknown Website"
PLACEHOLDER_WEBSITE_URL = "https://example.com"
UNKNOWN_WP_VERSION = "Unknown"
UNKNOWN_CONNECTION_STATUS = "unknown"

DEFAULT_LOAD_TIME_SECONDS = 2.5
DEFAULT_PAGESPEED_SCORE = 85

MALWARE_CLEAN = "clean"

UNKNOWN_PLUGIN_NAME = "Unknown Plugin"
UNKNOWN_THEME_NAME = "Unknown Theme"
CORE_UPDATE_NAME = "WordPress Core"
UNKNOWN_VERSION = "0.0.0"
DEFAULT_UPDATE_STATUS = "success"

UPDATE_TYPE_PLUGIN = "plugin"
UPDATE_TYPE_THEME = "theme"
UPDATE_TYPE_CORE = "wordpress"

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)

R = TypeVar("R")


# ── Primitives ───────────────────────────────────────────────────────


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes; the store writes UTC throughout."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_iso(value: datetime | None, now: datetime) -> str:
    """ISO-8601 rendering, substituting ``now`` for an absent timestamp."""
    return (as_utc(value) or as_utc(now)).isoformat()


def to_iso_or_none(value: datetime | None) -> str | None:
    converted = as_utc(value)
    return converted.isoformat() if converted else None


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _newest_first(
    records: Iterable[R], timestamp: Callable[[R], datetime | None]
) -> list[R]:
    """Stable newest-first ordering; records without a timestamp go last."""
    return sorted(
        records,
        key=lambda r: as_utc(timestamp(r)) or _OLDEST,
        reverse=True,
    )


# ── Entity sections ──────────────────────────────────────────────────


def normalize_client(client: Client | None) -> ClientSection:
    if client is None:
        return ClientSection(name=UNKNOWN_CLIENT_NAME, email=UNKNOWN_CLIENT_EMAIL)
    return ClientSection(
        id=client.id,
        name=client.name or UNKNOWN_CLIENT_NAME,
        email=client.email or UNKNOWN_CLIENT_EMAIL,
    )


def normalize_website(website: Website, now: datetime) -> WebsiteSection:
    return WebsiteSection(
        id=website.id,
        name=website.name or UNKNOWN_WEBSITE_NAME,
        url=website.url or PLACEHOLDER_WEBSITE_URL,
        status=website.connection_status or UNKNOWN_CONNECTION_STATUS,
        last_sync=to_iso(website.last_sync, now),
        wp_version=website.wp_version or UNKNOWN_WP_VERSION,
    )


# ── History records ──────────────────────────────────────────────────


def load_time_seconds(scan: PerformanceScan) -> float:
    """Load time from the YSlow metrics (ms), else the LCP score, else 2.5s."""
    metrics = scan.scan_data if isinstance(scan.scan_data, dict) else {}
    yslow = metrics.get("yslow_metrics")
    if isinstance(yslow, dict) and _is_number(yslow.get("load_time")):
        return float(yslow["load_time"]) / 1000
    if _is_number(scan.lcp_score):
        return float(scan.lcp_score)
    return DEFAULT_LOAD_TIME_SECONDS


def normalize_performance_scan(
    scan: PerformanceScan, now: datetime
) -> PerformanceHistoryEntry:
    score = scan.pagespeed_score
    return PerformanceHistoryEntry(
        date=to_iso(scan.scan_timestamp, now),
        score=score if _is_number(score) else DEFAULT_PAGESPEED_SCORE,
        load_time=load_time_seconds(scan),
    )


def normalize_security_scan(scan: SecurityScan, now: datetime) -> SecurityHistoryEntry:
    malware = scan.malware_status or MALWARE_CLEAN
    threats = scan.threats_detected or 0
    vulnerabilities = (
        (scan.core_vulnerabilities or 0)
        + (scan.plugin_vulnerabilities or 0)
        + (scan.theme_vulnerabilities or 0)
    )
    return SecurityHistoryEntry(
        date=to_iso(scan.scan_started_at, now),
        malware=malware,
        vulnerabilities=vulnerabilities,
        status="clean" if malware == MALWARE_CLEAN and threats == 0 else "issues",
    )


def _update_entry(entry: UpdateLogEntry, name: str, now: datetime) -> UpdateEntry:
    return UpdateEntry(
        name=name,
        from_version=entry.from_version or UNKNOWN_VERSION,
        to_version=entry.to_version or UNKNOWN_VERSION,
        status=entry.update_status or DEFAULT_UPDATE_STATUS,
        date=to_iso(entry.created_at, now),
    )


@dataclass
class UpdateBuckets:
    """Update log window split by update type."""

    plugins: list[UpdateEntry] = field(default_factory=list)
    themes: list[UpdateEntry] = field(default_factory=list)
    core: list[UpdateEntry] = field(default_factory=list)
    total: int = 0


def partition_update_logs(
    entries: Sequence[UpdateLogEntry], now: datetime
) -> UpdateBuckets:
    """Split update logs into plugin / theme / core buckets, newest first.

    ``total`` counts every fetched entry, including unrecognized types.
    """
    buckets = UpdateBuckets(total=len(entries))
    for entry in _newest_first(entries, lambda e: e.created_at):
        if entry.update_type == UPDATE_TYPE_PLUGIN:
            buckets.plugins.append(
                _update_entry(entry, entry.item_name or UNKNOWN_PLUGIN_NAME, now)
            )
        elif entry.update_type == UPDATE_TYPE_THEME:
            buckets.themes.append(
                _update_entry(entry, entry.item_name or UNKNOWN_THEME_NAME, now)
            )
        elif entry.update_type == UPDATE_TYPE_CORE:
            buckets.core.append(_update_entry(entry, CORE_UPDATE_NAME, now))
    return buckets


# ── All sources ──────────────────────────────────────────────────────


@dataclass
class NormalizedSources:
    """Every source of a report in canonical form."""

    client: ClientSection
    performance: list[PerformanceHistoryEntry]
    security: list[SecurityHistoryEntry]
    updates: UpdateBuckets
    latest_metrics: dict[str, Any] = field(default_factory=dict)
    degraded: list[str] = field(default_factory=list)


def _normalize_performance(
    scans: Sequence[PerformanceScan], now: datetime
) -> tuple[list[PerformanceHistoryEntry], dict[str, Any]]:
    ordered = _newest_first(scans, lambda s: s.scan_timestamp)
    latest_metrics: dict[str, Any] = {}
    if ordered and isinstance(ordered[0].scan_data, dict):
        latest_metrics = dict(ordered[0].scan_data)
    return [normalize_performance_scan(s, now) for s in ordered], latest_metrics


def _normalize_security(
    scans: Sequence[SecurityScan], now: datetime
) -> list[SecurityHistoryEntry]:
    ordered = _newest_first(scans, lambda s: s.scan_started_at)
    return [normalize_security_scan(s, now) for s in ordered]


def normalize_sources(collected: CollectedSources, now: datetime) -> NormalizedSources:
    """Normalize every collected source.

    A source whose records cannot be normalized (wrong types from the store)
    is treated like a failed read: its defaults are used and it is listed
    as degraded.
    """
    degraded = list(collected.degraded)

    def guarded(source: str, normalize: Callable[[], R], default: R) -> R:
        try:
            return normalize()
        except (AttributeError, TypeError, ValueError, ValidationError) as exc:
            logger.warning(
                "Malformed '%s' records, using defaults: %s: %s",
                source,
                type(exc).__name__,
                exc,
            )
            if source not in degraded:
                degraded.append(source)
            return default

    performance, latest_metrics = guarded(
        SOURCE_PERFORMANCE,
        lambda: _normalize_performance(collected.performance.value, now),
        ([], {}),
    )

    return NormalizedSources(
        client=guarded(
            SOURCE_CLIENT,
            lambda: normalize_client(collected.client.value),
            normalize_client(None),
        ),
        performance=performance,
        security=guarded(
            SOURCE_SECURITY,
            lambda: _normalize_security(collected.security.value, now),
            [],
        ),
        updates=guarded(
            SOURCE_UPDATES,
            lambda: partition_update_logs(collected.updates.value, now),
            UpdateBuckets(),
        ),
        latest_metrics=latest_metrics,
        degraded=degraded,
    )
