"""Domain entities — append-only telemetry histories recorded per website."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class PerformanceScan:
    """One page-speed scan result."""

    website_id: int
    scan_timestamp: datetime | None = None
    lcp_score: float | None = None
    pagespeed_score: int | None = None
    scan_data: dict[str, Any] = field(default_factory=dict)


@dataclass
class SecurityScan:
    """One malware / vulnerability scan result."""

    website_id: int
    scan_started_at: datetime | None = None
    malware_status: str | None = None
    threats_detected: int | None = None
    core_vulnerabilities: int | None = None
    plugin_vulnerabilities: int | None = None
    theme_vulnerabilities: int | None = None


@dataclass
class UpdateLogEntry:
    """One plugin, theme, or WordPress core update attempt."""

    website_id: int
    update_type: str
    item_name: str | None = None
    from_version: str | None = None
    to_version: str | None = None
    update_status: str | None = None
    created_at: datetime | None = None
