"""Pydantic DTOs (Data Transfer Objects) for the maintenance report document.

Field names are snake_case in Python and serialized as camelCase, which is
the vocabulary the dashboard front-end consumes.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


# ── Normalized history entries ───────────────────────────────────────


class UpdateEntry(_CamelModel):
    """One plugin, theme, or core update as shown in the report."""

    name: str
    from_version: str
    to_version: str
    status: str
    date: str


class SecurityHistoryEntry(_CamelModel):
    """One security scan, reduced to its report-level verdict."""

    date: str
    malware: str
    vulnerabilities: int
    status: Literal["clean", "issues"]


class PerformanceHistoryEntry(_CamelModel):
    """One performance scan, reduced to its headline numbers."""

    date: str
    score: int | float
    load_time: float


# ── Report sections ──────────────────────────────────────────────────


class WebsiteSection(_CamelModel):
    id: int
    name: str
    url: str
    status: str
    last_sync: str
    wp_version: str


class ClientSection(_CamelModel):
    id: int | None = None
    name: str
    email: str


class UpdatesSection(_CamelModel):
    plugins: list[UpdateEntry] = Field(default_factory=list)
    themes: list[UpdateEntry] = Field(default_factory=list)
    wordpress: UpdateEntry | None = None
    total: int = 0


class SecuritySection(_CamelModel):
    last_scan: str
    vulnerabilities: int
    status: Literal["good", "issues"]
    scan_history: list[SecurityHistoryEntry] = Field(default_factory=list)


class PerformanceSection(_CamelModel):
    last_scan: str
    score: int | float
    load_time: float
    metrics: dict[str, Any] = Field(default_factory=dict)
    history: list[PerformanceHistoryEntry] = Field(default_factory=list)


class BackupsSection(_CamelModel):
    last_backup: str | None = None
    status: Literal["current", "none"]
    total: int = 0


class HealthSection(_CamelModel):
    wp_version: str
    php_version: str
    overall_score: int | float


class OverviewSection(_CamelModel):
    updates_performed: int
    backups_created: int
    uptime_percentage: float
    security_status: Literal["safe", "warning"]
    performance_score: int | float


# ── Top-level documents ──────────────────────────────────────────────


class MaintenanceReportDocument(_CamelModel):
    """The fully assembled report returned by the detail endpoint.

    Every key is always present; missing upstream data shows up as the
    documented defaults, and failed sources are named in ``degraded_sources``.
    """

    id: int
    website_id: int
    title: str
    report_type: Literal["maintenance"] = "maintenance"
    status: str
    created_at: str
    generated_at: str | None = None
    website: WebsiteSection
    client: ClientSection
    updates: UpdatesSection
    security: SecuritySection
    performance: PerformanceSection
    backups: BackupsSection
    health: HealthSection
    overview: OverviewSection
    degraded_sources: list[str] = Field(default_factory=list)


class MaintenanceReportSummary(_CamelModel):
    """Schema for one row of the report listing."""

    id: int
    title: str
    status: str
    report_type: str
    date_from: str | None = None
    date_to: str | None = None
    created_at: str | None = None


class MaintenanceReportList(_CamelModel):
    reports: list[MaintenanceReportSummary] = Field(default_factory=list)
