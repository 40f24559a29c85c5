"""SQLAlchemy ORM models for the per-website telemetry histories."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from wpfleet.infrastructure.database.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PerformanceScanModel(Base):
    """ORM model — maps to the 'performance_scans' table.

    Ownership is inherited from the scanned website.
    """

    __tablename__ = "performance_scans"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    website_id: Mapped[int] = mapped_column(
        ForeignKey("websites.id", ondelete="CASCADE"), nullable=False
    )
    scan_timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    pagespeed_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    lcp_score: Mapped[float | None] = mapped_column(Float, nullable=True)
    scan_data: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    __table_args__ = (
        Index("ix_performance_scans_website_time", "website_id", "scan_timestamp"),
    )


class SecurityScanModel(Base):
    """ORM model — maps to the 'security_scans' table."""

    __tablename__ = "security_scans"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    website_id: Mapped[int] = mapped_column(
        ForeignKey("websites.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    scan_started_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    malware_status: Mapped[str | None] = mapped_column(
        String(20), nullable=True, default="clean"
    )
    threats_detected: Mapped[int | None] = mapped_column(Integer, default=0)
    core_vulnerabilities: Mapped[int | None] = mapped_column(Integer, default=0)
    plugin_vulnerabilities: Mapped[int | None] = mapped_column(Integer, default=0)
    theme_vulnerabilities: Mapped[int | None] = mapped_column(Integer, default=0)

    __table_args__ = (
        Index("ix_security_scans_website_user", "website_id", "user_id"),
    )


class UpdateLogModel(Base):
    """ORM model — maps to the 'update_logs' table."""

    __tablename__ = "update_logs"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    website_id: Mapped[int] = mapped_column(
        ForeignKey("websites.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    update_type: Mapped[str] = mapped_column(String(50), nullable=False)
    item_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    from_version: Mapped[str | None] = mapped_column(String(100), nullable=True)
    to_version: Mapped[str | None] = mapped_column(String(100), nullable=True)
    update_status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=True
    )

    __table_args__ = (
        Index("ix_update_logs_website_user", "website_id", "user_id"),
    )
