"""SQLAlchemy ORM model for the MaintenanceReport entity."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime, ForeignKey, Index, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from wpfleet.infrastructure.database.base import Base


class MaintenanceReportModel(Base):
    """ORM model — maps to the 'maintenance_reports' table.

    ``website_ids`` holds a JSON list; rows written by older releases may
    hold a bare integer instead.
    """

    __tablename__ = "maintenance_reports"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    client_id: Mapped[int | None] = mapped_column(
        ForeignKey("clients.id"), nullable=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    report_type: Mapped[str] = mapped_column(
        String(50), nullable=False, default="maintenance"
    )
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="draft")
    website_ids: Mapped[Any] = mapped_column(JSON, nullable=False)
    date_from: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    date_to: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    report_data: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    generated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (Index("ix_maintenance_reports_user", "user_id"),)

    def __repr__(self) -> str:
        return f"<MaintenanceReportModel(id={self.id}, title='{self.title}')>"
