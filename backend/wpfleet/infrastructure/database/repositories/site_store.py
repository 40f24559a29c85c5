"""Concrete Site Store implementation backed by SQLAlchemy.

Read-only: rows are written by sync jobs and report generation elsewhere.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from wpfleet.application.interfaces import SiteStore
from wpfleet.domain.entities import (
    Client,
    MaintenanceReport,
    PerformanceScan,
    SecurityScan,
    UpdateLogEntry,
    User,
    Website,
)
from wpfleet.infrastructure.database.models import (
    ClientModel,
    MaintenanceReportModel,
    PerformanceScanModel,
    SecurityScanModel,
    UpdateLogModel,
    UserModel,
    WebsiteModel,
)


class SQLAlchemySiteStore(SiteStore):
    """Implements the SiteStore port using SQLAlchemy async sessions.

    Every query carries the user id in its WHERE clause; performance scans,
    which have no owner column, are joined to their website's owner.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    # ── Mapping ──────────────────────────────────────────────────────

    @staticmethod
    def _to_user(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
        )

    @staticmethod
    def _to_website(model: WebsiteModel) -> Website:
        return Website(
            id=model.id,
            owner_user_id=model.user_id,
            client_id=model.client_id,
            name=model.name,
            url=model.url,
            connection_status=model.connection_status,
            wp_version=model.wp_version,
            last_sync=model.last_sync,
            last_backup=model.last_backup,
        )

    @staticmethod
    def _to_client(model: ClientModel) -> Client:
        return Client(
            id=model.id,
            owner_user_id=model.user_id,
            name=model.name,
            email=model.email,
        )

    @staticmethod
    def _to_report(model: MaintenanceReportModel) -> MaintenanceReport:
        return MaintenanceReport(
            id=model.id,
            owner_user_id=model.user_id,
            client_id=model.client_id,
            title=model.title,
            report_type=model.report_type,
            status=model.status,
            website_ids=model.website_ids,
            date_from=model.date_from,
            date_to=model.date_to,
            created_at=model.created_at,
            generated_at=model.generated_at,
            stored_data=model.report_data or {},
        )

    @staticmethod
    def _to_performance_scan(model: PerformanceScanModel) -> PerformanceScan:
        return PerformanceScan(
            website_id=model.website_id,
            scan_timestamp=model.scan_timestamp,
            lcp_score=model.lcp_score,
            pagespeed_score=model.pagespeed_score,
            scan_data=model.scan_data or {},
        )

    @staticmethod
    def _to_security_scan(model: SecurityScanModel) -> SecurityScan:
        return SecurityScan(
            website_id=model.website_id,
            scan_started_at=model.scan_started_at,
            malware_status=model.malware_status,
            threats_detected=model.threats_detected,
            core_vulnerabilities=model.core_vulnerabilities,
            plugin_vulnerabilities=model.plugin_vulnerabilities,
            theme_vulnerabilities=model.theme_vulnerabilities,
        )

    @staticmethod
    def _to_update_log(model: UpdateLogModel) -> UpdateLogEntry:
        return UpdateLogEntry(
            website_id=model.website_id,
            update_type=model.update_type,
            item_name=model.item_name,
            from_version=model.from_version,
            to_version=model.to_version,
            update_status=model.update_status,
            created_at=model.created_at,
        )

    # ── Queries ──────────────────────────────────────────────────────

    async def _first(self, stmt: Select):
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return result.scalars().first()

    async def _all(self, stmt: Select) -> list:
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def get_user(self, user_id: int) -> User | None:
        model = await self._first(select(UserModel).where(UserModel.id == user_id))
        return self._to_user(model) if model else None

    async def get_website(self, website_id: int, user_id: int) -> Website | None:
        stmt = select(WebsiteModel).where(
            WebsiteModel.id == website_id,
            WebsiteModel.user_id == user_id,
        )
        model = await self._first(stmt)
        return self._to_website(model) if model else None

    async def get_client(self, client_id: int, user_id: int) -> Client | None:
        stmt = select(ClientModel).where(
            ClientModel.id == client_id,
            ClientModel.user_id == user_id,
        )
        model = await self._first(stmt)
        return self._to_client(model) if model else None

    async def get_maintenance_report(
        self, report_id: int, user_id: int
    ) -> MaintenanceReport | None:
        stmt = select(MaintenanceReportModel).where(
            MaintenanceReportModel.id == report_id,
            MaintenanceReportModel.user_id == user_id,
        )
        model = await self._first(stmt)
        return self._to_report(model) if model else None

    async def get_maintenance_reports(self, user_id: int) -> list[MaintenanceReport]:
        stmt = (
            select(MaintenanceReportModel)
            .where(MaintenanceReportModel.user_id == user_id)
            .order_by(MaintenanceReportModel.created_at.desc())
        )
        return [self._to_report(m) for m in await self._all(stmt)]

    async def get_performance_scans(
        self, website_id: int, user_id: int, limit: int
    ) -> list[PerformanceScan]:
        stmt = (
            select(PerformanceScanModel)
            .join(WebsiteModel, PerformanceScanModel.website_id == WebsiteModel.id)
            .where(
                PerformanceScanModel.website_id == website_id,
                WebsiteModel.user_id == user_id,
            )
            .order_by(PerformanceScanModel.scan_timestamp.desc())
            .limit(limit)
        )
        return [self._to_performance_scan(m) for m in await self._all(stmt)]

    async def get_security_scans(
        self, website_id: int, user_id: int, limit: int
    ) -> list[SecurityScan]:
        stmt = (
            select(SecurityScanModel)
            .where(
                SecurityScanModel.website_id == website_id,
                SecurityScanModel.user_id == user_id,
            )
            .order_by(SecurityScanModel.scan_started_at.desc())
            .limit(limit)
        )
        return [self._to_security_scan(m) for m in await self._all(stmt)]

    async def get_update_logs(
        self, website_id: int, user_id: int, limit: int
    ) -> list[UpdateLogEntry]:
        stmt = (
            select(UpdateLogModel)
            .where(
                UpdateLogModel.website_id == website_id,
                UpdateLogModel.user_id == user_id,
            )
            .order_by(UpdateLogModel.created_at.desc())
            .limit(limit)
        )
        return [self._to_update_log(m) for m in await self._all(stmt)]
