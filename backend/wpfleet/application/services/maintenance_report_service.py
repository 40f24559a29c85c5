"""Application service (use case) for reading maintenance reports."""

from collections.abc import Callable
from datetime import datetime, timezone

from wpfleet.application.interfaces import SiteStore
from wpfleet.application.schemas.maintenance_report import (
    MaintenanceReportDocument,
    MaintenanceReportSummary,
)
from wpfleet.application.services.identifier_validator import (
    parse_identifier,
    parse_report_identifiers,
)
from wpfleet.application.services.report_access import OwnershipAuthorizer
from wpfleet.application.services.report_normalizer import (
    as_utc,
    normalize_sources,
    to_iso_or_none,
)
from wpfleet.application.services.report_shaper import shape_report
from wpfleet.application.services.report_sources import ReportSourceCollector
from wpfleet.domain.entities import MAINTENANCE_REPORT_TYPE
from wpfleet.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

log = PipelineLogger("ReportAssemblyPipeline")

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MaintenanceReportService:
    """Assembles report documents from the Site Store.

    Pipeline: validate identifiers → authorize ownership chain → collect the
    four sources concurrently → normalize → shape. Only the authorization
    steps can fail the request; collection failures degrade to defaults.
    """

    def __init__(
        self,
        store: SiteStore,
        collector: ReportSourceCollector,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._authorizer = OwnershipAuthorizer(store)
        self._store = store
        self._collector = collector
        self._clock = clock

    async def get_report(
        self, user_id: int, raw_website_id: object, raw_report_id: object
    ) -> MaintenanceReportDocument:
        website_id, report_id = parse_report_identifiers(raw_website_id, raw_report_id)
        log.step_complete(PipelineStage.VALIDATE, "Identifiers parsed")
        log.step_start(
            PipelineStage.PIPELINE,
            "Assembling maintenance report",
            user_id=user_id,
            website_id=website_id,
            report_id=report_id,
        )

        access = await self._authorizer.authorize(user_id, website_id, report_id)
        log.step_complete(PipelineStage.AUTHORIZE, "Ownership chain verified")

        with log.timed_step(PipelineStage.COLLECT, "Collecting report sources"):
            collected = await self._collector.collect_all(
                website_id, user_id, access.report.client_id
            )
        for source in collected.degraded:
            log.step_warning(
                PipelineStage.COLLECT,
                f"Source '{source}' degraded to defaults",
                website_id=website_id,
                report_id=report_id,
            )

        now = self._clock()
        with log.timed_step(PipelineStage.NORMALIZE, "Normalizing sources"):
            normalized = normalize_sources(collected, now)
        log.detail(
            "Normalized",
            performance=len(normalized.performance),
            security=len(normalized.security),
            updates=normalized.updates.total,
        )

        with log.timed_step(PipelineStage.SHAPE, "Shaping report document"):
            document = shape_report(access.website, access.report, normalized, now)

        log.step_complete(PipelineStage.COMPLETE, "Report assembled")
        log.stats(report_id=report_id, degraded=",".join(document.degraded_sources) or "none")
        return document

    async def list_reports(
        self, user_id: int, raw_website_id: object
    ) -> list[MaintenanceReportSummary]:
        """Maintenance reports covering a website, newest first."""
        website_id = parse_identifier("website_id", raw_website_id)
        await self._authorizer.require_website(user_id, website_id)

        reports = await self._store.get_maintenance_reports(user_id)
        matching = [
            r
            for r in reports
            if r.report_type == MAINTENANCE_REPORT_TYPE and r.covers(website_id)
        ]
        matching.sort(key=lambda r: as_utc(r.created_at) or _OLDEST, reverse=True)

        return [
            MaintenanceReportSummary(
                id=r.id,
                title=r.title,
                status=r.status,
                report_type=r.report_type,
                date_from=to_iso_or_none(r.date_from),
                date_to=to_iso_or_none(r.date_to),
                created_at=to_iso_or_none(r.created_at),
            )
            for r in matching
        ]
