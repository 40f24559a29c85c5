"""Ownership checks guarding every report read."""

import logging
from dataclasses import dataclass

from wpfleet.application.interfaces import SiteStore
from wpfleet.domain.entities import MaintenanceReport, Website
from wpfleet.domain.exceptions import EntityNotFoundError, ReportAccessDeniedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthorizedReport:
    """A website and report whose ownership chain has been verified."""

    website: Website
    report: MaintenanceReport


class OwnershipAuthorizer:
    """Establishes that a user may read a report through a website.

    The chain is checked in order and stops at the first failure:
    website owned by the user, report owned by the user, report covers
    the website.
    """

    def __init__(self, store: SiteStore):
        self._store = store

    async def require_website(self, user_id: int, website_id: int) -> Website:
        website = await self._store.get_website(website_id, user_id)
        if website is None:
            logger.info("Website %s not found for user %s", website_id, user_id)
            raise EntityNotFoundError("Website", website_id)
        return website

    async def authorize(
        self, user_id: int, website_id: int, report_id: int
    ) -> AuthorizedReport:
        website = await self.require_website(user_id, website_id)

        report = await self._store.get_maintenance_report(report_id, user_id)
        if report is None:
            logger.info("Report %s not found for user %s", report_id, user_id)
            raise EntityNotFoundError("MaintenanceReport", report_id)

        if not report.covers(website_id):
            logger.info(
                "Report %s does not cover website %s (covers %s)",
                report_id,
                website_id,
                sorted(report.website_ids),
            )
            raise ReportAccessDeniedError(report_id, website_id)

        return AuthorizedReport(website=website, report=report)
