"""Shared fixtures — an in-memory Site Store and a fixed clock."""

import asyncio
from datetime import datetime, timezone
from typing import Any

import pytest

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

FIXED_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeSiteStore(SiteStore):
    """In-memory fake Site Store honouring the ownership-scoped read contract.

    ``failures`` maps a method name to an exception raised on every call;
    ``delays`` maps a method name to seconds slept before answering.
    """

    def __init__(self):
        self.users: dict[int, User] = {}
        self.websites: dict[int, Website] = {}
        self.clients: dict[int, Client] = {}
        self.reports: dict[int, MaintenanceReport] = {}
        self.performance: list[PerformanceScan] = []
        self.security: list[tuple[int, SecurityScan]] = []
        self.updates: list[tuple[int, UpdateLogEntry]] = []
        self.failures: dict[str, Exception] = {}
        self.delays: dict[str, float] = {}
        self.calls: list[str] = []

    # ── Builders ──

    def add_user(self, user_id: int = 1, email: str | None = None) -> User:
        user = User(id=user_id, email=email or f"user{user_id}@example.com")
        self.users[user_id] = user
        return user

    def add_website(self, website_id: int, owner: int, **fields: Any) -> Website:
        website = Website(id=website_id, owner_user_id=owner, **fields)
        self.websites[website_id] = website
        return website

    def add_client(self, client_id: int, owner: int, **fields: Any) -> Client:
        client = Client(id=client_id, owner_user_id=owner, **fields)
        self.clients[client_id] = client
        return client

    def add_report(
        self, report_id: int, owner: int, website_ids: Any, **fields: Any
    ) -> MaintenanceReport:
        fields.setdefault("title", f"Maintenance Report #{report_id}")
        report = MaintenanceReport(
            id=report_id, owner_user_id=owner, website_ids=website_ids, **fields
        )
        self.reports[report_id] = report
        return report

    def add_performance_scan(self, website_id: int, **fields: Any) -> PerformanceScan:
        scan = PerformanceScan(website_id=website_id, **fields)
        self.performance.append(scan)
        return scan

    def add_security_scan(self, website_id: int, owner: int, **fields: Any) -> SecurityScan:
        scan = SecurityScan(website_id=website_id, **fields)
        self.security.append((owner, scan))
        return scan

    def add_update_log(
        self, website_id: int, owner: int, update_type: str, **fields: Any
    ) -> UpdateLogEntry:
        entry = UpdateLogEntry(website_id=website_id, update_type=update_type, **fields)
        self.updates.append((owner, entry))
        return entry

    # ── Port ──

    async def _enter(self, name: str) -> None:
        self.calls.append(name)
        if name in self.delays:
            await asyncio.sleep(self.delays[name])
        if name in self.failures:
            raise self.failures[name]

    async def get_user(self, user_id):
        await self._enter("get_user")
        return self.users.get(user_id)

    async def get_website(self, website_id, user_id):
        await self._enter("get_website")
        website = self.websites.get(website_id)
        return website if website and website.owner_user_id == user_id else None

    async def get_client(self, client_id, user_id):
        await self._enter("get_client")
        client = self.clients.get(client_id)
        return client if client and client.owner_user_id == user_id else None

    async def get_maintenance_report(self, report_id, user_id):
        await self._enter("get_maintenance_report")
        report = self.reports.get(report_id)
        return report if report and report.owner_user_id == user_id else None

    async def get_maintenance_reports(self, user_id):
        await self._enter("get_maintenance_reports")
        return [r for r in self.reports.values() if r.owner_user_id == user_id]

    async def get_performance_scans(self, website_id, user_id, limit):
        await self._enter("get_performance_scans")
        website = self.websites.get(website_id)
        if website is None or website.owner_user_id != user_id:
            return []
        scans = [s for s in self.performance if s.website_id == website_id]
        scans.sort(key=lambda s: s.scan_timestamp, reverse=True)
        return scans[:limit]

    async def get_security_scans(self, website_id, user_id, limit):
        await self._enter("get_security_scans")
        scans = [s for owner, s in self.security if owner == user_id and s.website_id == website_id]
        scans.sort(key=lambda s: s.scan_started_at, reverse=True)
        return scans[:limit]

    async def get_update_logs(self, website_id, user_id, limit):
        await self._enter("get_update_logs")
        entries = [e for owner, e in self.updates if owner == user_id and e.website_id == website_id]
        entries.sort(key=lambda e: e.created_at or datetime.min.replace(tzinfo=timezone.utc), reverse=True)
        return entries[:limit]


@pytest.fixture
def store() -> FakeSiteStore:
    return FakeSiteStore()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
