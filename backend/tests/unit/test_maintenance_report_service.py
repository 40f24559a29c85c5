"""Unit tests for the MaintenanceReportService pipeline."""

from datetime import datetime, timedelta, timezone

import pytest

from wpfleet.application.services import MaintenanceReportService, ReportSourceCollector
from wpfleet.domain.exceptions import (
    EntityNotFoundError,
    InvalidIdentifierError,
    ReportAccessDeniedError,
)


def _ts(day: int, hour: int = 0) -> datetime:
    return datetime(2025, 2, day, hour, tzinfo=timezone.utc)


@pytest.fixture
def service(store, fixed_now) -> MaintenanceReportService:
    store.add_website(1, owner=10, name="Alpha", url="https://alpha.test", wp_version="6.5")
    store.add_website(2, owner=10, name="Beta")
    store.add_website(3, owner=20, name="Foreign")
    collector = ReportSourceCollector(store, timeout_seconds=0.2)
    return MaintenanceReportService(store, collector, clock=lambda: fixed_now)


@pytest.mark.asyncio
async def test_invalid_identifier_fails_before_any_store_access(store, service):
    with pytest.raises(InvalidIdentifierError):
        await service.get_report(10, "abc", "1")
    assert store.calls == []


@pytest.mark.asyncio
async def test_foreign_website_is_not_found(store, service):
    store.add_report(100, owner=10, website_ids=[3])

    with pytest.raises(EntityNotFoundError):
        await service.get_report(10, "3", "100")


@pytest.mark.asyncio
async def test_report_not_covering_website_is_denied_without_collecting(store, service):
    store.add_report(100, owner=10, website_ids=[2])

    with pytest.raises(ReportAccessDeniedError):
        await service.get_report(10, "1", "100")
    assert "get_performance_scans" not in store.calls


@pytest.mark.asyncio
async def test_zero_scans_yield_all_defaults(store, service, fixed_now):
    store.add_report(100, owner=10, website_ids=[1], created_at=_ts(1))

    document = await service.get_report(10, "1", "100")

    assert document.id == 100
    assert document.website_id == 1
    assert document.website.name == "Alpha"
    assert document.client.name == "Unknown Client"
    assert document.performance.score == 85
    assert document.overview.performance_score == 85
    assert document.performance.history == []
    assert document.security.scan_history == []
    assert document.security.status == "good"
    assert document.overview.security_status == "safe"
    assert document.updates.wordpress is None
    assert document.updates.total == 0
    assert document.backups.status == "none"
    assert document.security.last_scan == fixed_now.isoformat()
    assert document.degraded_sources == []


@pytest.mark.asyncio
async def test_updates_are_partitioned_and_latest_core_update_wins(store, service):
    store.add_report(100, owner=10, website_ids=[1])
    store.add_update_log(1, owner=10, update_type="plugin", item_name="Akismet", created_at=_ts(1))
    store.add_update_log(1, owner=10, update_type="theme", item_name="Astra", created_at=_ts(2))
    store.add_update_log(1, owner=10, update_type="wordpress", to_version="6.4", created_at=_ts(3))
    store.add_update_log(1, owner=10, update_type="wordpress", to_version="6.5", created_at=_ts(4))

    document = await service.get_report(10, "1", "100")

    assert document.updates.total == 4
    assert document.overview.updates_performed == 4
    assert document.updates.wordpress.to_version == "6.5"
    assert [p.name for p in document.updates.plugins] == ["Akismet"]
    assert [t.name for t in document.updates.themes] == ["Astra"]


@pytest.mark.asyncio
async def test_security_issue_sets_issues_and_warning(store, service):
    store.add_report(100, owner=10, website_ids=[1])
    store.add_security_scan(1, owner=10, scan_started_at=_ts(5), malware_status="clean", threats_detected=0)
    store.add_security_scan(1, owner=10, scan_started_at=_ts(2), malware_status="clean", threats_detected=3)

    document = await service.get_report(10, "1", "100")

    assert document.security.status == "issues"
    assert document.overview.security_status == "warning"
    assert [s.status for s in document.security.scan_history] == ["clean", "issues"]


@pytest.mark.asyncio
async def test_other_users_history_is_never_included(store, service):
    store.add_report(100, owner=10, website_ids=[1])
    store.add_security_scan(1, owner=20, scan_started_at=_ts(5), malware_status="infected")
    store.add_update_log(1, owner=20, update_type="plugin", created_at=_ts(5))

    document = await service.get_report(10, "1", "100")

    assert document.security.scan_history == []
    assert document.updates.total == 0


@pytest.mark.asyncio
async def test_client_profile_is_included_when_referenced(store, service):
    store.add_client(5, owner=10, name="Acme", email="ops@acme.test")
    store.add_report(100, owner=10, website_ids=[1], client_id=5)

    document = await service.get_report(10, "1", "100")

    assert document.client.name == "Acme"
    assert document.client.email == "ops@acme.test"


@pytest.mark.asyncio
async def test_failed_source_degrades_but_report_renders(store, service):
    store.add_report(100, owner=10, website_ids=[1])
    store.add_performance_scan(1, scan_timestamp=_ts(3), pagespeed_score=64)
    store.failures["get_performance_scans"] = ConnectionError("db down")

    document = await service.get_report(10, "1", "100")

    assert document.performance.score == 85
    assert document.performance.history == []
    assert document.degraded_sources == ["performance"]


@pytest.mark.asyncio
async def test_assembly_is_idempotent(store, service):
    store.add_report(100, owner=10, website_ids=[1], client_id=5)
    store.add_client(5, owner=10, name="Acme")
    store.add_performance_scan(1, scan_timestamp=_ts(3), pagespeed_score=64, scan_data={"yslow_metrics": {"load_time": 900}})
    store.add_security_scan(1, owner=10, scan_started_at=_ts(2))
    store.add_update_log(1, owner=10, update_type="plugin")

    first = await service.get_report(10, "1", "100")
    second = await service.get_report(10, "1", "100")

    assert first.model_dump_json(by_alias=True) == second.model_dump_json(by_alias=True)


@pytest.mark.asyncio
async def test_list_reports_filters_by_website_and_type(store, service):
    store.add_report(100, owner=10, website_ids=[1], created_at=_ts(1))
    store.add_report(101, owner=10, website_ids=1, created_at=_ts(3))
    store.add_report(102, owner=10, website_ids=[2], created_at=_ts(2))
    store.add_report(103, owner=10, website_ids=[1], report_type="seo", created_at=_ts(4))
    store.add_report(104, owner=20, website_ids=[1], created_at=_ts(5))

    reports = await service.list_reports(10, "1")

    assert [r.id for r in reports] == [101, 100]
    assert reports[0].created_at == _ts(3).isoformat()


@pytest.mark.asyncio
async def test_list_reports_requires_owned_website(service):
    with pytest.raises(EntityNotFoundError):
        await service.list_reports(10, "3")


@pytest.mark.asyncio
async def test_missing_timestamps_use_the_assembly_clock(store):
    store.add_website(1, owner=10)
    store.add_report(100, owner=10, website_ids=[1])
    store.add_update_log(1, owner=10, update_type="plugin")
    clock_values = iter([_ts(10), _ts(10) + timedelta(hours=1)])
    service = MaintenanceReportService(store, ReportSourceCollector(store), clock=lambda: next(clock_values))

    first = await service.get_report(10, "1", "100")
    second = await service.get_report(10, "1", "100")

    assert first.updates.plugins[0].date == _ts(10).isoformat()
    assert second.updates.plugins[0].date != first.updates.plugins[0].date
