"""Unit tests for best-effort source collection."""

import logging
from datetime import datetime, timezone

import pytest

from wpfleet.application.services.report_sources import ReportSourceCollector


def _ts(day: int) -> datetime:
    return datetime(2025, 2, day, tzinfo=timezone.utc)


@pytest.fixture
def seeded(store):
    store.add_website(1, owner=10)
    store.add_client(5, owner=10, name="Acme", email="ops@acme.test")
    store.add_performance_scan(1, scan_timestamp=_ts(1), pagespeed_score=90)
    store.add_security_scan(1, owner=10, scan_started_at=_ts(1), malware_status="clean", threats_detected=0)
    store.add_update_log(1, owner=10, update_type="plugin", item_name="Akismet", created_at=_ts(2))
    return store


@pytest.mark.asyncio
async def test_collect_all_reads_every_source(seeded):
    collector = ReportSourceCollector(seeded)

    collected = await collector.collect_all(1, 10, client_id=5)

    assert collected.client.value.name == "Acme"
    assert len(collected.performance.value) == 1
    assert len(collected.security.value) == 1
    assert len(collected.updates.value) == 1
    assert collected.degraded == []


@pytest.mark.asyncio
async def test_client_is_skipped_without_client_id(seeded):
    collector = ReportSourceCollector(seeded)

    collected = await collector.collect_all(1, 10, client_id=None)

    assert collected.client.value is None
    assert collected.client.degraded is False
    assert "get_client" not in seeded.calls


@pytest.mark.asyncio
async def test_failing_source_degrades_without_affecting_others(seeded, caplog):
    seeded.failures["get_security_scans"] = RuntimeError("connection reset")
    collector = ReportSourceCollector(seeded)

    with caplog.at_level(logging.WARNING):
        collected = await collector.collect_all(1, 10, client_id=5)

    assert collected.security.value == []
    assert collected.security.degraded is True
    assert collected.security.error == "RuntimeError"
    assert collected.degraded == ["security"]
    assert len(collected.performance.value) == 1
    assert collected.client.value is not None
    assert "security" in caplog.text
    assert "website=1" in caplog.text


@pytest.mark.asyncio
async def test_non_iterable_history_degrades_source(seeded, monkeypatch):
    async def _scalar_scans(website_id, user_id, limit):
        return 42

    monkeypatch.setattr(seeded, "get_security_scans", _scalar_scans)
    collector = ReportSourceCollector(seeded)

    collected = await collector.collect_all(1, 10, client_id=5)

    assert collected.security.value == []
    assert collected.security.degraded is True
    assert collected.security.error == "TypeError"
    assert collected.degraded == ["security"]
    assert len(collected.updates.value) == 1


@pytest.mark.asyncio
async def test_slow_source_times_out_and_degrades(seeded):
    seeded.delays["get_update_logs"] = 1.0
    collector = ReportSourceCollector(seeded, timeout_seconds=0.05)

    collected = await collector.collect_all(1, 10, client_id=5)

    assert collected.updates.value == []
    assert collected.updates.degraded is True
    assert collected.updates.error == "timeout"
    assert collected.degraded == ["updates"]


@pytest.mark.asyncio
async def test_missing_client_record_is_not_a_degradation(seeded):
    collector = ReportSourceCollector(seeded)

    collected = await collector.collect_all(1, 10, client_id=999)

    assert collected.client.value is None
    assert collected.degraded == []


@pytest.mark.asyncio
async def test_limits_are_passed_to_the_store(store):
    store.add_website(1, owner=10)
    for day in range(1, 16):
        store.add_performance_scan(1, scan_timestamp=_ts(day))
    collector = ReportSourceCollector(store, performance_limit=10)

    result = await collector.performance_scans(1, 10)

    assert len(result.value) == 10
    assert result.value[0].scan_timestamp == _ts(15)
