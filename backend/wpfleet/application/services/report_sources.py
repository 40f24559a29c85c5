"""Best-effort collection of the independent data sources behind a report.

Each collector reads one source from the Site Store under a timeout. A
failure never propagates: the source's empty default is returned instead,
flagged as degraded, so the report still renders with whatever is available.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from functools import partial
from typing import Generic, TypeVar

from wpfleet.application.interfaces import SiteStore
from wpfleet.domain.entities import Client, PerformanceScan, SecurityScan, UpdateLogEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")

SOURCE_CLIENT = "client"
SOURCE_PERFORMANCE = "performance"
SOURCE_SECURITY = "security"
SOURCE_UPDATES = "updates"


@dataclass(frozen=True)
class SourceResult(Generic[T]):
    """Value read from one source, or its default when the read failed."""

    source: str
    value: T
    degraded: bool = False
    error: str | None = None


@dataclass(frozen=True)
class CollectedSources:
    """Raw records from all four sources of one report."""

    client: SourceResult[Client | None]
    performance: SourceResult[list[PerformanceScan]]
    security: SourceResult[list[SecurityScan]]
    updates: SourceResult[list[UpdateLogEntry]]
    degraded: list[str] = field(init=False)

    def __post_init__(self) -> None:
        names = [
            r.source
            for r in (self.client, self.performance, self.security, self.updates)
            if r.degraded
        ]
        object.__setattr__(self, "degraded", names)


class ReportSourceCollector:
    """Reads client profile, performance, security and update histories.

    The four reads share no state and run concurrently.
    """

    def __init__(
        self,
        store: SiteStore,
        *,
        timeout_seconds: float = 5.0,
        performance_limit: int = 10,
        security_limit: int = 10,
        update_limit: int = 20,
    ):
        self._store = store
        self._timeout = timeout_seconds
        self._performance_limit = performance_limit
        self._security_limit = security_limit
        self._update_limit = update_limit

    async def collect_all(
        self, website_id: int, user_id: int, client_id: int | None
    ) -> CollectedSources:
        client, performance, security, updates = await asyncio.gather(
            self.client_profile(client_id, user_id, website_id=website_id),
            self.performance_scans(website_id, user_id),
            self.security_scans(website_id, user_id),
            self.update_logs(website_id, user_id),
        )
        return CollectedSources(
            client=client,
            performance=performance,
            security=security,
            updates=updates,
        )

    async def client_profile(
        self, client_id: int | None, user_id: int, *, website_id: int
    ) -> SourceResult[Client | None]:
        if client_id is None:
            return SourceResult(SOURCE_CLIENT, None)
        return await self._collect(
            SOURCE_CLIENT,
            partial(self._store.get_client, client_id, user_id),
            None,
            website_id=website_id,
            user_id=user_id,
        )

    async def performance_scans(
        self, website_id: int, user_id: int
    ) -> SourceResult[list[PerformanceScan]]:
        return await self._collect(
            SOURCE_PERFORMANCE,
            partial(
                self._store.get_performance_scans,
                website_id,
                user_id,
                self._performance_limit,
            ),
            [],
            website_id=website_id,
            user_id=user_id,
        )

    async def security_scans(
        self, website_id: int, user_id: int
    ) -> SourceResult[list[SecurityScan]]:
        return await self._collect(
            SOURCE_SECURITY,
            partial(
                self._store.get_security_scans,
                website_id,
                user_id,
                self._security_limit,
            ),
            [],
            website_id=website_id,
            user_id=user_id,
        )

    async def update_logs(
        self, website_id: int, user_id: int
    ) -> SourceResult[list[UpdateLogEntry]]:
        return await self._collect(
            SOURCE_UPDATES,
            partial(
                self._store.get_update_logs,
                website_id,
                user_id,
                self._update_limit,
            ),
            [],
            website_id=website_id,
            user_id=user_id,
        )

    async def _collect(
        self,
        source: str,
        fetch: Callable[[], Awaitable[T]],
        default: T,
        *,
        website_id: int,
        user_id: int,
    ) -> SourceResult[T]:
        try:
            value = await asyncio.wait_for(fetch(), timeout=self._timeout)
            if isinstance(default, list):
                value = list(value or [])
        except asyncio.TimeoutError:
            logger.warning(
                "Source '%s' timed out after %.1fs (website=%s, user=%s), using defaults",
                source,
                self._timeout,
                website_id,
                user_id,
            )
            return SourceResult(source, default, degraded=True, error="timeout")
        except Exception as exc:
            logger.warning(
                "Source '%s' failed (website=%s, user=%s), using defaults: %s: %s",
                source,
                website_id,
                user_id,
                type(exc).__name__,
                exc,
            )
            return SourceResult(
                source, default, degraded=True, error=type(exc).__name__
            )

        return SourceResult(source, value)
