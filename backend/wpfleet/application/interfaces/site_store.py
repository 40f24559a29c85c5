"""Abstract read port (Site Store) for websites, reports and telemetry histories."""

from abc import ABC, abstractmethod

from wpfleet.domain.entities import (
    Client,
    MaintenanceReport,
    PerformanceScan,
    SecurityScan,
    UpdateLogEntry,
    User,
    Website,
)


class SiteStore(ABC):
    """Port for ownership-scoped reads — implemented in the infrastructure layer.

    Every read except ``get_user`` takes the requesting user's id as a
    mandatory filter; rows owned by another user are never returned.
    """

    @abstractmethod
    async def get_user(self, user_id: int) -> User | None:
        """Retrieve a user account by id."""
        ...

    @abstractmethod
    async def get_website(self, website_id: int, user_id: int) -> Website | None:
        """Retrieve a website owned by ``user_id``."""
        ...

    @abstractmethod
    async def get_client(self, client_id: int, user_id: int) -> Client | None:
        """Retrieve a client owned by ``user_id``."""
        ...

    @abstractmethod
    async def get_maintenance_report(
        self, report_id: int, user_id: int
    ) -> MaintenanceReport | None:
        """Retrieve a report owned by ``user_id``."""
        ...

    @abstractmethod
    async def get_maintenance_reports(self, user_id: int) -> list[MaintenanceReport]:
        """Retrieve every report owned by ``user_id``, newest first."""
        ...

    @abstractmethod
    async def get_performance_scans(
        self, website_id: int, user_id: int, limit: int
    ) -> list[PerformanceScan]:
        """Most recent performance scans, newest first."""
        ...

    @abstractmethod
    async def get_security_scans(
        self, website_id: int, user_id: int, limit: int
    ) -> list[SecurityScan]:
        """Most recent security scans, newest first."""
        ...

    @abstractmethod
    async def get_update_logs(
        self, website_id: int, user_id: int, limit: int
    ) -> list[UpdateLogEntry]:
        """Most recent update log entries, newest first."""
        ...
