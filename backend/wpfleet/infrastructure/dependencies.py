"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Header, HTTPException, status

from wpfleet.config import get_settings
from wpfleet.application.interfaces import AuthGate, SiteStore
from wpfleet.application.services import MaintenanceReportService, ReportSourceCollector
from wpfleet.domain.entities import User
from wpfleet.infrastructure.auth.jwt_auth_gate import JWTAuthGate
from wpfleet.infrastructure.database.session import async_session_factory
from wpfleet.infrastructure.database.repositories import SQLAlchemySiteStore


async def get_site_store() -> AsyncGenerator[SiteStore, None]:
    """Provides the read-only Site Store bound to the application's session factory."""
    yield SQLAlchemySiteStore(async_session_factory)


async def get_auth_gate(
    store: SiteStore = Depends(get_site_store),
) -> AsyncGenerator[AuthGate, None]:
    """Provides the bearer-JWT auth gate."""
    settings = get_settings()
    yield JWTAuthGate(
        store=store,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


async def get_current_user(
    authorization: str | None = Header(None),
    gate: AuthGate = Depends(get_auth_gate),
) -> User:
    """Resolves the request's bearer token to a user, or responds 401."""
    result = await gate.authenticate(authorization)
    if not result.success or result.user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return result.user


async def get_maintenance_report_service(
    store: SiteStore = Depends(get_site_store),
) -> AsyncGenerator[MaintenanceReportService, None]:
    """Provides a MaintenanceReportService with its collectors configured from settings."""
    settings = get_settings()
    collector = ReportSourceCollector(
        store,
        timeout_seconds=settings.collector_timeout_seconds,
        performance_limit=settings.performance_history_limit,
        security_limit=settings.security_history_limit,
        update_limit=settings.update_log_limit,
    )
    yield MaintenanceReportService(store=store, collector=collector)
