"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from wpfleet.presentation.api.v1.endpoints.health import router as health_router
from wpfleet.presentation.api.v1.endpoints.maintenance_reports import (
    router as maintenance_reports_router,
)

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(maintenance_reports_router)
