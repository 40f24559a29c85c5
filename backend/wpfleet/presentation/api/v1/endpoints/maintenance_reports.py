"""Maintenance report read endpoints, nested under a website."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from wpfleet.application.schemas import MaintenanceReportDocument, MaintenanceReportList
from wpfleet.application.services import MaintenanceReportService
from wpfleet.domain.entities import User
from wpfleet.domain.exceptions import (
    EntityNotFoundError,
    InvalidIdentifierError,
    ReportAccessDeniedError,
)
from wpfleet.infrastructure.dependencies import (
    get_current_user,
    get_maintenance_report_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/websites", tags=["Maintenance Reports"])


def _not_found_detail(error: EntityNotFoundError) -> str:
    if error.entity_type == "Website":
        return "Website not found"
    return "Report not found"


@router.get(
    "/{website_id}/maintenance-reports",
    response_model=MaintenanceReportList,
)
async def list_maintenance_reports(
    website_id: str,
    user: User = Depends(get_current_user),
    service: MaintenanceReportService = Depends(get_maintenance_report_service),
) -> MaintenanceReportList:
    """List the maintenance reports covering a website, newest first."""
    try:
        reports = await service.list_reports(user.id, website_id)
    except InvalidIdentifierError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Website ID is missing or invalid"
        )
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=_not_found_detail(e)
        )
    except Exception:
        logger.exception(
            "Failed to list maintenance reports (user=%s, website=%s)",
            user.id,
            website_id,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
    return MaintenanceReportList(reports=reports)


@router.get(
    "/{website_id}/maintenance-reports/{report_id}",
    response_model=MaintenanceReportDocument,
)
async def get_maintenance_report(
    website_id: str,
    report_id: str,
    user: User = Depends(get_current_user),
    service: MaintenanceReportService = Depends(get_maintenance_report_service),
) -> MaintenanceReportDocument:
    """Retrieve one maintenance report, enriched with the website's telemetry."""
    try:
        return await service.get_report(user.id, website_id, report_id)
    except InvalidIdentifierError as e:
        label = "Website ID" if e.field == "website_id" else "Report ID"
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"{label} is missing or invalid"
        )
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=_not_found_detail(e)
        )
    except ReportAccessDeniedError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Report does not belong to this website",
        )
    except Exception:
        logger.exception(
            "Failed to assemble maintenance report (user=%s, website=%s, report=%s)",
            user.id,
            website_id,
            report_id,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
