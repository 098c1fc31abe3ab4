"""
Applications Admin Router

API endpoints for portal administrators. All endpoints require the admin
role.

Endpoints:
- GET /admin/applications - List applications with filters and pagination
- GET /admin/applications/stats - Dashboard statistics
- POST /admin/applications/{id}/reject - Reject an application
- POST /admin/applications/{id}/hire - Hire an interviewed applicant
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AdminContext, require_admin
from app.core.database import get_db
from app.modules.applications import service
from app.modules.applications.models import ApplicationStatus
from app.modules.applications.schemas import (
    ApplicationListResponse,
    ApplicationReviewItem,
    DashboardStats,
    HireRequest,
    RejectRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=ApplicationListResponse)
async def list_applications(
    job_id: int | None = Query(None, description="Filter by job"),
    status: ApplicationStatus | None = Query(None, description="Filter by status"),
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    _admin: AdminContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> ApplicationListResponse:
    """List applications, newest first."""
    items, total = await service.list_applications(
        db, job_id=job_id, status=status, skip=skip, limit=limit
    )
    return ApplicationListResponse(
        items=[ApplicationReviewItem.model_validate(item) for item in items],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.get("/stats", response_model=DashboardStats)
async def get_stats(
    _admin: AdminContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
) -> DashboardStats:
    return await service.get_dashboard_stats(db)


@router.post("/{application_id}/reject", response_model=ApplicationReviewItem)
async def reject_application(
    application_id: int,
    data: RejectRequest,
    admin: AdminContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    logger.info(f"Admin {admin.user.id} rejecting application {application_id}")
    return await service.reject(db, admin.user, application_id, data.remarks)


@router.post("/{application_id}/hire", response_model=ApplicationReviewItem)
async def hire_applicant(
    application_id: int,
    data: HireRequest,
    admin: AdminContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    logger.info(f"Admin {admin.user.id} hiring for application {application_id}")
    return await service.hire(db, admin.user, application_id, data.remarks)
