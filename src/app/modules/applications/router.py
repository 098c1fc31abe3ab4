"""
Applicant Applications Router

Endpoints:
- GET /applicant/applications - The caller's applications
- POST /applicant/apply - Apply for a job
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import ApplicantContext, require_applicant
from app.core.database import get_db
from app.modules.applications import service
from app.modules.applications.schemas import ApplicationResponse, ApplyRequest

router = APIRouter()


@router.get("/applications", response_model=list[ApplicationResponse])
async def list_my_applications(
    context: ApplicantContext = Depends(require_applicant),
    db: AsyncSession = Depends(get_db),
):
    return await service.list_my_applications(db, context.user.id)


@router.post(
    "/apply",
    response_model=ApplicationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def apply(
    data: ApplyRequest,
    context: ApplicantContext = Depends(require_applicant),
    db: AsyncSession = Depends(get_db),
):
    """
    Apply for a job.

    Returns 409 if the caller already applied and 400 if the job is closed.
    """
    return await service.apply(db, context.user.id, data.job_id)
