"""
Job Admin Router

Job management for portal administrators. All endpoints require the
admin role.

Endpoints:
- GET /admin/jobs - All jobs, active and inactive
- POST /admin/jobs - Publish a job
- PUT /admin/jobs/{id} - Partial update
- POST /admin/jobs/{id}/toggle - Flip the active flag
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AdminContext, require_admin
from app.core.database import get_db
from app.modules.jobs import service
from app.modules.jobs.schemas import JobCreate, JobResponse, JobUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[JobResponse])
async def list_jobs(
    _admin: AdminContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await service.list_all_jobs(db)


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    data: JobCreate,
    admin: AdminContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await service.create_job(db, admin.user.id, data)


@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: int,
    data: JobUpdate,
    _admin: AdminContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await service.update_job(db, job_id, data)


@router.post("/{job_id}/toggle", response_model=JobResponse)
async def toggle_job(
    job_id: int,
    admin: AdminContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Activate or deactivate a job. Existing applications are not affected."""
    job = await service.toggle_job(db, job_id)
    logger.info(f"Admin {admin.user.id} toggled job {job_id}")
    return job
