"""
Public Job Router

Endpoints:
- GET /public/jobs - Active jobs (optional ?department_id=)
- GET /public/jobs/{id} - One active job
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.modules.jobs import service
from app.modules.jobs.schemas import JobResponse

router = APIRouter()


@router.get("/jobs", response_model=list[JobResponse])
async def list_jobs(
    department_id: int | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await service.list_public_jobs(db, department_id)


@router.get("/jobs/{job_id}", response_model=JobResponse)
async def get_job(job_id: int, db: AsyncSession = Depends(get_db)):
    return await service.get_public_job(db, job_id)
