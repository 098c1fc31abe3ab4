"""
Job Service Layer

Publishing and maintaining job postings. Activating or deactivating a job
only changes its visibility and whether new applications are accepted;
existing applications are left untouched.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.jobs import repository
from app.modules.jobs.models import Job
from app.modules.jobs.schemas import JobCreate, JobUpdate
from app.modules.reference_data import repository as reference_repository
from app.modules.shared import InvalidReferenceError, NotFoundError

logger = logging.getLogger(__name__)


async def _validate_references(
    db: AsyncSession,
    department_id: int | None,
    designation_id: int | None,
) -> None:
    if department_id is not None and not await reference_repository.get_department(
        db, department_id
    ):
        raise InvalidReferenceError("department_id", department_id)
    if designation_id is not None and not await reference_repository.get_designation(
        db, designation_id
    ):
        raise InvalidReferenceError("designation_id", designation_id)


async def list_public_jobs(db: AsyncSession, department_id: int | None = None) -> list[Job]:
    """Active jobs, optionally filtered by department."""
    return await repository.list_jobs(db, is_active=True, department_id=department_id)


async def get_public_job(db: AsyncSession, job_id: int) -> Job:
    """
    Get an active job.

    Raises:
        NotFoundError: If the job does not exist or is inactive
    """
    job = await repository.get_by_id(db, job_id)
    if not job or not job.is_active:
        raise NotFoundError("Job", job_id)
    return job


async def list_all_jobs(db: AsyncSession) -> list[Job]:
    return await repository.list_jobs(db)


async def get_job(db: AsyncSession, job_id: int) -> Job:
    """
    Get any job regardless of its active flag.

    Raises:
        NotFoundError: If the job does not exist
    """
    job = await repository.get_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job", job_id)
    return job


async def create_job(db: AsyncSession, created_by: str, data: JobCreate) -> Job:
    """
    Publish a new job.

    Raises:
        InvalidReferenceError: If the department or designation does not exist
    """
    await _validate_references(db, data.department_id, data.designation_id)

    job = await repository.save(db, Job(created_by=created_by, **data.model_dump()))
    logger.info(f"Job {job.id} '{job.title}' created by {created_by}")
    return job


async def update_job(db: AsyncSession, job_id: int, data: JobUpdate) -> Job:
    """
    Apply a partial update to a job.

    Raises:
        NotFoundError: If the job does not exist
        InvalidReferenceError: If a new department or designation does not exist
    """
    job = await get_job(db, job_id)
    changes = data.model_dump(exclude_unset=True)

    await _validate_references(db, changes.get("department_id"), changes.get("designation_id"))

    for key, value in changes.items():
        setattr(job, key, value)

    job = await repository.save(db, job)
    logger.info(f"Job {job.id} updated: {sorted(changes)}")
    return job


async def toggle_job(db: AsyncSession, job_id: int) -> Job:
    """
    Flip a job's active flag.

    Raises:
        NotFoundError: If the job does not exist
    """
    job = await get_job(db, job_id)
    job.is_active = not job.is_active

    job = await repository.save(db, job)
    logger.info(f"Job {job.id} is now {'active' if job.is_active else 'inactive'}")
    return job
