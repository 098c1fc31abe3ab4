"""
Job Repository

Database operations for job postings.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Job


async def list_jobs(
    db: AsyncSession,
    *,
    is_active: bool | None = None,
    department_id: int | None = None,
) -> list[Job]:
    """
    List jobs, newest first.

    Args:
        db: Database session
        is_active: Only jobs with this active flag, when given
        department_id: Only jobs in this department, when given
    """
    query = select(Job)
    if is_active is not None:
        query = query.where(Job.is_active.is_(is_active))
    if department_id is not None:
        query = query.where(Job.department_id == department_id)

    result = await db.execute(query.order_by(Job.created_at.desc(), Job.id.desc()))
    return list(result.scalars().all())


async def get_by_id(db: AsyncSession, job_id: int) -> Job | None:
    return await db.get(Job, job_id)


async def save(db: AsyncSession, job: Job) -> Job:
    """Insert or update a job."""
    db.add(job)
    await db.commit()
    await db.refresh(job)
    return job
