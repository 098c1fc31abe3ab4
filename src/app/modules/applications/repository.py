"""
Application Repository

Database operations for job applications.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.modules.applicants.models import Applicant

from .models import Application, ApplicationStatus


def _with_relations(query):
    """Load the job and the applicant (with its user) alongside each application."""
    return query.options(
        selectinload(Application.job),
        selectinload(Application.applicant).selectinload(Applicant.user),
    )


async def get_by_id(db: AsyncSession, application_id: int) -> Application | None:
    """Get an application with its job and applicant, bypassing stale identity-map state."""
    result = await db.execute(
        _with_relations(select(Application).where(Application.id == application_id))
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_for_applicant_and_job(
    db: AsyncSession,
    applicant_id: int,
    job_id: int,
) -> Application | None:
    result = await db.execute(
        select(Application).where(
            Application.applicant_id == applicant_id,
            Application.job_id == job_id,
        )
    )
    return result.scalar_one_or_none()


async def save(db: AsyncSession, application: Application) -> Application:
    """
    Insert or update an application and return it reloaded with relations.

    Raises:
        IntegrityError: If the (applicant, job) pair already exists
    """
    db.add(application)
    await db.commit()
    return await get_by_id(db, application.id)


async def list_for_applicant(db: AsyncSession, applicant_id: int) -> list[Application]:
    """An applicant's applications, newest first."""
    result = await db.execute(
        select(Application)
        .options(selectinload(Application.job))
        .where(Application.applicant_id == applicant_id)
        .order_by(Application.created_at.desc(), Application.id.desc())
    )
    return list(result.scalars().all())


async def list_applications(
    db: AsyncSession,
    *,
    job_id: int | None = None,
    status: ApplicationStatus | None = None,
    skip: int = 0,
    limit: int = 20,
) -> tuple[list[Application], int]:
    """
    List applications with optional filters and pagination.

    Returns:
        Tuple of (applications, total count before pagination)
    """
    filters = []
    if job_id is not None:
        filters.append(Application.job_id == job_id)
    if status is not None:
        filters.append(Application.status == status)

    total = await db.scalar(select(func.count(Application.id)).where(*filters))

    result = await db.execute(
        _with_relations(select(Application).where(*filters))
        .order_by(Application.created_at.desc(), Application.id.desc())
        .offset(skip)
        .limit(limit)
    )
    return list(result.scalars().all()), total or 0


async def count_by_status(db: AsyncSession) -> dict[ApplicationStatus, int]:
    """Number of applications in each status; statuses with none are omitted."""
    result = await db.execute(
        select(Application.status, func.count(Application.id)).group_by(Application.status)
    )
    return {status: count for status, count in result.all()}
