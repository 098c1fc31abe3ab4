"""
Application Service Layer

Business logic for the job application lifecycle:

1. Applying (one application per applicant per job, open jobs only)
2. Board shortlisting and interview assessment
3. Rejection and hiring by the board or an admin
4. Listing and dashboard statistics for reviewers

Every status change is resolved through the workflow table, and the
applicant is emailed after each review decision. Email failures are
logged and never undo a decision.
"""

import logging
from dataclasses import dataclass
from datetime import date

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.email import (
    send_application_hired,
    send_application_rejected,
    send_application_shortlisted,
    send_interview_recorded,
)
from app.modules.applicants import repository as applicants_repository
from app.modules.applications import repository
from app.modules.applications.models import Application, ApplicationStatus
from app.modules.applications.schemas import (
    BoardApplicationUpdate,
    DashboardStats,
    InterviewScores,
)
from app.modules.applications.workflow import (
    ApplicationAction,
    InvalidStatusTransitionError,
    action_for_target,
    is_terminal,
    next_status,
)
from app.modules.jobs import repository as jobs_repository
from app.modules.shared import NotFoundError, ServiceError
from app.modules.users.models import User, UserRole

logger = logging.getLogger(__name__)

UNIQUE_APPLICANT_JOB = "uq_applications_applicant_job"


# ============================================
# Exceptions
# ============================================


class DuplicateApplicationError(ServiceError):
    """Raised when an applicant applies to the same job twice."""

    def __init__(self, job_id: int):
        super().__init__(
            message=f"You have already applied for job {job_id}",
            error_code="DUPLICATE_APPLICATION",
            status_code=409,
        )


class JobClosedError(ServiceError):
    """Raised when applying to an inactive job or after its deadline."""

    def __init__(self, job_id: int):
        super().__init__(
            message=f"Job {job_id} is no longer accepting applications",
            error_code="JOB_CLOSED",
            status_code=400,
        )


class IncompleteDecisionError(ServiceError):
    """Raised when a status change omits a field its decision requires."""

    def __init__(self, message: str):
        super().__init__(message=message, error_code="INCOMPLETE_DECISION", status_code=400)


# ============================================
# Helpers
# ============================================


@dataclass
class _Recipient:
    email: str | None
    name: str
    job_title: str


def _recipient(application: Application) -> _Recipient:
    applicant = application.applicant
    user = applicant.user if applicant else None
    name = " ".join(p for p in (applicant.first_name, applicant.surname) if p) if applicant else ""
    return _Recipient(
        email=user.email if user else None,
        name=name or (user.full_name if user else "") or "Applicant",
        job_title=application.job.title if application.job else f"job {application.job_id}",
    )


async def _notify(application: Application, action: ApplicationAction) -> None:
    """Email the applicant about a review decision (non-blocking)."""
    recipient = _recipient(application)
    if not recipient.email:
        logger.warning(f"No email on file for application {application.id}, skipping notification")
        return

    try:
        match action:
            case ApplicationAction.SHORTLIST:
                sent = await send_application_shortlisted(
                    recipient.email, recipient.name, recipient.job_title, application.interview_date
                )
            case ApplicationAction.INTERVIEW:
                sent = await send_interview_recorded(
                    recipient.email, recipient.name, recipient.job_title
                )
            case ApplicationAction.REJECT:
                sent = await send_application_rejected(
                    recipient.email, recipient.name, recipient.job_title, application.remarks or ""
                )
            case ApplicationAction.HIRE:
                sent = await send_application_hired(
                    recipient.email, recipient.name, recipient.job_title
                )
            case _:
                return
        if not sent:
            logger.error(f"Failed to send {action.value} email for application {application.id}")
    except Exception as e:
        logger.error(f"Failed to send {action.value} email for application {application.id}: {e}")


def _require_decision_fields(action: ApplicationAction, changes: dict) -> None:
    """Apply the field rules of the dedicated reject and interview actions."""
    match action:
        case ApplicationAction.REJECT:
            remarks = changes.get("remarks")
            if not remarks or not remarks.strip():
                raise IncompleteDecisionError("remarks are required when rejecting an application")
            changes["remarks"] = remarks.strip()
        case ApplicationAction.INTERVIEW:
            if changes.get("interview_score") is None:
                raise IncompleteDecisionError("interview_score is required to record an interview")


async def _get_application(db: AsyncSession, application_id: int) -> Application:
    application = await repository.get_by_id(db, application_id)
    if not application:
        raise NotFoundError("Application", application_id)
    return application


async def _transition(
    db: AsyncSession,
    actor: User,
    application_id: int,
    action: ApplicationAction,
    **fields,
) -> Application:
    """Move an application through ``action`` and persist ``fields`` alongside."""
    application = await _get_application(db, application_id)
    previous = application.status
    application.status = next_status(previous, action, actor.role)

    for key, value in fields.items():
        setattr(application, key, value)

    application = await repository.save(db, application)
    logger.info(
        f"Application {application.id}: {previous.value} -> {application.status.value} "
        f"by {actor.role.value} {actor.id}"
    )

    await _notify(application, action)
    return application


# ============================================
# Applicant Operations
# ============================================


async def apply(db: AsyncSession, user_id: str, job_id: int) -> Application:
    """
    Submit an application for a job.

    Args:
        db: Database session
        user_id: The applicant's user id
        job_id: Job to apply for

    Returns:
        The submitted application

    Raises:
        NotFoundError: If the user has no profile or the job does not exist
        JobClosedError: If the job is inactive or past its deadline
        DuplicateApplicationError: If the applicant already applied for the job
    """
    applicant = await applicants_repository.get_by_user_id(db, user_id)
    if not applicant:
        raise NotFoundError("Profile")

    job = await jobs_repository.get_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job", job_id)

    if not job.is_open():
        logger.warning(f"Applicant {applicant.id} tried to apply to closed job {job_id}")
        raise JobClosedError(job_id)

    if await repository.get_for_applicant_and_job(db, applicant.id, job_id):
        logger.warning(f"Duplicate application: applicant {applicant.id}, job {job_id}")
        raise DuplicateApplicationError(job_id)

    application = Application(
        applicant_id=applicant.id,
        job_id=job_id,
        status=next_status(ApplicationStatus.DRAFT, ApplicationAction.SUBMIT, UserRole.APPLICANT),
        submitted_on=date.today(),
    )

    try:
        application = await repository.save(db, application)
    except IntegrityError as e:
        await db.rollback()
        if UNIQUE_APPLICANT_JOB in str(e):
            logger.warning(f"Concurrent duplicate application: applicant {applicant.id}, job {job_id}")
            raise DuplicateApplicationError(job_id) from e
        raise

    logger.info(f"Application {application.id} submitted: applicant {applicant.id}, job {job_id}")
    return application


async def list_my_applications(db: AsyncSession, user_id: str) -> list[Application]:
    """
    Applications of the user's applicant profile.

    Raises:
        NotFoundError: If the user has no profile
    """
    applicant = await applicants_repository.get_by_user_id(db, user_id)
    if not applicant:
        raise NotFoundError("Profile")
    return await repository.list_for_applicant(db, applicant.id)


# ============================================
# Reviewer Operations
# ============================================


async def list_applications(
    db: AsyncSession,
    *,
    job_id: int | None = None,
    status: ApplicationStatus | None = None,
    skip: int = 0,
    limit: int = 20,
) -> tuple[list[Application], int]:
    return await repository.list_applications(
        db, job_id=job_id, status=status, skip=skip, limit=limit
    )


async def get_dashboard_stats(db: AsyncSession) -> DashboardStats:
    counts = await repository.count_by_status(db)
    return DashboardStats(
        total=sum(counts.values()),
        **{status.value: counts.get(status, 0) for status in ApplicationStatus},
    )


async def shortlist(
    db: AsyncSession,
    actor: User,
    application_id: int,
    interview_date: date | None = None,
    remarks: str | None = None,
) -> Application:
    """
    Shortlist a submitted application.

    Raises:
        NotFoundError: If the application does not exist
        InvalidStatusTransitionError: If it is not submitted, or the actor is not board
    """
    fields = {}
    if interview_date is not None:
        fields["interview_date"] = interview_date
    if remarks is not None:
        fields["remarks"] = remarks
    return await _transition(db, actor, application_id, ApplicationAction.SHORTLIST, **fields)


async def record_interview(
    db: AsyncSession,
    actor: User,
    application_id: int,
    scores: InterviewScores,
) -> Application:
    """
    Record the interview assessment of a shortlisted application.

    The stored interview_score is the sum of the sub-scores and the
    comments become the remarks.
    """
    return await _transition(
        db,
        actor,
        application_id,
        ApplicationAction.INTERVIEW,
        interview_score=scores.total,
        remarks=scores.comments,
    )


async def reject(
    db: AsyncSession,
    actor: User,
    application_id: int,
    remarks: str,
) -> Application:
    """Reject a submitted, shortlisted or interviewed application."""
    return await _transition(db, actor, application_id, ApplicationAction.REJECT, remarks=remarks)


async def hire(
    db: AsyncSession,
    actor: User,
    application_id: int,
    remarks: str | None = None,
) -> Application:
    """Hire an interviewed applicant."""
    fields = {"remarks": remarks} if remarks is not None else {}
    return await _transition(db, actor, application_id, ApplicationAction.HIRE, **fields)


async def update_application(
    db: AsyncSession,
    actor: User,
    application_id: int,
    data: BoardApplicationUpdate,
) -> Application:
    """
    Generic board update of status, remarks, interview date or score.

    A new status is routed through the workflow table. Without a status
    change only the other fields are written, which is refused once the
    application is rejected or hired.

    Raises:
        NotFoundError: If the application does not exist
        InvalidStatusTransitionError: If the change is not allowed
        IncompleteDecisionError: If a rejection has no remarks or an interview
            has no score
    """
    changes = data.model_dump(exclude_unset=True)
    target = changes.pop("status", None)

    application = await _get_application(db, application_id)

    if target is not None and target != application.status:
        action = action_for_target(target)
        if action is None:
            raise InvalidStatusTransitionError(application.status, None, actor.role)
        next_status(application.status, action, actor.role)
        _require_decision_fields(action, changes)
        return await _transition(db, actor, application_id, action, **changes)

    if is_terminal(application.status):
        logger.warning(
            f"Refused edit of {application.status.value} application {application_id} by {actor.id}"
        )
        raise InvalidStatusTransitionError(application.status, None, actor.role)

    for key, value in changes.items():
        setattr(application, key, value)

    application = await repository.save(db, application)
    logger.info(f"Application {application.id} updated by {actor.id}: {sorted(changes)}")
    return application
