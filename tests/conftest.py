"""
Shared fixtures.

Model instances are built in memory; database sessions are mocks.
"""

from datetime import date, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

import app.modules.models  # noqa: F401 - registers every mapper
from app.modules.applicants.models import Applicant
from app.modules.applications.models import Application, ApplicationStatus
from app.modules.jobs.models import Job
from app.modules.users.models import User, UserRole


@pytest.fixture
def mock_db():
    """Create a mock database session."""
    db = AsyncMock()
    db.commit = AsyncMock()
    db.refresh = AsyncMock()
    db.rollback = AsyncMock()
    db.get = AsyncMock()
    db.execute = AsyncMock()
    db.add = MagicMock()
    return db


def make_user(role: UserRole = UserRole.APPLICANT, user_id: str = "user-1") -> User:
    return User(
        id=user_id,
        email=f"{user_id}@example.com",
        first_name="Jane",
        last_name="Wanjiku",
        role=role,
    )


@pytest.fixture
def user_factory():
    return make_user


@pytest.fixture
def applicant_user():
    return make_user(UserRole.APPLICANT, "applicant-1")


@pytest.fixture
def admin_user():
    return make_user(UserRole.ADMIN, "admin-1")


@pytest.fixture
def board_user():
    return make_user(UserRole.BOARD, "board-1")


@pytest.fixture
def sample_applicant(applicant_user):
    """Applicant with personal details only."""
    applicant = Applicant(
        id=10,
        user_id=applicant_user.id,
        first_name="Jane",
        surname="Wanjiku",
        phone_number="0712345678",
        phone_verified=False,
        profile_completion_percentage=0,
        education_records=[],
        employment_history=[],
        referees=[],
        documents=[],
    )
    applicant.user = applicant_user
    return applicant


@pytest.fixture
def open_job():
    return Job(
        id=5,
        title="Nursing Officer",
        department_id=1,
        designation_id=2,
        is_active=True,
        application_deadline=date.today() + timedelta(days=14),
        created_by="admin-1",
    )


@pytest.fixture
def make_application(sample_applicant, open_job):
    """Factory for an application in a given status, with job and applicant attached."""

    def _make(status: ApplicationStatus = ApplicationStatus.SUBMITTED, **fields) -> Application:
        application = Application(
            id=fields.pop("id", 100),
            job_id=open_job.id,
            applicant_id=sample_applicant.id,
            status=status,
            submitted_on=date.today(),
            **fields,
        )
        application.job = open_job
        application.applicant = sample_applicant
        return application

    return _make
