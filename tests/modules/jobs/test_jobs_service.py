"""
Unit tests for the job service layer.
"""

from datetime import date, timedelta
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from pydantic import ValidationError

from app.modules.applications.models import ApplicationStatus
from app.modules.jobs.schemas import JobCreate, JobUpdate
from app.modules.jobs.service import (
    create_job,
    get_public_job,
    toggle_job,
    update_job,
)
from app.modules.shared import InvalidReferenceError, NotFoundError

SERVICE = "app.modules.jobs.service"


async def _echo_save(db, job):
    if job.id is None:
        job.id = 7
    return job


class TestJobIsOpen:
    def test_active_before_deadline(self, open_job):
        assert open_job.is_open()

    def test_deadline_day_is_open(self, open_job):
        assert open_job.is_open(today=open_job.application_deadline)

    def test_past_deadline(self, open_job):
        assert not open_job.is_open(today=open_job.application_deadline + timedelta(days=1))

    def test_no_deadline(self, open_job):
        open_job.application_deadline = None
        assert open_job.is_open()

    def test_inactive(self, open_job):
        open_job.is_active = False
        assert not open_job.is_open()


class TestPublicJobs:
    @pytest.mark.asyncio
    async def test_inactive_job_is_hidden(self, mock_db, open_job):
        open_job.is_active = False
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=open_job)

            with pytest.raises(NotFoundError) as exc_info:
                await get_public_job(mock_db, open_job.id)

        assert exc_info.value.error_code == "JOB_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_active_job_is_visible(self, mock_db, open_job):
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=open_job)

            assert await get_public_job(mock_db, open_job.id) is open_job


class TestCreateJob:
    @pytest.mark.asyncio
    async def test_create(self, mock_db):
        data = JobCreate(
            title="Clinical Officer",
            department_id=1,
            designation_id=2,
            requirements={"minimum": "Diploma in Clinical Medicine"},
            application_deadline=date.today() + timedelta(days=30),
        )
        with (
            patch(f"{SERVICE}.repository") as mock_repo,
            patch(f"{SERVICE}.reference_repository") as mock_reference,
        ):
            mock_reference.get_department = AsyncMock(return_value=SimpleNamespace(id=1))
            mock_reference.get_designation = AsyncMock(return_value=SimpleNamespace(id=2))
            mock_repo.save = AsyncMock(side_effect=_echo_save)

            job = await create_job(mock_db, "admin-1", data)

        assert job.id == 7
        assert job.created_by == "admin-1"
        assert job.is_active is True

    @pytest.mark.asyncio
    async def test_unknown_department(self, mock_db):
        data = JobCreate(title="Driver", department_id=99, designation_id=2)
        with (
            patch(f"{SERVICE}.repository") as mock_repo,
            patch(f"{SERVICE}.reference_repository") as mock_reference,
        ):
            mock_reference.get_department = AsyncMock(return_value=None)
            mock_repo.save = AsyncMock()

            with pytest.raises(InvalidReferenceError):
                await create_job(mock_db, "admin-1", data)

            mock_repo.save.assert_not_called()


class TestUpdateJob:
    @pytest.mark.asyncio
    async def test_partial_update(self, mock_db, open_job):
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=open_job)
            mock_repo.save = AsyncMock(side_effect=_echo_save)

            job = await update_job(mock_db, open_job.id, JobUpdate(title="Senior Nursing Officer"))

        assert job.title == "Senior Nursing Officer"
        assert job.department_id == 1

    @pytest.mark.asyncio
    async def test_toggle_leaves_applications_alone(self, mock_db, open_job, make_application):
        application = make_application(ApplicationStatus.SHORTLISTED)
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=open_job)
            mock_repo.save = AsyncMock(side_effect=_echo_save)

            job = await toggle_job(mock_db, open_job.id)
            assert job.is_active is False

            job = await toggle_job(mock_db, open_job.id)
            assert job.is_active is True

        assert application.status == ApplicationStatus.SHORTLISTED

    @pytest.mark.asyncio
    async def test_toggle_missing_job(self, mock_db):
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=None)

            with pytest.raises(NotFoundError):
                await toggle_job(mock_db, 404)


class TestJobUpdateSchema:
    @pytest.mark.parametrize("field", ["title", "department_id", "designation_id", "is_active"])
    def test_null_for_required_column_is_rejected(self, field):
        with pytest.raises(ValidationError):
            JobUpdate.model_validate({field: None})

    def test_nullable_columns_accept_null(self):
        data = JobUpdate.model_validate({"description": None, "application_deadline": None})

        assert data.model_dump(exclude_unset=True) == {
            "description": None,
            "application_deadline": None,
        }

    def test_omitted_fields_are_not_set(self):
        assert JobUpdate.model_validate({}).model_dump(exclude_unset=True) == {}
