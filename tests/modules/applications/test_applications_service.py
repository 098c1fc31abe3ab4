"""
Unit tests for the applications service layer.

These tests cover:
- Applying (duplicates, closed jobs, missing profile, concurrent insert)
- Board shortlisting and interview scoring
- Rejection and hiring by board and admin
- Generic board updates
- Dashboard statistics
- Notification failures not blocking decisions
"""

from datetime import date, timedelta
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import IntegrityError

from app.modules.applications.models import Application, ApplicationStatus
from app.modules.applications.schemas import BoardApplicationUpdate, InterviewScores
from app.modules.applications.service import (
    DuplicateApplicationError,
    IncompleteDecisionError,
    JobClosedError,
    apply,
    get_dashboard_stats,
    hire,
    list_my_applications,
    record_interview,
    reject,
    shortlist,
    update_application,
)
from app.modules.applications.workflow import InvalidStatusTransitionError
from app.modules.shared import NotFoundError

SERVICE = "app.modules.applications.service"


def _saved(db, application):
    """repository.save stand-in returning what it was given."""
    if application.id is None:
        application.id = 101
    return application


# ============================================
# Apply
# ============================================


class TestApply:
    @pytest.mark.asyncio
    async def test_apply_success(self, mock_db, sample_applicant, open_job):
        with (
            patch(f"{SERVICE}.applicants_repository") as mock_applicants,
            patch(f"{SERVICE}.jobs_repository") as mock_jobs,
            patch(f"{SERVICE}.repository") as mock_repo,
        ):
            mock_applicants.get_by_user_id = AsyncMock(return_value=sample_applicant)
            mock_jobs.get_by_id = AsyncMock(return_value=open_job)
            mock_repo.get_for_applicant_and_job = AsyncMock(return_value=None)
            mock_repo.save = AsyncMock(side_effect=_saved)

            result = await apply(mock_db, sample_applicant.user_id, open_job.id)

            assert result.status == ApplicationStatus.SUBMITTED
            assert result.submitted_on == date.today()
            assert result.applicant_id == sample_applicant.id
            assert result.job_id == open_job.id
            mock_repo.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_second_apply_is_conflict(
        self, mock_db, sample_applicant, open_job, make_application
    ):
        with (
            patch(f"{SERVICE}.applicants_repository") as mock_applicants,
            patch(f"{SERVICE}.jobs_repository") as mock_jobs,
            patch(f"{SERVICE}.repository") as mock_repo,
        ):
            mock_applicants.get_by_user_id = AsyncMock(return_value=sample_applicant)
            mock_jobs.get_by_id = AsyncMock(return_value=open_job)
            mock_repo.get_for_applicant_and_job = AsyncMock(return_value=make_application())
            mock_repo.save = AsyncMock()

            with pytest.raises(DuplicateApplicationError) as exc_info:
                await apply(mock_db, sample_applicant.user_id, open_job.id)

            assert exc_info.value.status_code == 409
            mock_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_caught_by_unique_constraint(
        self, mock_db, sample_applicant, open_job
    ):
        error = IntegrityError(
            "INSERT INTO applications ...",
            {},
            Exception('duplicate key value violates unique constraint "uq_applications_applicant_job"'),
        )
        with (
            patch(f"{SERVICE}.applicants_repository") as mock_applicants,
            patch(f"{SERVICE}.jobs_repository") as mock_jobs,
            patch(f"{SERVICE}.repository") as mock_repo,
        ):
            mock_applicants.get_by_user_id = AsyncMock(return_value=sample_applicant)
            mock_jobs.get_by_id = AsyncMock(return_value=open_job)
            mock_repo.get_for_applicant_and_job = AsyncMock(return_value=None)
            mock_repo.save = AsyncMock(side_effect=error)

            with pytest.raises(DuplicateApplicationError):
                await apply(mock_db, sample_applicant.user_id, open_job.id)

            mock_db.rollback.assert_called_once()

    @pytest.mark.asyncio
    async def test_other_integrity_errors_propagate(self, mock_db, sample_applicant, open_job):
        error = IntegrityError("INSERT", {}, Exception("violates foreign key constraint"))
        with (
            patch(f"{SERVICE}.applicants_repository") as mock_applicants,
            patch(f"{SERVICE}.jobs_repository") as mock_jobs,
            patch(f"{SERVICE}.repository") as mock_repo,
        ):
            mock_applicants.get_by_user_id = AsyncMock(return_value=sample_applicant)
            mock_jobs.get_by_id = AsyncMock(return_value=open_job)
            mock_repo.get_for_applicant_and_job = AsyncMock(return_value=None)
            mock_repo.save = AsyncMock(side_effect=error)

            with pytest.raises(IntegrityError):
                await apply(mock_db, sample_applicant.user_id, open_job.id)

    @pytest.mark.asyncio
    async def test_inactive_job_is_closed(self, mock_db, sample_applicant, open_job):
        open_job.is_active = False
        with (
            patch(f"{SERVICE}.applicants_repository") as mock_applicants,
            patch(f"{SERVICE}.jobs_repository") as mock_jobs,
        ):
            mock_applicants.get_by_user_id = AsyncMock(return_value=sample_applicant)
            mock_jobs.get_by_id = AsyncMock(return_value=open_job)

            with pytest.raises(JobClosedError) as exc_info:
                await apply(mock_db, sample_applicant.user_id, open_job.id)

            assert exc_info.value.error_code == "JOB_CLOSED"

    @pytest.mark.asyncio
    async def test_past_deadline_is_closed(self, mock_db, sample_applicant, open_job):
        open_job.application_deadline = date.today() - timedelta(days=1)
        with (
            patch(f"{SERVICE}.applicants_repository") as mock_applicants,
            patch(f"{SERVICE}.jobs_repository") as mock_jobs,
        ):
            mock_applicants.get_by_user_id = AsyncMock(return_value=sample_applicant)
            mock_jobs.get_by_id = AsyncMock(return_value=open_job)

            with pytest.raises(JobClosedError):
                await apply(mock_db, sample_applicant.user_id, open_job.id)

    @pytest.mark.asyncio
    async def test_apply_without_profile(self, mock_db):
        with patch(f"{SERVICE}.applicants_repository") as mock_applicants:
            mock_applicants.get_by_user_id = AsyncMock(return_value=None)

            with pytest.raises(NotFoundError) as exc_info:
                await apply(mock_db, "nobody", 5)

            assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_apply_unknown_job(self, mock_db, sample_applicant):
        with (
            patch(f"{SERVICE}.applicants_repository") as mock_applicants,
            patch(f"{SERVICE}.jobs_repository") as mock_jobs,
        ):
            mock_applicants.get_by_user_id = AsyncMock(return_value=sample_applicant)
            mock_jobs.get_by_id = AsyncMock(return_value=None)

            with pytest.raises(NotFoundError):
                await apply(mock_db, sample_applicant.user_id, 999)

    @pytest.mark.asyncio
    async def test_list_my_applications(self, mock_db, sample_applicant, make_application):
        applications = [make_application()]
        with (
            patch(f"{SERVICE}.applicants_repository") as mock_applicants,
            patch(f"{SERVICE}.repository") as mock_repo,
        ):
            mock_applicants.get_by_user_id = AsyncMock(return_value=sample_applicant)
            mock_repo.list_for_applicant = AsyncMock(return_value=applications)

            result = await list_my_applications(mock_db, sample_applicant.user_id)

            assert result == applications
            mock_repo.list_for_applicant.assert_called_once_with(mock_db, sample_applicant.id)


# ============================================
# Review Actions
# ============================================


class TestShortlist:
    @pytest.mark.asyncio
    async def test_shortlist_submitted(self, mock_db, board_user, make_application):
        application = make_application(ApplicationStatus.SUBMITTED)
        interview_on = date.today() + timedelta(days=7)
        with (
            patch(f"{SERVICE}.repository") as mock_repo,
            patch(f"{SERVICE}.send_application_shortlisted") as mock_email,
        ):
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock(side_effect=_saved)
            mock_email.return_value = True

            result = await shortlist(mock_db, board_user, application.id, interview_on, "Strong CV")

            assert result.status == ApplicationStatus.SHORTLISTED
            assert result.interview_date == interview_on
            assert result.remarks == "Strong CV"
            mock_email.assert_called_once_with(
                "applicant-1@example.com", "Jane Wanjiku", "Nursing Officer", interview_on
            )

    @pytest.mark.asyncio
    async def test_shortlist_without_date_keeps_existing_date(
        self, mock_db, board_user, make_application
    ):
        scheduled = date.today() + timedelta(days=10)
        application = make_application(ApplicationStatus.SUBMITTED, interview_date=scheduled)
        with (
            patch(f"{SERVICE}.repository") as mock_repo,
            patch(f"{SERVICE}.send_application_shortlisted") as mock_email,
        ):
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock(side_effect=_saved)
            mock_email.return_value = True

            result = await shortlist(mock_db, board_user, application.id)

            assert result.status == ApplicationStatus.SHORTLISTED
            assert result.interview_date == scheduled

    @pytest.mark.asyncio
    async def test_shortlist_interviewed_is_refused(
self, mock_db, board_user, make_application):
        application = make_application(ApplicationStatus.INTERVIEWED)
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock()

            with pytest.raises(InvalidStatusTransitionError):
                await shortlist(mock_db, board_user, application.id)

            mock_repo.save.assert_not_called()
            assert application.status == ApplicationStatus.INTERVIEWED

    @pytest.mark.asyncio
    async def test_admin_cannot_shortlist(self, mock_db, admin_user, make_application):
        application = make_application(ApplicationStatus.SUBMITTED)
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=application)

            with pytest.raises(InvalidStatusTransitionError):
                await shortlist(mock_db, admin_user, application.id)

    @pytest.mark.asyncio
    async def test_missing_application(self, mock_db, board_user):
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=None)

            with pytest.raises(NotFoundError) as exc_info:
                await shortlist(mock_db, board_user, 404)

            assert exc_info.value.error_code == "APPLICATION_NOT_FOUND"


class TestRecordInterview:
    @pytest.mark.asyncio
    async def test_interview_total_is_sum_of_sub_scores(
        self, mock_db, board_user, make_application
    ):
        application = make_application(ApplicationStatus.SHORTLISTED)
        scores = InterviewScores(
            technical_knowledge=20,
            communication_skills=20,
            problem_solving=15,
            leadership_potential=10,
            comments="Good communicator",
        )
        with (
            patch(f"{SERVICE}.repository") as mock_repo,
            patch(f"{SERVICE}.send_interview_recorded") as mock_email,
        ):
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock(side_effect=_saved)
            mock_email.return_value = True

            result = await record_interview(mock_db, board_user, application.id, scores)

            assert result.interview_score == 65
            assert result.remarks == "Good communicator"
            assert result.status == ApplicationStatus.INTERVIEWED

    @pytest.mark.asyncio
    async def test_interview_requires_shortlist(self, mock_db, board_user, make_application):
        application = make_application(ApplicationStatus.SUBMITTED)
        scores = InterviewScores(
            technical_knowledge=1, communication_skills=1, problem_solving=1, leadership_potential=1
        )
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=application)

            with pytest.raises(InvalidStatusTransitionError):
                await record_interview(mock_db, board_user, application.id, scores)


class TestRejectAndHire:
    @pytest.mark.asyncio
    async def test_admin_rejects_submitted(self, mock_db, admin_user, make_application):
        application = make_application(ApplicationStatus.SUBMITTED)
        with (
            patch(f"{SERVICE}.repository") as mock_repo,
            patch(f"{SERVICE}.send_application_rejected") as mock_email,
        ):
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock(side_effect=_saved)
            mock_email.return_value = True

            result = await reject(mock_db, admin_user, application.id, "Does not meet requirements")

            assert result.status == ApplicationStatus.REJECTED
            assert result.remarks == "Does not meet requirements"
            mock_email.assert_called_once()

    @pytest.mark.asyncio
    async def test_cannot_reject_hired(self, mock_db, board_user, make_application):
        application = make_application(ApplicationStatus.HIRED)
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=application)

            with pytest.raises(InvalidStatusTransitionError):
                await reject(mock_db, board_user, application.id, "Too late")

    @pytest.mark.asyncio
    async def test_board_hires_interviewed(self, mock_db, board_user, make_application):
        application = make_application(ApplicationStatus.INTERVIEWED, interview_score=80)
        with (
            patch(f"{SERVICE}.repository") as mock_repo,
            patch(f"{SERVICE}.send_application_hired") as mock_email,
        ):
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock(side_effect=_saved)
            mock_email.return_value = True

            result = await hire(mock_db, board_user, application.id)

            assert result.status == ApplicationStatus.HIRED
            assert result.interview_score == 80

    @pytest.mark.asyncio
    async def test_cannot_hire_shortlisted(self, mock_db, admin_user, make_application):
        application = make_application(ApplicationStatus.SHORTLISTED)
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=application)

            with pytest.raises(InvalidStatusTransitionError):
                await hire(mock_db, admin_user, application.id)

    @pytest.mark.asyncio
    async def test_email_failure_does_not_block_decision(
        self, mock_db, board_user, make_application
    ):
        application = make_application(ApplicationStatus.INTERVIEWED)
        with (
            patch(f"{SERVICE}.repository") as mock_repo,
            patch(f"{SERVICE}.send_application_hired") as mock_email,
        ):
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock(side_effect=_saved)
            mock_email.side_effect = RuntimeError("Resend unavailable")

            result = await hire(mock_db, board_user, application.id)

            assert result.status == ApplicationStatus.HIRED
            mock_repo.save.assert_called_once()


# ============================================
# Generic Board Update
# ============================================


class TestUpdateApplication:
    @pytest.mark.asyncio
    async def test_status_change_goes_through_workflow(
        self, mock_db, board_user, make_application
    ):
        application = make_application(ApplicationStatus.SUBMITTED)
        with (
            patch(f"{SERVICE}.repository") as mock_repo,
            patch(f"{SERVICE}.send_application_shortlisted") as mock_email,
        ):
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock(side_effect=_saved)
            mock_email.return_value = True

            result = await update_application(
                mock_db,
                board_user,
                application.id,
                BoardApplicationUpdate(status=ApplicationStatus.SHORTLISTED, remarks="OK"),
            )

            assert result.status == ApplicationStatus.SHORTLISTED
            assert result.remarks == "OK"

    @pytest.mark.asyncio
    async def test_reject_without_remarks_is_refused(self, mock_db, board_user, make_application):
        application = make_application(ApplicationStatus.SUBMITTED)
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock()

            for data in (
                BoardApplicationUpdate(status=ApplicationStatus.REJECTED),
                BoardApplicationUpdate(status=ApplicationStatus.REJECTED, remarks="   "),
            ):
                with pytest.raises(IncompleteDecisionError) as exc_info:
                    await update_application(mock_db, board_user, application.id, data)
                assert exc_info.value.status_code == 400

            mock_repo.save.assert_not_called()
            assert application.status == ApplicationStatus.SUBMITTED

    @pytest.mark.asyncio
    async def test_reject_with_remarks(self, mock_db, board_user, make_application):
        application = make_application(ApplicationStatus.SUBMITTED)
        with (
            patch(f"{SERVICE}.repository") as mock_repo,
            patch(f"{SERVICE}.send_application_rejected") as mock_email,
        ):
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock(side_effect=_saved)
            mock_email.return_value = True

            result = await update_application(
                mock_db,
                board_user,
                application.id,
                BoardApplicationUpdate(status=ApplicationStatus.REJECTED, remarks=" Incomplete CV "),
            )

            assert result.status == ApplicationStatus.REJECTED
            assert result.remarks == "Incomplete CV"

    @pytest.mark.asyncio
    async def test_interview_without_score_is_refused(
        self, mock_db, board_user, make_application
    ):
        application = make_application(ApplicationStatus.SHORTLISTED)
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock()

            with pytest.raises(IncompleteDecisionError):
                await update_application(
                    mock_db,
                    board_user,
                    application.id,
                    BoardApplicationUpdate(status=ApplicationStatus.INTERVIEWED),
                )

            mock_repo.save.assert_not_called()
            assert application.interview_score is None

    @pytest.mark.asyncio
    async def test_interview_with_score(self, mock_db, board_user, make_application):
        application = make_application(ApplicationStatus.SHORTLISTED)
        with (
            patch(f"{SERVICE}.repository") as mock_repo,
            patch(f"{SERVICE}.send_interview_recorded") as mock_email,
        ):
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock(side_effect=_saved)
            mock_email.return_value = True

            result = await update_application(
                mock_db,
                board_user,
                application.id,
                BoardApplicationUpdate(status=ApplicationStatus.INTERVIEWED, interview_score=72),
            )

            assert result.status == ApplicationStatus.INTERVIEWED
            assert result.interview_score == 72

    @pytest.mark.asyncio
    async def test_skipping_states_is_refused(
self, mock_db, board_user, make_application):
        application = make_application(ApplicationStatus.SUBMITTED)
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock()

            with pytest.raises(InvalidStatusTransitionError):
                await update_application(
                    mock_db,
                    board_user,
                    application.id,
                    BoardApplicationUpdate(status=ApplicationStatus.HIRED),
                )

            mock_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_back_to_draft_is_refused(self, mock_db, board_user, make_application):
        application = make_application(ApplicationStatus.SUBMITTED)
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=application)

            with pytest.raises(InvalidStatusTransitionError):
                await update_application(
                    mock_db,
                    board_user,
                    application.id,
                    BoardApplicationUpdate(status=ApplicationStatus.DRAFT),
                )

    @pytest.mark.asyncio
    async def test_field_only_update(self, mock_db, board_user, make_application):
        application = make_application(ApplicationStatus.SHORTLISTED)
        new_date = date.today() + timedelta(days=3)
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock(side_effect=_saved)

            result = await update_application(
                mock_db,
                board_user,
                application.id,
                BoardApplicationUpdate(interview_date=new_date),
            )

            assert result.status == ApplicationStatus.SHORTLISTED
            assert result.interview_date == new_date

    @pytest.mark.asyncio
    async def test_field_update_on_terminal_is_refused(
        self, mock_db, board_user, make_application
    ):
        application = make_application(ApplicationStatus.REJECTED)
        with patch(f"{SERVICE}.repository") as mock_repo:
            mock_repo.get_by_id = AsyncMock(return_value=application)
            mock_repo.save = AsyncMock()

            with pytest.raises(InvalidStatusTransitionError):
                await update_application(
                    mock_db,
                    board_user,
                    application.id,
                    BoardApplicationUpdate(status=ApplicationStatus.REJECTED, remarks="Edited"),
                )

            mock_repo.save.assert_not_called()


# ============================================
# Statistics
# ============================================


@pytest.mark.asyncio
async def test_dashboard_stats(mock_db):
    with patch(f"{SERVICE}.repository") as mock_repo:
        mock_repo.count_by_status = AsyncMock(
            return_value={
                ApplicationStatus.SUBMITTED: 3,
                ApplicationStatus.SHORTLISTED: 2,
                ApplicationStatus.HIRED: 1,
            }
        )

        stats = await get_dashboard_stats(mock_db)

        assert stats.total == 6
        assert stats.submitted == 3
        assert stats.shortlisted == 2
        assert stats.hired == 1
        assert stats.draft == 0
        assert stats.rejected == 0


def test_application_model_has_unique_applicant_job_constraint():
    constraints = {c.name for c in Application.__table__.constraints}
    assert "uq_applications_applicant_job" in constraints
