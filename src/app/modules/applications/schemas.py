"""
Application Schemas

Request and response models for applying to jobs and for the admin and
board review endpoints.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.modules.applications.models import ApplicationStatus

# ============================================
# Request Schemas
# ============================================


class ApplyRequest(BaseModel):
    """Request body for POST /applicant/apply."""

    job_id: int = Field(..., gt=0)


class ShortlistRequest(BaseModel):
    interview_date: date | None = None
    remarks: str | None = Field(None, max_length=2000)


class InterviewScores(BaseModel):
    """
    Interview assessment.

    The sub-score maxima add up to 100, so the total is always in 0..100.
    """

    technical_knowledge: int = Field(..., ge=0, le=30)
    communication_skills: int = Field(..., ge=0, le=25)
    problem_solving: int = Field(..., ge=0, le=25)
    leadership_potential: int = Field(..., ge=0, le=20)
    comments: str | None = Field(None, max_length=2000)

    @property
    def total(self) -> int:
        return (
            self.technical_knowledge
            + self.communication_skills
            + self.problem_solving
            + self.leadership_potential
        )


class RejectRequest(BaseModel):
    remarks: str = Field(..., max_length=2000)

    @field_validator("remarks")
    @classmethod
    def remarks_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("remarks are required when rejecting an application")
        return v


class HireRequest(BaseModel):
    remarks: str | None = Field(None, max_length=2000)


class BoardApplicationUpdate(BaseModel):
    """
    Generic board update.

    A status different from the current one is validated as a workflow
    transition; the other fields are plain edits.
    """

    status: ApplicationStatus | None = None
    remarks: str | None = Field(None, max_length=2000)
    interview_date: date | None = None
    interview_score: int | None = Field(None, ge=0, le=100)


# ============================================
# Response Schemas
# ============================================


class JobSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    application_deadline: date | None = None
    is_active: bool


class ApplicantSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str | None = None
    surname: str | None = None
    phone_number: str | None = None
    county_id: int | None = None
    profile_completion_percentage: int


class ApplicationResponse(BaseModel):
    """Application as seen by its applicant."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    job_id: int
    applicant_id: int
    status: ApplicationStatus
    submitted_on: date | None = None
    remarks: str | None = None
    interview_date: date | None = None
    interview_score: int | None = None
    job: JobSummary | None = None
    created_at: datetime
    updated_at: datetime


class ApplicationReviewItem(ApplicationResponse):
    """Application as seen by admins and board members."""

    applicant: ApplicantSummary | None = None


class ApplicationListResponse(BaseModel):
    items: list[ApplicationReviewItem]
    total: int
    skip: int
    limit: int


class DashboardStats(BaseModel):
    """Application counts per status."""

    total: int
    draft: int = 0
    submitted: int = 0
    shortlisted: int = 0
    interviewed: int = 0
    rejected: int = 0
    hired: int = 0
