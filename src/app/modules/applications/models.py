"""
Application Models

A job application links one applicant to one job. An applicant can apply
to a given job only once; the unique constraint enforces this even under
concurrent submissions.
"""

import enum
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import ENUM
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.modules.shared import BaseModel

if TYPE_CHECKING:
    from app.modules.applicants.models import Applicant
    from app.modules.jobs.models import Job


class ApplicationStatus(str, enum.Enum):
    """Status of a job application."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    SHORTLISTED = "shortlisted"
    INTERVIEWED = "interviewed"
    REJECTED = "rejected"
    HIRED = "hired"


class Application(BaseModel):
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("applicant_id", "job_id", name="uq_applications_applicant_job"),
        CheckConstraint(
            "interview_score IS NULL OR (interview_score >= 0 AND interview_score <= 100)",
            name="ck_applications_interview_score_range",
        ),
    )

    job_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("jobs.id"), nullable=False, index=True
    )
    applicant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("applicants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status: Mapped[ApplicationStatus] = mapped_column(
        ENUM(
            ApplicationStatus,
            name="application_status",
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
        default=ApplicationStatus.DRAFT,
        index=True,
    )
    submitted_on: Mapped[date | None] = mapped_column(Date, nullable=True)
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    interview_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    interview_score: Mapped[int | None] = mapped_column(Integer, nullable=True)

    job: Mapped["Job"] = relationship("Job")
    applicant: Mapped["Applicant"] = relationship("Applicant", back_populates="applications")

    def __repr__(self) -> str:
        return f"<Application {self.id} job={self.job_id} applicant={self.applicant_id} {self.status.value}>"
