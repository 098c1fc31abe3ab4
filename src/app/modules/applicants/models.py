"""
Applicant Models

The applicant profile (a 1:1 extension of a User with the applicant role)
and the child collections it owns. Child rows cascade with their applicant
both in the ORM and at the database level.
"""

import enum
from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.modules.shared import BaseModel

if TYPE_CHECKING:
    from app.modules.applications.models import Application
    from app.modules.users.models import User


class IdDocumentType(str, enum.Enum):
    """Identity document presented by the applicant."""

    NATIONAL_ID = "national_id"
    PASSPORT = "passport"
    ALIEN_ID = "alien_id"


class Applicant(BaseModel):
    """
    Applicant profile.

    Created once via profile submission, then filled in step by step.
    """

    __tablename__ = "applicants"

    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    # Personal details
    salutation: Mapped[str | None] = mapped_column(String(8), nullable=True)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    surname: Mapped[str | None] = mapped_column(String(100), nullable=True)
    other_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    phone_verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    phone_verified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    alt_phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    national_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    id_passport_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    id_passport_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(10), nullable=True)
    nationality: Mapped[str | None] = mapped_column(String(100), nullable=True)
    ethnicity: Mapped[str | None] = mapped_column(String(50), nullable=True)
    religion: Mapped[str | None] = mapped_column(String(50), nullable=True)
    is_pwd: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    pwd_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    is_employee: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    kra_pin: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Location (county -> constituency -> ward)
    county_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("counties.id"), nullable=True
    )
    constituency_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("constituencies.id"), nullable=True
    )
    ward_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("wards.id"), nullable=True)
    address: Mapped[str | None] = mapped_column(String(250), nullable=True)

    profession_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("professions.id"), nullable=True
    )

    profile_completion_percentage: Mapped[int] = mapped_column(
        Integer, default=0, nullable=False
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="applicant")
    education_records: Mapped[list["EducationRecord"]] = relationship(
        "EducationRecord",
        back_populates="applicant",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    employment_history: Mapped[list["EmploymentHistory"]] = relationship(
        "EmploymentHistory",
        back_populates="applicant",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    referees: Mapped[list["Referee"]] = relationship(
        "Referee",
        back_populates="applicant",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    documents: Mapped[list["Document"]] = relationship(
        "Document",
        back_populates="applicant",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    applications: Mapped[list["Application"]] = relationship(
        "Application",
        back_populates="applicant",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Applicant(id={self.id}, user_id={self.user_id})>"


class EducationRecord(BaseModel):
    __tablename__ = "education_records"

    applicant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("applicants.id", ondelete="CASCADE"), nullable=False, index=True
    )
    institution_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("institutions.id"), nullable=False
    )
    course_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("courses_offered.id"), nullable=True
    )
    award_id: Mapped[int] = mapped_column(Integer, ForeignKey("awards.id"), nullable=False)
    year_completed: Mapped[int | None] = mapped_column(Integer, nullable=True)
    grade: Mapped[str | None] = mapped_column(String(10), nullable=True)

    applicant: Mapped["Applicant"] = relationship("Applicant", back_populates="education_records")


class EmploymentHistory(BaseModel):
    __tablename__ = "employment_history"

    applicant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("applicants.id", ondelete="CASCADE"), nullable=False, index=True
    )
    employer: Mapped[str] = mapped_column(String(200), nullable=False)
    position: Mapped[str] = mapped_column(String(150), nullable=False)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_current: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    duties: Mapped[str | None] = mapped_column(Text, nullable=True)

    applicant: Mapped["Applicant"] = relationship(
        "Applicant", back_populates="employment_history"
    )


class Referee(BaseModel):
    __tablename__ = "referees"

    applicant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("applicants.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    position: Mapped[str | None] = mapped_column(String(150), nullable=True)
    organization: Mapped[str | None] = mapped_column(String(200), nullable=True)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    relationship_to_applicant: Mapped[str | None] = mapped_column(
        "relationship", String(100), nullable=True
    )

    applicant: Mapped["Applicant"] = relationship("Applicant", back_populates="referees")


class Document(BaseModel):
    """Uploaded supporting document (ID copy, certificate, transcript, ...)."""

    __tablename__ = "documents"

    applicant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("applicants.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_path: Mapped[str] = mapped_column(String(500), nullable=False)
    file_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mime_type: Mapped[str | None] = mapped_column(String(100), nullable=True)

    applicant: Mapped["Applicant"] = relationship("Applicant", back_populates="documents")
