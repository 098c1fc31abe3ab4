"""
Applicant Schemas

Pydantic schemas for the applicant profile wizard. Every wizard step sends
a partial profile; child collections, when present, replace the stored ones.
"""

from datetime import date, datetime

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    model_validator,
)

from app.modules.applicants.models import IdDocumentType
from app.modules.otp.schemas import SendOtpRequest


class EducationRecordIn(BaseModel):
    institution_id: int
    award_id: int
    course_id: int | None = None
    year_completed: int | None = Field(None, ge=1950, le=2100)
    grade: str | None = Field(None, max_length=10)


class EmploymentHistoryIn(BaseModel):
    employer: str = Field(..., min_length=1, max_length=200)
    position: str = Field(..., min_length=1, max_length=150)
    start_date: date | None = None
    end_date: date | None = None
    is_current: bool = False
    duties: str | None = None

    @model_validator(mode="after")
    def validate_dates(self) -> "EmploymentHistoryIn":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        if self.is_current and self.end_date:
            raise ValueError("end_date must be empty for the current position")
        return self


class RefereeIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    position: str | None = Field(None, max_length=150)
    organization: str | None = Field(None, max_length=200)
    email: EmailStr | None = None
    phone_number: str | None = Field(None, max_length=20)
    relationship: str | None = Field(None, max_length=100)


class ApplicantProfileFields(BaseModel):
    """Scalar profile fields, all optional so each wizard step can send a subset."""

    salutation: str | None = Field(None, max_length=8)
    first_name: str | None = Field(None, max_length=100)
    surname: str | None = Field(None, max_length=100)
    other_name: str | None = Field(None, max_length=100)
    phone_number: str | None = Field(None, max_length=20)
    alt_phone_number: str | None = Field(None, max_length=20)
    national_id: str | None = Field(None, max_length=50)
    id_passport_number: str | None = Field(None, max_length=50)
    id_passport_type: IdDocumentType | None = None
    date_of_birth: date | None = None
    gender: str | None = Field(None, max_length=10)
    nationality: str | None = Field(None, max_length=100)
    county_id: int | None = None
    constituency_id: int | None = None
    ward_id: int | None = None
    address: str | None = Field(None, max_length=250)
    ethnicity: str | None = Field(None, max_length=50)
    religion: str | None = Field(None, max_length=50)
    is_pwd: bool | None = None
    pwd_number: str | None = Field(None, max_length=100)
    is_employee: bool | None = None
    kra_pin: str | None = Field(None, max_length=50)
    profession_id: int | None = None

    @model_validator(mode="after")
    def validate_fields(self) -> "ApplicantProfileFields":
        if self.date_of_birth and self.date_of_birth >= date.today():
            raise ValueError("date_of_birth must be in the past")
        if self.is_pwd and not self.pwd_number:
            raise ValueError("pwd_number is required when is_pwd is true")
        return self


class ApplicantProfileWrite(ApplicantProfileFields):
    """Request body for POST and PUT /applicant/profile."""

    education_records: list[EducationRecordIn] | None = None
    employment_history: list[EmploymentHistoryIn] | None = None
    referees: list[RefereeIn] | None = Field(None, max_length=5)


class EducationRecordResponse(EducationRecordIn):
    model_config = ConfigDict(from_attributes=True)

    id: int


class EmploymentHistoryResponse(EmploymentHistoryIn):
    model_config = ConfigDict(from_attributes=True)

    id: int


class RefereeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    position: str | None = None
    organization: str | None = None
    email: str | None = None
    phone_number: str | None = None
    relationship: str | None = Field(
        None, validation_alias=AliasChoices("relationship", "relationship_to_applicant")
    )


class DocumentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: str
    file_name: str
    file_path: str
    file_size: int | None = None
    mime_type: str | None = None
    created_at: datetime


class ApplicantProfileResponse(BaseModel):
    """Full applicant profile."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    salutation: str | None = None
    first_name: str | None = None
    surname: str | None = None
    other_name: str | None = None
    phone_number: str | None = None
    phone_verified: bool
    phone_verified_at: datetime | None = None
    alt_phone_number: str | None = None
    national_id: str | None = None
    id_passport_number: str | None = None
    id_passport_type: str | None = None
    date_of_birth: date | None = None
    gender: str | None = None
    nationality: str | None = None
    county_id: int | None = None
    constituency_id: int | None = None
    ward_id: int | None = None
    address: str | None = None
    ethnicity: str | None = None
    religion: str | None = None
    is_pwd: bool | None = None
    pwd_number: str | None = None
    is_employee: bool | None = None
    kra_pin: str | None = None
    profession_id: int | None = None
    profile_completion_percentage: int
    education_records: list[EducationRecordResponse] = []
    employment_history: list[EmploymentHistoryResponse] = []
    referees: list[RefereeResponse] = []
    documents: list[DocumentResponse] = []
    created_at: datetime
    updated_at: datetime


class VerifyPhoneRequest(SendOtpRequest):
    """Request body for POST /applicant/verify-phone."""
