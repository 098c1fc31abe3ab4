"""
Job Schemas
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.modules.reference_data.schemas import DesignationResponse, ReferenceItem


class JobCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=250)
    description: str | None = None
    department_id: int
    designation_id: int
    requirements: dict[str, Any] | list[Any] | None = None
    application_deadline: date | None = None
    is_active: bool = True


class JobUpdate(BaseModel):
    """Partial update; only fields present in the request are changed."""

    title: str | None = Field(None, min_length=1, max_length=250)
    description: str | None = None
    department_id: int | None = None
    designation_id: int | None = None
    requirements: dict[str, Any] | list[Any] | None = None
    application_deadline: date | None = None
    is_active: bool | None = None

    @field_validator("title", "department_id", "designation_id", "is_active")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but cannot be null")
        return v


class JobResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    department_id: int
    designation_id: int
    department: ReferenceItem | None = None
    designation: DesignationResponse | None = None
    requirements: dict[str, Any] | list[Any] | None = None
    application_deadline: date | None = None
    is_active: bool
    created_by: str
    created_at: datetime
    updated_at: datetime
