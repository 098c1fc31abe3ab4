"""
Reference Data Schemas
"""

from pydantic import BaseModel, ConfigDict


class ReferenceItem(BaseModel):
    """A named lookup row."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class CountyResponse(ReferenceItem):
    code: str


class ConstituencyResponse(ReferenceItem):
    code: str
    county_id: int


class WardResponse(ReferenceItem):
    code: str
    constituency_id: int


class DesignationResponse(ReferenceItem):
    job_group: str


class CourseResponse(ReferenceItem):
    specialization_id: int
    award_id: int


class ConfigResponse(BaseModel):
    """Response for GET /public/config."""

    departments: list[ReferenceItem]
    designations: list[DesignationResponse]
    awards: list[ReferenceItem]
    courses: list[CourseResponse]
    institutions: list[ReferenceItem]
    professions: list[ReferenceItem]
    specializations: list[ReferenceItem]
