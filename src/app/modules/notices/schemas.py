"""
Notice Schemas
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.modules.notices.models import NoticeType


class NoticeCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=250)
    content: str = Field(..., min_length=1)
    type: NoticeType = NoticeType.GENERAL
    is_published: bool = False


class NoticeUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=250)
    content: str | None = Field(None, min_length=1)
    type: NoticeType | None = None
    is_published: bool | None = None

    @field_validator("title", "content", "type", "is_published")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but cannot be null")
        return v


class NoticeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    type: NoticeType
    is_published: bool
    published_at: datetime | None = None
    created_by: str
    created_at: datetime
    updated_at: datetime
