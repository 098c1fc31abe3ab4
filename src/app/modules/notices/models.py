"""
Notice Models
"""

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import ENUM
from sqlalchemy.orm import Mapped, mapped_column

from app.modules.shared import BaseModel


class NoticeType(str, enum.Enum):
    GENERAL = "general"
    ANNOUNCEMENT = "announcement"
    UPDATE = "update"


class Notice(BaseModel):
    __tablename__ = "notices"

    title: Mapped[str] = mapped_column(String(250), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[NoticeType] = mapped_column(
        ENUM(
            NoticeType,
            name="notice_type",
            create_type=True,
            values_callable=lambda x: [e.value for e in x],
        ),
        default=NoticeType.GENERAL,
        nullable=False,
    )
    is_published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    # Stamped the first time the notice is published and kept afterwards
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_by: Mapped[str] = mapped_column(String(255), ForeignKey("users.id"), nullable=False)

    def __repr__(self) -> str:
        return f"<Notice {self.id} {self.title!r} published={self.is_published}>"
