"""
Job Models

Advertised positions. Jobs are never hard-deleted; admins deactivate them.
"""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import JSON, Boolean, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.modules.shared import BaseModel

if TYPE_CHECKING:
    from app.modules.reference_data.models import Department, Designation


class Job(BaseModel):
    __tablename__ = "jobs"

    title: Mapped[str] = mapped_column(String(250), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    department_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("departments.id"), nullable=False, index=True
    )
    designation_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("designations.id"), nullable=False
    )
    # Free-form qualification requirements, e.g. {"education": [...], "experience_years": 3}
    requirements: Mapped[dict | list | None] = mapped_column(JSON, nullable=True)
    application_deadline: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
    created_by: Mapped[str] = mapped_column(String(255), ForeignKey("users.id"), nullable=False)

    department: Mapped["Department"] = relationship("Department", lazy="joined")
    designation: Mapped["Designation"] = relationship("Designation", lazy="joined")

    def is_open(self, today: date | None = None) -> bool:
        """Whether the job accepts applications on ``today``."""
        today = today or date.today()
        if not self.is_active:
            return False
        return self.application_deadline is None or self.application_deadline >= today

    def __repr__(self) -> str:
        return f"<Job {self.id} {self.title!r} active={self.is_active}>"
