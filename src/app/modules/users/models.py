"""
User Models

Identity records mirrored from the external identity provider.
"""

from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.dialects.postgresql import ENUM
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.modules.shared import TimestampMixin

if TYPE_CHECKING:
    from app.modules.applicants.models import Applicant


class UserRole(str, Enum):
    """User roles in the system."""

    APPLICANT = "applicant"
    ADMIN = "admin"
    BOARD = "board"


class User(TimestampMixin, Base):
    """
    Platform user.

    The primary key is the identity provider's subject id. Rows are created
    on first authenticated request; the role is assigned out-of-band.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)

    email: Mapped[str | None] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=True,
    )
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    profile_image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    role: Mapped[UserRole] = mapped_column(
        ENUM(UserRole, name="user_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserRole.APPLICANT,
    )

    # Relationships
    applicant: Mapped["Applicant | None"] = relationship(
        "Applicant",
        back_populates="user",
        uselist=False,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role.value})>"

    @property
    def full_name(self) -> str:
        """Return user's full name."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)
