"""
Reference Data Models

Static lookup tables: the county -> constituency -> ward hierarchy and the
configuration lists used by job postings and applicant profiles. The API
only reads these; they are populated by scripts/seed_reference_data.py.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.modules.shared import BaseModel


class County(BaseModel):
    __tablename__ = "counties"

    code: Mapped[str] = mapped_column(String(11), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    constituencies: Mapped[list["Constituency"]] = relationship(
        "Constituency", back_populates="county"
    )


class Constituency(BaseModel):
    __tablename__ = "constituencies"

    code: Mapped[str] = mapped_column(String(11), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    county_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("counties.id"), nullable=False, index=True
    )

    county: Mapped["County"] = relationship("County", back_populates="constituencies")
    wards: Mapped[list["Ward"]] = relationship("Ward", back_populates="constituency")


class Ward(BaseModel):
    __tablename__ = "wards"

    code: Mapped[str] = mapped_column(String(11), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    constituency_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("constituencies.id"), nullable=False, index=True
    )

    constituency: Mapped["Constituency"] = relationship("Constituency", back_populates="wards")


class Department(BaseModel):
    __tablename__ = "departments"

    name: Mapped[str] = mapped_column(String(250), nullable=False)


class Designation(BaseModel):
    """A post title carrying its job group (pay grade) code."""

    __tablename__ = "designations"

    name: Mapped[str] = mapped_column(String(250), nullable=False)
    job_group: Mapped[str] = mapped_column(String(4), nullable=False)


class Award(BaseModel):
    """Education level, e.g. Diploma or Degree."""

    __tablename__ = "awards"

    name: Mapped[str] = mapped_column(String(100), nullable=False)


class Specialization(BaseModel):
    __tablename__ = "specializations"

    name: Mapped[str] = mapped_column(String(100), nullable=False)


class CourseOffered(BaseModel):
    __tablename__ = "courses_offered"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    specialization_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("specializations.id"), nullable=False
    )
    award_id: Mapped[int] = mapped_column(Integer, ForeignKey("awards.id"), nullable=False)


class Profession(BaseModel):
    __tablename__ = "professions"

    name: Mapped[str] = mapped_column(String(100), nullable=False)


class Institution(BaseModel):
    __tablename__ = "institutions"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
