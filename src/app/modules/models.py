"""
Model registry.

Importing this module registers every table on ``Base.metadata`` and lets
string-based relationships resolve.
"""

from app.modules.applicants.models import (
    Applicant,
    Document,
    EducationRecord,
    EmploymentHistory,
    Referee,
)
from app.modules.applications.models import Application
from app.modules.jobs.models import Job
from app.modules.notices.models import Notice
from app.modules.otp.models import OtpVerification
from app.modules.reference_data.models import (
    Award,
    Constituency,
    County,
    CourseOffered,
    Department,
    Designation,
    Institution,
    Profession,
    Specialization,
    Ward,
)
from app.modules.users.models import User

__all__ = [
    "Applicant",
    "Application",
    "Award",
    "Constituency",
    "County",
    "CourseOffered",
    "Department",
    "Designation",
    "Document",
    "EducationRecord",
    "EmploymentHistory",
    "Institution",
    "Job",
    "Notice",
    "OtpVerification",
    "Profession",
    "Referee",
    "Specialization",
    "User",
    "Ward",
]
