"""
Applicant Repository

Database operations for applicant profiles and their child collections.
"""

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Applicant, Document, EducationRecord, EmploymentHistory, Referee
from .schemas import ApplicantProfileWrite

CHILD_COLLECTIONS = ("education_records", "employment_history", "referees")


def _build_children(data: ApplicantProfileWrite) -> dict[str, list]:
    """Map submitted child collections to model instances; omitted ones are skipped."""
    children: dict[str, list] = {}
    if data.education_records is not None:
        children["education_records"] = [
            EducationRecord(**item.model_dump()) for item in data.education_records
        ]
    if data.employment_history is not None:
        children["employment_history"] = [
            EmploymentHistory(**item.model_dump()) for item in data.employment_history
        ]
    if data.referees is not None:
        children["referees"] = [
            Referee(
                **item.model_dump(exclude={"relationship"}),
                relationship_to_applicant=item.relationship,
            )
            for item in data.referees
        ]
    return children


def build(user_id: str, data: ApplicantProfileWrite) -> Applicant:
    """Build an unsaved applicant from a profile submission."""
    fields = data.model_dump(exclude_unset=True, exclude=set(CHILD_COLLECTIONS))
    applicant = Applicant(
        user_id=user_id,
        phone_verified=False,
        profile_completion_percentage=0,
        education_records=[],
        employment_history=[],
        referees=[],
        documents=[],
        **fields,
    )
    for name, rows in _build_children(data).items():
        setattr(applicant, name, rows)
    return applicant


def apply_updates(applicant: Applicant, data: ApplicantProfileWrite) -> Applicant:
    """
    Apply a partial profile submission in memory.

    Only fields present in the request are written. A submitted child
    collection replaces the stored one (orphans are deleted on flush).
    """
    fields = data.model_dump(exclude_unset=True, exclude=set(CHILD_COLLECTIONS))
    for key, value in fields.items():
        setattr(applicant, key, value)
    for name, rows in _build_children(data).items():
        setattr(applicant, name, rows)
    return applicant


async def save(db: AsyncSession, applicant: Applicant) -> Applicant:
    """Persist an applicant and its collections."""
    db.add(applicant)
    await db.commit()
    await db.refresh(applicant)
    return applicant


async def get_by_user_id(db: AsyncSession, user_id: str) -> Applicant | None:
    """Get the applicant profile owned by a user."""
    result = await db.execute(select(Applicant).where(Applicant.user_id == user_id))
    return result.scalar_one_or_none()


async def mark_phone_verified(
    db: AsyncSession,
    applicant: Applicant,
    phone_number: str,
) -> Applicant:
    """Record that the applicant proved ownership of ``phone_number``."""
    applicant.phone_number = phone_number
    applicant.phone_verified = True
    applicant.phone_verified_at = datetime.now(UTC)

    await db.commit()
    await db.refresh(applicant)
    return applicant


def attach_document(
    applicant: Applicant,
    *,
    document_type: str,
    file_name: str,
    file_path: str,
    file_size: int,
    mime_type: str,
) -> Document:
    """Attach an uploaded document in memory; persist with save()."""
    document = Document(
        type=document_type,
        file_name=file_name,
        file_path=file_path,
        file_size=file_size,
        mime_type=mime_type,
    )
    applicant.documents.append(document)
    return document
