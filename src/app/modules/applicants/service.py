"""
Applicant Service Layer

Business logic for the applicant profile wizard:

1. Profile creation (once per user)
2. Incremental step saves with a non-decreasing completion percentage
3. Location hierarchy validation (county -> constituency -> ward)
4. Phone ownership confirmation backed by a verified OTP
"""

import logging
from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.applicants import repository
from app.modules.applicants.models import Applicant
from app.modules.applicants.schemas import ApplicantProfileWrite
from app.modules.otp import repository as otp_repository
from app.modules.reference_data import repository as reference_repository
from app.modules.shared import InvalidReferenceError, NotFoundError, ServiceError

logger = logging.getLogger(__name__)


class ProfileExistsError(ServiceError):
    """Raised when a user submits a second applicant profile."""

    def __init__(self):
        super().__init__(
            message="Profile already exists",
            error_code="PROFILE_EXISTS",
            status_code=409,
        )


class InvalidLocationError(ServiceError):
    """Raised when county, constituency and ward do not form a chain."""

    def __init__(self, message: str):
        super().__init__(message=message, error_code="INVALID_LOCATION", status_code=400)


class OtpNotVerifiedError(ServiceError):
    """Raised when a phone number is confirmed without a verified OTP."""

    def __init__(self):
        super().__init__(
            message="Phone number has not been verified with an OTP",
            error_code="OTP_NOT_VERIFIED",
            status_code=400,
        )


# Required wizard sections. Optional steps (short courses, professional
# qualifications) do not count towards completion.
PROFILE_SECTIONS: dict[str, Callable[[Applicant], bool]] = {
    "personal_details": lambda a: bool(
        a.first_name
        and a.surname
        and a.date_of_birth
        and a.gender
        and (a.national_id or a.id_passport_number)
        and a.phone_number
    ),
    "address": lambda a: bool(a.county_id and a.constituency_id and a.ward_id),
    "education": lambda a: bool(a.education_records),
    "employment": lambda a: bool(a.employment_history),
    "referees": lambda a: bool(a.referees),
    "documents": lambda a: bool(a.documents),
}


def calculate_profile_completion(applicant: Applicant) -> int:
    """
    Percentage of required profile sections that are filled in.

    Returns:
        Integer between 0 and 100
    """
    completed = sum(1 for is_complete in PROFILE_SECTIONS.values() if is_complete(applicant))
    return round(completed * 100 / len(PROFILE_SECTIONS))


def _refresh_completion(applicant: Applicant) -> None:
    """Recalculate completion without ever lowering the stored value."""
    current = applicant.profile_completion_percentage or 0
    applicant.profile_completion_percentage = max(current, calculate_profile_completion(applicant))


async def _validate_location(
    db: AsyncSession,
    county_id: int | None,
    constituency_id: int | None,
    ward_id: int | None,
) -> None:
    """
    Check that the selected location forms a strict hierarchy.

    Raises:
        InvalidLocationError: If a level is missing its parent or the parent does not match
    """
    if ward_id is not None:
        if constituency_id is None:
            raise InvalidLocationError("ward_id requires constituency_id")
        ward = await reference_repository.get_ward(db, ward_id)
        if not ward or ward.constituency_id != constituency_id:
            raise InvalidLocationError(
                f"Ward {ward_id} does not belong to constituency {constituency_id}"
            )

    if constituency_id is not None:
        if county_id is None:
            raise InvalidLocationError("constituency_id requires county_id")
        constituency = await reference_repository.get_constituency(db, constituency_id)
        if not constituency or constituency.county_id != county_id:
            raise InvalidLocationError(
                f"Constituency {constituency_id} does not belong to county {county_id}"
            )
    elif county_id is not None and not await reference_repository.get_county(db, county_id):
        raise InvalidLocationError(f"Unknown county {county_id}")


async def _validate_references(db: AsyncSession, data: ApplicantProfileWrite) -> None:
    """
    Check the profession and education lookups submitted in this step.

    Raises:
        InvalidReferenceError: If an id does not match a lookup row
    """
    if data.profession_id is not None and not await reference_repository.get_profession(
        db, data.profession_id
    ):
        raise InvalidReferenceError("profession_id", data.profession_id)

    for record in data.education_records or []:
        if not await reference_repository.get_institution(db, record.institution_id):
            raise InvalidReferenceError("institution_id", record.institution_id)
        if not await reference_repository.get_award(db, record.award_id):
            raise InvalidReferenceError("award_id", record.award_id)
        if record.course_id is not None and not await reference_repository.get_course(
            db, record.course_id
        ):
            raise InvalidReferenceError("course_id", record.course_id)


async def get_profile(db: AsyncSession, user_id: str) -> Applicant:
    """
    Get the applicant profile for a user.

    Raises:
        NotFoundError: If the user has no profile yet
    """
    applicant = await repository.get_by_user_id(db, user_id)
    if not applicant:
        raise NotFoundError("Profile")
    return applicant


async def create_profile(
    db: AsyncSession,
    user_id: str,
    data: ApplicantProfileWrite,
) -> Applicant:
    """
    Create the applicant profile from the first wizard step.

    Raises:
        ProfileExistsError: If the user already has a profile
        InvalidLocationError: If the location chain is inconsistent
        InvalidReferenceError: If a profession or education id is unknown
    """
    existing = await repository.get_by_user_id(db, user_id)
    if existing:
        logger.warning(f"Duplicate profile submission for user {user_id}")
        raise ProfileExistsError()

    await _validate_location(db, data.county_id, data.constituency_id, data.ward_id)
    await _validate_references(db, data)

    applicant = repository.build(user_id, data)
    _refresh_completion(applicant)
    applicant = await repository.save(db, applicant)

    logger.info(
        f"Created applicant profile {applicant.id} for user {user_id} "
        f"({applicant.profile_completion_percentage}% complete)"
    )
    return applicant


async def update_profile(
    db: AsyncSession,
    user_id: str,
    data: ApplicantProfileWrite,
) -> Applicant:
    """
    Save one wizard step.

    Changing the phone number clears its verification. The completion
    percentage never decreases.

    Raises:
        NotFoundError: If the user has no profile
        InvalidLocationError: If the resulting location chain is inconsistent
        InvalidReferenceError: If a profession or education id is unknown
    """
    applicant = await get_profile(db, user_id)

    await _validate_references(db, data)

    previous_phone = applicant.phone_number
    repository.apply_updates(applicant, data)

    if applicant.phone_number != previous_phone:
        applicant.phone_verified = False
        applicant.phone_verified_at = None

    await _validate_location(
        db, applicant.county_id, applicant.constituency_id, applicant.ward_id
    )

    _refresh_completion(applicant)
    applicant = await repository.save(db, applicant)

    logger.info(
        f"Updated applicant profile {applicant.id} "
        f"({applicant.profile_completion_percentage}% complete)"
    )
    return applicant


async def verify_phone(db: AsyncSession, user_id: str, phone_number: str) -> Applicant:
    """
    Mark the applicant's phone as verified.

    Requires that an OTP for ``phone_number`` was successfully verified.

    Raises:
        NotFoundError: If the user has no profile
        OtpNotVerifiedError: If no verified OTP exists for the number
    """
    applicant = await get_profile(db, user_id)

    if not await otp_repository.has_verified(db, phone_number):
        logger.warning(f"Phone confirmation without verified OTP for applicant {applicant.id}")
        raise OtpNotVerifiedError()

    applicant = await repository.mark_phone_verified(db, applicant, phone_number)
    logger.info(f"Phone verified for applicant {applicant.id}")
    return applicant


async def attach_document(
    db: AsyncSession,
    user_id: str,
    *,
    document_type: str,
    file_name: str,
    file_path: str,
    file_size: int,
    mime_type: str,
) -> Applicant:
    """
    Record an uploaded document against the user's profile.

    Raises:
        NotFoundError: If the user has no profile
    """
    applicant = await get_profile(db, user_id)
    repository.attach_document(
        applicant,
        document_type=document_type,
        file_name=file_name,
        file_path=file_path,
        file_size=file_size,
        mime_type=mime_type,
    )
    _refresh_completion(applicant)
    applicant = await repository.save(db, applicant)

    logger.info(f"Attached {document_type} document to applicant {applicant.id}")
    return applicant
