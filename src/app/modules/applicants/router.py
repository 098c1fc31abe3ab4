"""
Applicant Profile Router

Endpoints:
- GET /applicant/profile - Current user's profile
- POST /applicant/profile - Create the profile (first wizard step)
- PUT /applicant/profile - Save a wizard step
- POST /applicant/verify-phone - Confirm phone ownership after OTP verification
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import ApplicantContext, require_applicant
from app.core.database import get_db
from app.modules.applicants import service
from app.modules.applicants.schemas import (
    ApplicantProfileResponse,
    ApplicantProfileWrite,
    VerifyPhoneRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/profile", response_model=ApplicantProfileResponse)
async def get_profile(
    context: ApplicantContext = Depends(require_applicant),
    db: AsyncSession = Depends(get_db),
) -> ApplicantProfileResponse:
    applicant = await service.get_profile(db, context.user.id)
    return ApplicantProfileResponse.model_validate(applicant)


@router.post(
    "/profile",
    response_model=ApplicantProfileResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_profile(
    data: ApplicantProfileWrite,
    context: ApplicantContext = Depends(require_applicant),
    db: AsyncSession = Depends(get_db),
) -> ApplicantProfileResponse:
    """Create the applicant profile. A second call returns 409."""
    applicant = await service.create_profile(db, context.user.id, data)
    return ApplicantProfileResponse.model_validate(applicant)


@router.put("/profile", response_model=ApplicantProfileResponse)
async def update_profile(
    data: ApplicantProfileWrite,
    context: ApplicantContext = Depends(require_applicant),
    db: AsyncSession = Depends(get_db),
) -> ApplicantProfileResponse:
    """
    Save one wizard step.

    Only the fields present in the body are changed. Submitted child
    collections (education, employment, referees) replace the stored ones.
    """
    applicant = await service.update_profile(db, context.user.id, data)
    return ApplicantProfileResponse.model_validate(applicant)


@router.post("/verify-phone", response_model=ApplicantProfileResponse)
async def verify_phone(
    data: VerifyPhoneRequest,
    context: ApplicantContext = Depends(require_applicant),
    db: AsyncSession = Depends(get_db),
) -> ApplicantProfileResponse:
    applicant = await service.verify_phone(db, context.user.id, data.phone_number)
    return ApplicantProfileResponse.model_validate(applicant)
