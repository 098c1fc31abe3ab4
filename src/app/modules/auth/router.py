"""
Authentication router.

Sign-in itself happens at the identity provider; this router reports who
the bearer of a token is and where the client should send them.

Endpoints:
- GET /auth/user - Current user, applicant profile and redirect_url
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import (
    AdminContext,
    ApplicantContext,
    AuthContext,
    BoardContext,
    get_auth_context,
)
from app.core.database import get_db
from app.modules.applicants import repository as applicants_repository
from app.modules.applicants.models import Applicant
from app.modules.applicants.schemas import ApplicantProfileResponse
from app.modules.auth.schemas import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()

PROFILE_START_URL = "/profile?step=1&reason=complete_profile"
PROFILE_INCOMPLETE_URL = "/profile?step=2&reason=incomplete_profile"


def redirect_url_for(context: AuthContext, applicant: Applicant | None) -> str:
    """Landing page for a signed-in user."""
    match context:
        case ApplicantContext():
            if applicant is None:
                return PROFILE_START_URL
            if applicant.profile_completion_percentage < 100:
                return PROFILE_INCOMPLETE_URL
            return "/dashboard"
        case AdminContext():
            return "/admin"
        case BoardContext():
            return "/board"


@router.get("/user", response_model=UserResponse)
async def get_current_user_info(
    context: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    user = context.user
    applicant = await applicants_repository.get_by_user_id(db, user.id)

    return UserResponse(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        profile_image_url=user.profile_image_url,
        role=user.role,
        applicant_profile=(
            ApplicantProfileResponse.model_validate(applicant) if applicant else None
        ),
        redirect_url=redirect_url_for(context, applicant),
    )
