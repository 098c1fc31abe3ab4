"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict

from app.modules.applicants.schemas import ApplicantProfileResponse
from app.modules.users.models import UserRole


class UserResponse(BaseModel):
    """Current user, their applicant profile and where the client should go next."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    role: UserRole
    applicant_profile: ApplicantProfileResponse | None = None
    redirect_url: str
