from fastapi import APIRouter

from app.modules.applicants import router as applicant_profile_router
from app.modules.applications import admin_router as admin_applications_router
from app.modules.applications import board_router as board_applications_router
from app.modules.applications import router as applicant_applications_router
from app.modules.auth import router as auth_router
from app.modules.jobs import admin_router as admin_jobs_router
from app.modules.jobs import router as public_jobs_router
from app.modules.notices import admin_router as admin_notices_router
from app.modules.notices import router as public_notices_router
from app.modules.otp import router as otp_router
from app.modules.reference_data import router as reference_data_router
from app.modules.uploads import router as uploads_router

api_router = APIRouter()

# Public
api_router.include_router(public_jobs_router, prefix="/public", tags=["Public"])
api_router.include_router(public_notices_router, prefix="/public", tags=["Public"])
api_router.include_router(reference_data_router, prefix="/public", tags=["Public"])

# Authentication
api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
api_router.include_router(otp_router, prefix="/auth", tags=["Authentication"])

# Applicant
api_router.include_router(applicant_profile_router, prefix="/applicant", tags=["Applicant"])
api_router.include_router(applicant_applications_router, prefix="/applicant", tags=["Applicant"])

# Admin
api_router.include_router(
    admin_applications_router,
    prefix="/admin/applications",
    tags=["Admin - Applications"],
)
api_router.include_router(admin_jobs_router, prefix="/admin/jobs", tags=["Admin - Jobs"])
api_router.include_router(admin_notices_router, prefix="/admin/notices", tags=["Admin - Notices"])

# Board
api_router.include_router(
    board_applications_router,
    prefix="/board/applications",
    tags=["Board - Applications"],
)

# Uploads
api_router.include_router(uploads_router, prefix="/upload", tags=["Uploads"])
