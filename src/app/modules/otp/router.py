"""
OTP Router

Phone verification endpoints. Mounted under /auth; no bearer token is
required so a number can be verified during sign-up.

Endpoints:
- POST /auth/send-otp - Issue a code by SMS (rate limited per phone number)
- POST /auth/verify-otp - Check a code
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_db
from app.core.rate_limit import enforce_rate_limit
from app.modules.otp import service
from app.modules.otp.schemas import (
    SendOtpRequest,
    SendOtpResponse,
    VerifyOtpRequest,
    VerifyOtpResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/send-otp", response_model=SendOtpResponse)
async def send_otp(
    data: SendOtpRequest,
    db: AsyncSession = Depends(get_db),
) -> SendOtpResponse:
    """
    Send a verification code to a phone number.

    Raises:
        HTTPException 429: If the number requested too many codes recently
    """
    await enforce_rate_limit(
        f"otp:send:{data.phone_number}",
        settings.otp_send_limit,
        settings.otp_send_window_seconds,
    )
    await service.issue_otp(db, data.phone_number)
    return SendOtpResponse(message="OTP sent successfully")


@router.post(
    "/verify-otp",
    response_model=VerifyOtpResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": VerifyOtpResponse}},
)
async def verify_otp(
    data: VerifyOtpRequest,
    db: AsyncSession = Depends(get_db),
):
    """Verify a code. Failure returns 400 with ``verified: false``."""
    if await service.verify_otp(db, data.phone_number, data.otp):
        return VerifyOtpResponse(message="Phone number verified successfully", verified=True)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=VerifyOtpResponse(message="Invalid or expired OTP", verified=False).model_dump(),
    )
