"""
OTP Service Layer

Issues and verifies six-digit phone verification codes.

Security:
- Codes come from the ``secrets`` module
- Codes are SHA-256 hashed before storage
- A code expires after OTP_EXPIRY_MINUTES and locks after OTP_MAX_ATTEMPTS wrong guesses
- Issuing a new code invalidates every earlier code for the phone
"""

import hashlib
import hmac
import logging
import secrets
from datetime import UTC, datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.sms import send_sms
from app.modules.otp import repository

logger = logging.getLogger(__name__)

OTP_MESSAGE = "Your PSB verification code is: {otp}. Valid for {minutes} minutes."


def _hash_code(code: str) -> str:
    """Hex-encoded SHA-256 hash of a code."""
    return hashlib.sha256(code.encode()).hexdigest()


def generate_code() -> str:
    """Random six-digit code in 100000..999999."""
    return str(100000 + secrets.randbelow(900000))


def _is_expired(expires_at: datetime, now: datetime) -> bool:
    # Some drivers hand back naive datetimes; they are stored as UTC
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=UTC)
    return expires_at < now


async def issue_otp(db: AsyncSession, phone_number: str) -> None:
    """
    Create a new code for ``phone_number`` and send it by SMS.

    SMS delivery failures are logged by the gateway client; the code is
    stored either way so the applicant can request a resend.
    """
    code = generate_code()
    expires_at = datetime.now(UTC) + timedelta(minutes=settings.otp_expiry_minutes)

    await repository.replace_for_phone(db, phone_number, _hash_code(code), expires_at)
    logger.info(f"Issued OTP for {phone_number}, expires at {expires_at.isoformat()}")

    sent = await send_sms(
        phone_number,
        OTP_MESSAGE.format(otp=code, minutes=settings.otp_expiry_minutes),
    )
    if not sent:
        logger.error(f"OTP for {phone_number} stored but SMS delivery failed")


async def verify_otp(db: AsyncSession, phone_number: str, code: str) -> bool:
    """
    Check a submitted code against the latest unverified one for the phone.

    A wrong code counts as an attempt. A correct code is consumed and
    cannot be verified twice.

    Returns:
        True only for a correct, unexpired code with attempts remaining
    """
    otp = await repository.get_latest_unverified(db, phone_number)
    if otp is None:
        logger.warning(f"OTP verification for {phone_number}: no pending code")
        return False

    if _is_expired(otp.expires_at, datetime.now(UTC)):
        logger.warning(f"OTP verification for {phone_number}: code expired")
        return False

    if otp.attempts >= settings.otp_max_attempts:
        logger.warning(f"OTP verification for {phone_number}: too many attempts")
        return False

    if not hmac.compare_digest(otp.otp_hash, _hash_code(code)):
        await repository.increment_attempts(db, otp)
        logger.warning(
            f"OTP verification for {phone_number}: wrong code "
            f"(attempt {otp.attempts}/{settings.otp_max_attempts})"
        )
        return False

    await repository.mark_verified(db, otp)
    logger.info(f"OTP verified for {phone_number}")
    return True


async def cleanup_expired(db: AsyncSession) -> int:
    """Delete expired codes. Returns the number removed."""
    deleted = await repository.delete_expired(db)
    logger.info(f"Deleted {deleted} expired OTP code(s)")
    return deleted
