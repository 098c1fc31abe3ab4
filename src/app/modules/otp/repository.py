"""
OTP Repository

Database operations for phone verification codes.
"""

import logging
from datetime import UTC, datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.otp.models import OtpVerification

logger = logging.getLogger(__name__)


async def replace_for_phone(
    db: AsyncSession,
    phone_number: str,
    otp_hash: str,
    expires_at: datetime,
) -> OtpVerification:
    """
    Store a new code for ``phone_number``, removing any earlier codes.

    Both statements run in one transaction so a phone never has two
    live codes.
    """
    await db.execute(delete(OtpVerification).where(OtpVerification.phone_number == phone_number))

    otp = OtpVerification(
        phone_number=phone_number,
        otp_hash=otp_hash,
        expires_at=expires_at,
        verified=False,
        attempts=0,
    )
    db.add(otp)
    await db.commit()
    await db.refresh(otp)
    return otp


async def get_latest_unverified(db: AsyncSession, phone_number: str) -> OtpVerification | None:
    """Get the most recent code for the phone that has not been used yet."""
    result = await db.execute(
        select(OtpVerification)
        .where(
            OtpVerification.phone_number == phone_number,
            OtpVerification.verified.is_(False),
        )
        .order_by(OtpVerification.created_at.desc(), OtpVerification.id.desc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def increment_attempts(db: AsyncSession, otp: OtpVerification) -> OtpVerification:
    otp.attempts += 1
    await db.commit()
    await db.refresh(otp)
    return otp


async def mark_verified(db: AsyncSession, otp: OtpVerification) -> OtpVerification:
    otp.verified = True
    await db.commit()
    await db.refresh(otp)
    return otp


async def has_verified(db: AsyncSession, phone_number: str) -> bool:
    """Whether a code for ``phone_number`` was successfully verified."""
    result = await db.execute(
        select(OtpVerification.id)
        .where(
            OtpVerification.phone_number == phone_number,
            OtpVerification.verified.is_(True),
        )
        .limit(1)
    )
    return result.scalar_one_or_none() is not None


async def delete_expired(db: AsyncSession, now: datetime | None = None) -> int:
    """
    Delete codes whose expiry has passed.

    Returns:
        Number of rows deleted
    """
    cutoff = now or datetime.now(UTC)
    result = await db.execute(delete(OtpVerification).where(OtpVerification.expires_at < cutoff))
    await db.commit()
    return result.rowcount or 0
