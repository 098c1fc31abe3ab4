"""
OTP Background Jobs

Periodic removal of expired verification codes. Idempotent, so it is also
safe to trigger manually through /debug/jobs.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from apscheduler.triggers.interval import IntervalTrigger

from app.core.config import settings
from app.core.database import async_session_maker
from app.core.scheduler import register_job
from app.modules.otp import service

logger = logging.getLogger(__name__)

JOB_ID_CLEANUP_EXPIRED = "otp_cleanup_expired"


async def cleanup_expired_otps() -> dict[str, Any]:
    """
    Delete OTP rows whose expiry has passed.

    Returns:
        Dict with executed_at and the number of rows deleted
    """
    executed_at = datetime.now(UTC)

    async with async_session_maker() as db:
        deleted = await service.cleanup_expired(db)

    return {"executed_at": executed_at.isoformat(), "deleted": deleted}


def register_otp_jobs() -> None:
    """Register the OTP cleanup job. Call during startup."""
    interval = settings.otp_cleanup_interval_minutes
    register_job(
        job_id=JOB_ID_CLEANUP_EXPIRED,
        func=cleanup_expired_otps,
        trigger=IntervalTrigger(minutes=interval),
    )
    logger.info(f"Registered job: {JOB_ID_CLEANUP_EXPIRED} (interval: {interval} minutes)")
