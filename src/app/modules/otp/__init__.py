"""
OTP Module

Phone number verification with six-digit codes sent by SMS.

Background Jobs (via APScheduler):
- otp_cleanup_expired: deletes expired codes on a fixed interval
"""

from .jobs import register_otp_jobs
from .router import router

__all__ = ["router", "register_otp_jobs"]
