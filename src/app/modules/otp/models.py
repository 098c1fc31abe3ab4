"""
OTP Models

One-time phone verification codes. Only the SHA-256 hash of a code is
stored, never the code itself.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.modules.shared import BaseModel


class OtpVerification(BaseModel):
    __tablename__ = "otp_verifications"

    phone_number: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    otp_hash: Mapped[str] = mapped_column(String(64), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    attempts: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<OtpVerification {self.id} {self.phone_number} verified={self.verified}>"
