"""
OTP Schemas
"""

from pydantic import BaseModel, Field, field_validator


class SendOtpRequest(BaseModel):
    phone_number: str = Field(..., min_length=9, max_length=20)

    @field_validator("phone_number")
    @classmethod
    def normalize_phone(cls, v: str) -> str:
        v = v.strip().replace(" ", "")
        if not v.lstrip("+").isdigit():
            raise ValueError("phone_number must contain digits only")
        return v


class VerifyOtpRequest(SendOtpRequest):
    otp: str = Field(..., pattern=r"^\d{6}$")


class SendOtpResponse(BaseModel):
    message: str


class VerifyOtpResponse(BaseModel):
    message: str
    verified: bool
