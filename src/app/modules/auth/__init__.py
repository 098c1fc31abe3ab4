"""Authentication module."""

from app.modules.auth.router import router
from app.modules.auth.schemas import UserResponse

__all__ = ["router", "UserResponse"]
