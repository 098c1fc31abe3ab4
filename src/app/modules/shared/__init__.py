"""
Shared building blocks for feature modules.
"""

from app.modules.shared.errors import InvalidReferenceError, NotFoundError, ServiceError
from app.modules.shared.models import BaseModel, TimestampMixin

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "ServiceError",
    "NotFoundError",
    "InvalidReferenceError",
]
