"""
Reference data module - counties, constituencies, wards and form lookups.
"""

from .router import router

__all__ = ["router"]
