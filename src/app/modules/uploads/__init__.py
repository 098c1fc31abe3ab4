"""
Uploads module - document files stored on the local file system.
"""

from .router import router

__all__ = ["router"]
