"""
Applicants module - profile wizard, child collections and documents.
"""

from app.modules.applicants.router import router

__all__ = ["router"]
