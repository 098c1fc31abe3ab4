"""
Applications Module

Handles the job application workflow:
1. Applicants apply to open jobs (one application per job)
2. Board members shortlist, interview, reject or hire
3. Admins reject or hire and see dashboard statistics

Status changes are validated by the transition table in workflow.py, keyed
by (current status, action, actor role).
"""

from .admin_router import router as admin_router
from .board_router import router as board_router
from .router import router

__all__ = ["router", "admin_router", "board_router"]
