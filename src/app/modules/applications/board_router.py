"""
Applications Board Router

Review endpoints for board members. All endpoints require the board role.

Endpoints:
- GET /board/applications - List applications with filters and pagination
- PUT /board/applications/{id} - Generic update (status, remarks, interview date/score)
- POST /board/applications/{id}/shortlist - Shortlist a submitted application
- POST /board/applications/{id}/interview - Record interview scores
- POST /board/applications/{id}/reject - Reject an application
- POST /board/applications/{id}/hire - Hire an interviewed applicant
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import BoardContext, require_board
from app.core.database import get_db
from app.modules.applications import service
from app.modules.applications.models import ApplicationStatus
from app.modules.applications.schemas import (
    ApplicationListResponse,
    ApplicationReviewItem,
    BoardApplicationUpdate,
    HireRequest,
    InterviewScores,
    RejectRequest,
    ShortlistRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=ApplicationListResponse)
async def list_applications(
    job_id: int | None = Query(None, description="Filter by job"),
    status: ApplicationStatus | None = Query(None, description="Filter by status"),
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    _board: BoardContext = Depends(require_board),
    db: AsyncSession = Depends(get_db),
) -> ApplicationListResponse:
    items, total = await service.list_applications(
        db, job_id=job_id, status=status, skip=skip, limit=limit
    )
    return ApplicationListResponse(
        items=[ApplicationReviewItem.model_validate(item) for item in items],
        total=total,
        skip=skip,
        limit=limit,
    )


@router.put("/{application_id}", response_model=ApplicationReviewItem)
async def update_application(
    application_id: int,
    data: BoardApplicationUpdate,
    board: BoardContext = Depends(require_board),
    db: AsyncSession = Depends(get_db),
):
    return await service.update_application(db, board.user, application_id, data)


@router.post("/{application_id}/shortlist", response_model=ApplicationReviewItem)
async def shortlist_application(
    application_id: int,
    data: ShortlistRequest,
    board: BoardContext = Depends(require_board),
    db: AsyncSession = Depends(get_db),
):
    return await service.shortlist(
        db, board.user, application_id, data.interview_date, data.remarks
    )


@router.post("/{application_id}/interview", response_model=ApplicationReviewItem)
async def record_interview(
    application_id: int,
    scores: InterviewScores,
    board: BoardContext = Depends(require_board),
    db: AsyncSession = Depends(get_db),
):
    """Record interview sub-scores; the stored score is their total."""
    return await service.record_interview(db, board.user, application_id, scores)


@router.post("/{application_id}/reject", response_model=ApplicationReviewItem)
async def reject_application(
    application_id: int,
    data: RejectRequest,
    board: BoardContext = Depends(require_board),
    db: AsyncSession = Depends(get_db),
):
    return await service.reject(db, board.user, application_id, data.remarks)


@router.post("/{application_id}/hire", response_model=ApplicationReviewItem)
async def hire_applicant(
    application_id: int,
    data: HireRequest,
    board: BoardContext = Depends(require_board),
    db: AsyncSession = Depends(get_db),
):
    return await service.hire(db, board.user, application_id, data.remarks)
