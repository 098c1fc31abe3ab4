"""
Notice Routers

Endpoints:
- GET /public/notices - Published notices
- GET /admin/notices - All notices (admin)
- POST /admin/notices - Create a notice (admin)
- PUT /admin/notices/{id} - Partial update (admin)
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AdminContext, require_admin
from app.core.database import get_db
from app.modules.notices import service
from app.modules.notices.schemas import NoticeCreate, NoticeResponse, NoticeUpdate

router = APIRouter()
admin_router = APIRouter()


@router.get("/notices", response_model=list[NoticeResponse])
async def list_published_notices(db: AsyncSession = Depends(get_db)):
    return await service.list_published_notices(db)


@admin_router.get("", response_model=list[NoticeResponse])
async def list_notices(
    _admin: AdminContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await service.list_all_notices(db)


@admin_router.post("", response_model=NoticeResponse, status_code=status.HTTP_201_CREATED)
async def create_notice(
    data: NoticeCreate,
    admin: AdminContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await service.create_notice(db, admin.user.id, data)


@admin_router.put("/{notice_id}", response_model=NoticeResponse)
async def update_notice(
    notice_id: int,
    data: NoticeUpdate,
    _admin: AdminContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await service.update_notice(db, notice_id, data)
