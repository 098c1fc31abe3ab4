"""
Notice Service Layer
"""

import logging
from datetime import UTC, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.notices import repository
from app.modules.notices.models import Notice
from app.modules.notices.schemas import NoticeCreate, NoticeUpdate
from app.modules.shared import NotFoundError

logger = logging.getLogger(__name__)


def _stamp_published(notice: Notice) -> None:
    """Set published_at the first time a notice is published."""
    if notice.is_published and notice.published_at is None:
        notice.published_at = datetime.now(UTC)


async def list_published_notices(db: AsyncSession) -> list[Notice]:
    return await repository.list_notices(db, published_only=True)


async def list_all_notices(db: AsyncSession) -> list[Notice]:
    return await repository.list_notices(db)


async def create_notice(db: AsyncSession, created_by: str, data: NoticeCreate) -> Notice:
    notice = Notice(created_by=created_by, **data.model_dump())
    _stamp_published(notice)

    notice = await repository.save(db, notice)
    logger.info(f"Notice {notice.id} created by {created_by} (published={notice.is_published})")
    return notice


async def update_notice(db: AsyncSession, notice_id: int, data: NoticeUpdate) -> Notice:
    """
    Apply a partial update to a notice.

    Unpublishing keeps the original published_at.

    Raises:
        NotFoundError: If the notice does not exist
    """
    notice = await repository.get_by_id(db, notice_id)
    if not notice:
        raise NotFoundError("Notice", notice_id)

    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(notice, key, value)
    _stamp_published(notice)

    notice = await repository.save(db, notice)
    logger.info(f"Notice {notice.id} updated (published={notice.is_published})")
    return notice
