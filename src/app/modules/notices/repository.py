"""
Notice Repository
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Notice


async def list_notices(db: AsyncSession, *, published_only: bool = False) -> list[Notice]:
    """List notices, most recently published (then created) first."""
    query = select(Notice)
    if published_only:
        query = query.where(Notice.is_published.is_(True))
    query = query.order_by(
        Notice.published_at.desc().nulls_last(),
        Notice.created_at.desc(),
    )
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_by_id(db: AsyncSession, notice_id: int) -> Notice | None:
    return await db.get(Notice, notice_id)


async def save(db: AsyncSession, notice: Notice) -> Notice:
    db.add(notice)
    await db.commit()
    await db.refresh(notice)
    return notice
