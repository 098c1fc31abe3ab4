"""
User Repository

Database operations for user management.
"""

import logging

from sqlalchemy import func
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.users.models import User, UserRole

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for user database operations."""

    @staticmethod
    async def get_by_id(db: AsyncSession, user_id: str) -> User | None:
        """
        Get a user by identity subject id.

        Args:
            db: Database session
            user_id: Subject id from the identity provider

        Returns:
            User instance or None if not found
        """
        return await db.get(User, user_id)

    @staticmethod
    async def upsert(
        db: AsyncSession,
        *,
        user_id: str,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        profile_image_url: str | None = None,
    ) -> User:
        """
        Insert a user or refresh its identity fields.

        The role column is only set on insert, so an existing user's role
        is never overwritten by identity provider claims.

        Returns:
            The stored User
        """
        values = {
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "profile_image_url": profile_image_url,
        }
        stmt = (
            insert(User)
            .values(id=user_id, role=UserRole.APPLICANT, **values)
            .on_conflict_do_update(
                index_elements=[User.id],
                set_={**values, "updated_at": func.now()},
            )
            .returning(User)
        )
        result = await db.execute(stmt)
        user = result.scalar_one()
        await db.commit()

        logger.info(f"Upserted user: {user.id} ({user.role.value})")
        return user

    @staticmethod
    async def set_role(db: AsyncSession, user_id: str, role: UserRole) -> User | None:
        """
        Assign a role to an existing user.

        Used by the seed script; there is no API path for role changes.
        """
        user = await db.get(User, user_id)
        if not user:
            return None

        user.role = role
        await db.commit()
        await db.refresh(user)

        logger.info(f"Assigned role {role.value} to user {user_id}")
        return user
