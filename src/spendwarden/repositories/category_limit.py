"""Category limit repository with upsert semantics."""
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from spendwarden.models.category_limit import CategoryLimit
from spendwarden.repositories.base import BaseRepository


class CategoryLimitRepository(BaseRepository[CategoryLimit]):
    """Repository for CategoryLimit; at most one row per (user, category)."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, CategoryLimit)

    async def find_limit(
        self, user_id: UUID, category: str, for_update: bool = False
    ) -> CategoryLimit | None:
        """Get the limit for a user and category.

        With ``for_update`` the row stays locked until the session's transaction
        ends, on engines that support row locks.
        """
        query = select(CategoryLimit).where(
            CategoryLimit.user_id == user_id, CategoryLimit.category == category
        )
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: UUID) -> list[CategoryLimit]:
        """All limits for a user, ordered by category."""
        result = await self.db.execute(
            select(CategoryLimit)
            .where(CategoryLimit.user_id == user_id)
            .order_by(CategoryLimit.category)
        )
        return list(result.scalars().all())

    async def upsert(self, user_id: UUID, category: str, cap: int) -> CategoryLimit:
        """Set the cap for (user, category), replacing any existing cap.

        Does not commit; callers commit once per batch.
        """
        existing = await self.find_limit(user_id, category)
        if existing is not None:
            existing.cap = cap
            await self.db.flush()
            return existing
        limit = CategoryLimit(user_id=user_id, category=category, cap=cap)
        self.db.add(limit)
        await self.db.flush()
        return limit
