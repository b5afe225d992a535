"""Transaction repository with filtering and aggregation queries."""
from datetime import datetime
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from spendwarden.models.transaction import Transaction
from spendwarden.repositories.base import BaseRepository


class TransactionRepository(BaseRepository[Transaction]):
    """Repository for Transaction model with filtering and analytics queries."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Transaction)

    @staticmethod
    def _filtered(
        query: Select,
        user_id: UUID | None = None,
        category: str | None = None,
        payee: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> Select:
        if user_id is not None:
            query = query.where(Transaction.user_id == user_id)
        if category is not None:
            query = query.where(Transaction.category == category)
        if payee is not None:
            query = query.where(Transaction.payee == payee)
        if start is not None:
            query = query.where(Transaction.occurred_at >= start)
        if end is not None:
            query = query.where(Transaction.occurred_at <= end)
        return query

    async def find(
        self,
        user_id: UUID | None = None,
        category: str | None = None,
        payee: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        newest_first: bool = True,
        skip: int = 0,
        limit: int | None = 100,
    ) -> list[Transaction]:
        """Find transactions matching every given filter.

        Ordered by occurrence time, then id, so equal timestamps sort the same
        way on every call.
        """
        query = self._filtered(select(Transaction), user_id, category, payee, start, end)
        if newest_first:
            query = query.order_by(Transaction.occurred_at.desc(), Transaction.id.desc())
        else:
            query = query.order_by(Transaction.occurred_at.asc(), Transaction.id.asc())
        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count(
        self,
        user_id: UUID | None = None,
        category: str | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> int:
        """Count transactions matching the filters."""
        query = self._filtered(
            select(func.count(Transaction.id)), user_id, category, None, start, end
        )
        result = await self.db.execute(query)
        return int(result.scalar_one())

    async def sum_amount(
        self, user_id: UUID, category: str, start: datetime, end: datetime
    ) -> int:
        """Total amount for one user and category within [start, end]."""
        query = self._filtered(
            select(func.coalesce(func.sum(Transaction.amount), 0)),
            user_id,
            category,
            None,
            start,
            end,
        )
        result = await self.db.execute(query)
        return int(result.scalar_one())

    async def sum_by_category(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> dict[str, int]:
        """
        Spending breakdown by category within [start, end].
        Returns dict of {category: total_amount}.
        """
        query = self._filtered(
            select(Transaction.category, func.sum(Transaction.amount).label("total")),
            user_id,
            None,
            None,
            start,
            end,
        ).group_by(Transaction.category)
        result = await self.db.execute(query)
        return {row.category: int(row.total) for row in result}

    async def latest_for_payee(
        self, payee: str, user_id: UUID | None = None
    ) -> Transaction | None:
        """Most recent transaction for a payee, optionally limited to one user."""
        rows = await self.find(user_id=user_id, payee=payee, newest_first=True, limit=1)
        return rows[0] if rows else None
