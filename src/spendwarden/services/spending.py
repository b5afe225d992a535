"""Spend aggregation over monthly windows."""

from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from spendwarden.budgeting.periods import month_to_date, resolve_month
from spendwarden.config import settings
from spendwarden.core.exceptions import ValidationError
from spendwarden.repositories.base import translate_store_errors
from spendwarden.repositories.category_limit import CategoryLimitRepository
from spendwarden.repositories.transaction import TransactionRepository
from spendwarden.schemas.analytics import CategorySpend, MonthlySummary
from spendwarden.schemas.common import MoneyMeta


class SpendingService:
    """Read-only spend totals for a user."""

    def __init__(self, db: AsyncSession, tz_name: str | None = None):
        self.db = db
        self.tz_name = tz_name or settings.timezone
        self.txn_repo = TransactionRepository(db)
        self.limit_repo = CategoryLimitRepository(db)

    async def spend_so_far(
        self, user_id: UUID, category: str, window_start: datetime, window_end: datetime
    ) -> int:
        """Sum of the user's transaction amounts in ``category`` within the window.

        Both ends are inclusive. Returns 0 when nothing matches.
        """
        with translate_store_errors("spend_so_far"):
            return await self.txn_repo.sum_amount(user_id, category, window_start, window_end)

    async def month_to_date_spend(
        self, user_id: UUID, category: str, now: datetime | None = None
    ) -> int:
        window = month_to_date(now, self.tz_name)
        return await self.spend_so_far(user_id, category, window.start, window.end)

    async def monthly_summary(
        self,
        user_id: UUID,
        month: int | None = None,
        year: int | None = None,
        now: datetime | None = None,
    ) -> MonthlySummary:
        """Spend per category for a full calendar month, alongside each cap.

        Lists every category with a cap or with spending in the month.
        """
        try:
            window = resolve_month(month, year, now=now, tz_name=self.tz_name)
        except ValueError as exc:
            raise ValidationError(details={"reason": str(exc)}) from exc

        with translate_store_errors("monthly_summary"):
            spent = await self.txn_repo.sum_by_category(user_id, window.start, window.end)
            limits = {
                limit.category: limit.cap
                for limit in await self.limit_repo.list_by_user(user_id)
            }

        per_category = []
        for category in sorted(set(spent) | set(limits)):
            cap = limits.get(category)
            category_spent = spent.get(category, 0)
            per_category.append(
                CategorySpend(
                    category=category,
                    cap=cap,
                    spent=category_spent,
                    remaining=None if cap is None else cap - category_spent,
                )
            )

        return MonthlySummary(
            year=window.year,
            month=window.month,
            window_start=window.start,
            window_end=window.end,
            total=sum(spent.values()),
            per_category=per_category,
            money=MoneyMeta(currency=settings.currency, minor_unit=settings.currency_minor_unit),
        )
