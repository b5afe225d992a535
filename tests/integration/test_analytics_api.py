"""Integration tests for monthly analytics."""
from datetime import datetime, timezone

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from spendwarden.core.exceptions import ValidationError
from spendwarden.models.transaction import Transaction
from spendwarden.models.user import User
from spendwarden.repositories.transaction import TransactionRepository
from spendwarden.services.limits import LimitService
from spendwarden.services.spending import SpendingService


async def _record(db, user, category, amount, occurred_at):
    await TransactionRepository(db).create(
        Transaction(
            user_id=user.id,
            category=category,
            amount=amount,
            payee="Swiggy",
            occurred_at=occurred_at,
        )
    )


class TestMonthlySummary:
    @pytest.mark.asyncio
    async def test_summary_lists_capped_and_spent_categories(
        self, db_session: AsyncSession, test_user: User
    ):
        await LimitService(db_session).set_limits(
            test_user.id,
            [{"category": "Food", "cap": 500}, {"category": "Bills", "cap": 1000}],
        )
        await _record(db_session, test_user, "Food", 550, datetime(2026, 10, 3, tzinfo=timezone.utc))
        await _record(db_session, test_user, "Travel", 70, datetime(2026, 10, 31, 23, 59, tzinfo=timezone.utc))
        await _record(db_session, test_user, "Food", 999, datetime(2026, 11, 1, tzinfo=timezone.utc))

        summary = await SpendingService(db_session, tz_name="UTC").monthly_summary(
            test_user.id, month=10, year=2026
        )

        rows = {row.category: row for row in summary.per_category}
        assert list(rows) == ["Bills", "Food", "Travel"]
        assert (rows["Food"].cap, rows["Food"].spent, rows["Food"].remaining) == (500, 550, -50)
        assert (rows["Bills"].spent, rows["Bills"].remaining) == (0, 1000)
        assert rows["Travel"].cap is None and rows["Travel"].remaining is None
        assert summary.total == 620

    @pytest.mark.asyncio
    async def test_defaults_to_current_month(self, db_session: AsyncSession, test_user: User):
        now = datetime(2026, 10, 19, tzinfo=timezone.utc)

        summary = await SpendingService(db_session, tz_name="UTC").monthly_summary(
            test_user.id, now=now
        )

        assert (summary.year, summary.month) == (2026, 10)
        assert summary.per_category == []
        assert summary.total == 0

    @pytest.mark.asyncio
    async def test_invalid_month_rejected(self, db_session: AsyncSession, test_user: User):
        with pytest.raises(ValidationError):
            await SpendingService(db_session).monthly_summary(test_user.id, month=13, year=2026)


class TestAnalyticsAPI:
    @pytest.mark.asyncio
    async def test_analytics_endpoint(
        self, client: AsyncClient, db_session: AsyncSession, test_user: User, auth_headers: dict
    ):
        await _record(db_session, test_user, "Food", 250, datetime(2026, 2, 14, tzinfo=timezone.utc))

        response = await client.get(
            "/api/v1/analytics", params={"month": 2, "year": 2026}, headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert (data["year"], data["month"]) == (2026, 2)
        assert data["total"] == 250
        assert data["per_category"] == [
            {"category": "Food", "cap": None, "spent": 250, "remaining": None}
        ]
        assert data["money"]["currency"] == "INR"

    @pytest.mark.asyncio
    async def test_other_users_spend_excluded(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        other_user: User,
        auth_headers: dict,
    ):
        await _record(db_session, other_user, "Food", 250, datetime(2026, 2, 14, tzinfo=timezone.utc))

        response = await client.get(
            "/api/v1/analytics", params={"month": 2, "year": 2026}, headers=auth_headers
        )

        assert response.json()["total"] == 0

    @pytest.mark.asyncio
    async def test_month_out_of_range(self, client: AsyncClient, auth_headers: dict):
        response = await client.get(
            "/api/v1/analytics", params={"month": 13}, headers=auth_headers
        )

        assert response.status_code == 400
