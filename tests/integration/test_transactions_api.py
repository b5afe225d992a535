"""Integration tests for transaction admission and listing endpoints."""
import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from spendwarden.models.user import User
from spendwarden.repositories.transaction import TransactionRepository


def _payload(amount: int, category: str = "Food", bypass: bool = False) -> dict:
    return {
        "category": category,
        "amount": amount,
        "payee": "Swiggy",
        "redirect_url": "/home",
        "bypass": bypass,
    }


@pytest.fixture
async def food_cap(client: AsyncClient, auth_headers: dict):
    response = await client.put(
        "/api/v1/limits",
        json={"limits": [{"category": "Food", "cap": 500}]},
        headers=auth_headers,
    )
    assert response.status_code == 200


class TestRecordTransaction:
    @pytest.mark.asyncio
    async def test_admit_within_cap(self, client: AsyncClient, auth_headers: dict, food_cap):
        response = await client.post("/api/v1/transactions", json=_payload(200), headers=auth_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["outcome"] == "admit"
        assert data["message"] == "Transaction successful"
        assert data["details"]["redirect"] == "/home"
        assert data["details"]["remaining_after"] == 300
        assert data["details"]["transaction"]["amount"] == 200
        assert data["details"]["transaction"]["exceeded_limit"] is False
        assert data["money"] == {"currency": "INR", "minor_unit": 2}

    @pytest.mark.asyncio
    async def test_reject_over_cap(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        test_user: User,
        auth_headers: dict,
        food_cap,
    ):
        await client.post("/api/v1/transactions", json=_payload(200), headers=auth_headers)

        response = await client.post("/api/v1/transactions", json=_payload(350), headers=auth_headers)

        assert response.status_code == 409
        data = response.json()
        assert data["error_code"] == "LIM_001"
        assert data["outcome"] == "reject_over_limit"
        assert data["message"] == "Limit exceeded! You have INR 3.00 left for Food this month."
        assert data["details"]["remaining"] == 300
        assert data["details"]["exceed_amount"] == 50
        assert await TransactionRepository(db_session).count(user_id=test_user.id) == 1

    @pytest.mark.asyncio
    async def test_bypass_records_flagged_transaction(
        self, client: AsyncClient, auth_headers: dict, food_cap
    ):
        await client.post("/api/v1/transactions", json=_payload(200), headers=auth_headers)

        response = await client.post(
            "/api/v1/transactions", json=_payload(350, bypass=True), headers=auth_headers
        )

        assert response.status_code == 201
        data = response.json()
        assert data["outcome"] == "admit_override"
        assert data["details"]["exceed_amount"] == 50
        assert data["details"]["remaining"] == 300
        assert data["details"]["remaining_after"] == -50
        assert data["details"]["transaction"]["exceeded_limit"] is True

    @pytest.mark.asyncio
    async def test_no_cap_admits(self, client: AsyncClient, auth_headers: dict):
        response = await client.post(
            "/api/v1/transactions", json=_payload(10**7, category="Travel"), headers=auth_headers
        )

        assert response.status_code == 201
        assert response.json()["details"]["cap"] is None

    @pytest.mark.asyncio
    async def test_missing_field_is_bad_request(self, client: AsyncClient, auth_headers: dict):
        payload = _payload(200)
        del payload["payee"]

        response = await client.post("/api/v1/transactions", json=payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error_code"] == "VAL_001"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, -5, 1.5])
    async def test_non_positive_or_fractional_amount(
        self, client: AsyncClient, auth_headers: dict, amount
    ):
        response = await client.post(
            "/api/v1/transactions", json=_payload(amount), headers=auth_headers
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_blank_category_is_bad_request(
        self, client: AsyncClient, db_session: AsyncSession, test_user: User, auth_headers: dict
    ):
        response = await client.post(
            "/api/v1/transactions", json=_payload(100, category="   "), headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "VAL_002"
        assert await TransactionRepository(db_session).count(user_id=test_user.id) == 0

    @pytest.mark.asyncio
    async def test_requires_auth(self, client: AsyncClient):
        response = await client.post("/api/v1/transactions", json=_payload(100))

        assert response.status_code in (401, 403)

    @pytest.mark.asyncio
    async def test_invalid_token(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/transactions",
            json=_payload(100),
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401


class TestListTransactions:
    @pytest.mark.asyncio
    async def test_list_own_transactions(
        self, client: AsyncClient, auth_headers: dict, other_auth_headers: dict
    ):
        for amount in (100, 200):
            await client.post("/api/v1/transactions", json=_payload(amount), headers=auth_headers)
        await client.post(
            "/api/v1/transactions", json=_payload(900, category="Travel"), headers=auth_headers
        )
        await client.post("/api/v1/transactions", json=_payload(50), headers=other_auth_headers)

        response = await client.get("/api/v1/transactions", headers=auth_headers)
        filtered = await client.get(
            "/api/v1/transactions", params={"category": "Food"}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["pagination"]["total"] == 3
        assert sorted(t["amount"] for t in filtered.json()["transactions"]) == [100, 200]

    @pytest.mark.asyncio
    async def test_pagination(self, client: AsyncClient, auth_headers: dict):
        for amount in (1, 2, 3):
            await client.post("/api/v1/transactions", json=_payload(amount), headers=auth_headers)

        response = await client.get(
            "/api/v1/transactions", params={"page": 2, "limit": 2}, headers=auth_headers
        )

        data = response.json()
        assert len(data["transactions"]) == 1
        assert data["pagination"] == {"page": 2, "limit": 2, "total": 3, "total_pages": 2}
