"""Integration tests for the guilt message lookup."""
import pytest
from httpx import AsyncClient

from spendwarden.budgeting.messages import GUILT_MESSAGES


class TestGuiltMessageAPI:
    @pytest.mark.asyncio
    async def test_known_category(self, client: AsyncClient, auth_headers: dict):
        response = await client.get(
            "/api/v1/messages/guilt", params={"category": "Shopping"}, headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["category"] == "Shopping"
        assert data["message"] in GUILT_MESSAGES["Shopping"]

    @pytest.mark.asyncio
    async def test_unlisted_category_gets_default(self, client: AsyncClient, auth_headers: dict):
        response = await client.get(
            "/api/v1/messages/guilt", params={"category": "Travel"}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["message"] in GUILT_MESSAGES["default"]

    @pytest.mark.asyncio
    async def test_category_is_optional(self, client: AsyncClient, auth_headers: dict):
        response = await client.get("/api/v1/messages/guilt", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["category"] is None
        assert response.json()["message"] in GUILT_MESSAGES["default"]

    @pytest.mark.asyncio
    async def test_requires_auth(self, client: AsyncClient):
        response = await client.get("/api/v1/messages/guilt", params={"category": "Food"})

        assert response.status_code in (401, 403)
