"""Tests for health check endpoints."""

from httpx import AsyncClient


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    async def test_health_returns_200(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200

    async def test_health_returns_correct_structure(self, client: AsyncClient) -> None:
        data = (await client.get("/health")).json()

        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert "timestamp" in data
        assert "environment" in data

    async def test_health_does_not_require_auth(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert "x-request-id" in response.headers
        assert response.headers["x-content-type-options"] == "nosniff"
