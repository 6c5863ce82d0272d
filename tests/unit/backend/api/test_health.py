"""
Unit Tests for Health Check Endpoints.
"""

import json

import pytest
from unittest.mock import AsyncMock, MagicMock, patch


class TestHealthCheck:
    """Tests for the liveness health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_healthy(self):
        """Should return healthy status."""
        from modules.backend.api.health import health_check

        assert await health_check() == {"status": "healthy"}


class TestCheckDatabase:
    """Tests for the database health check function."""

    @pytest.mark.asyncio
    async def test_healthy_when_query_succeeds(self):
        """Should report healthy with latency."""
        from modules.backend.api.health import check_database

        session = AsyncMock()
        factory = MagicMock()
        factory.return_value.__aenter__ = AsyncMock(return_value=session)
        factory.return_value.__aexit__ = AsyncMock(return_value=False)

        with patch("modules.backend.api.health.get_session_factory", return_value=factory):
            result = await check_database()

        assert result["status"] == "healthy"
        assert "latency_ms" in result
        session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unhealthy_on_error(self):
        """Should report the error instead of raising."""
        from modules.backend.api.health import check_database

        with patch(
            "modules.backend.api.health.get_session_factory",
            side_effect=ConnectionRefusedError("refused"),
        ):
            result = await check_database()

        assert result == {"status": "unhealthy", "error": "refused"}


class TestReadinessCheck:
    """Tests for the readiness endpoint."""

    @pytest.mark.asyncio
    async def test_ready(self):
        """Should return 200 when the database is healthy."""
        from modules.backend.api.health import readiness_check

        with patch(
            "modules.backend.api.health.check_database",
            AsyncMock(return_value={"status": "healthy", "latency_ms": 1}),
        ):
            response = await readiness_check()

        assert response.status_code == 200
        assert json.loads(response.body)["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_not_ready(self):
        """Should return 503 when the database is unhealthy."""
        from modules.backend.api.health import readiness_check

        with patch(
            "modules.backend.api.health.check_database",
            AsyncMock(return_value={"status": "unhealthy", "error": "down"}),
        ):
            response = await readiness_check()

        body = json.loads(response.body)
        assert response.status_code == 503
        assert body["checks"]["database"]["error"] == "down"
        assert body["timestamp"].endswith("Z")
