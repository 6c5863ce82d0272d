"""
Integration tests for authentication and the error envelope.
"""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient


class TestAuthentication:
    @pytest.mark.parametrize("path", [
        "/api/v2/monitors",
        "/api/v2/status-pages",
        "/api/v2/tags",
        "/api/v2/maintenance",
        "/api/v2/info",
    ])
    async def test_missing_credentials(self, client: AsyncClient, path: str):
        response = await client.get(path)

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}
        assert response.headers["www-authenticate"].startswith("Basic")

    async def test_wrong_password(self, client: AsyncClient):
        response = await client.get("/api/v2/monitors", auth=("alice", "nope"))

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    async def test_unknown_user(self, client: AsyncClient):
        response = await client.get("/api/v2/monitors", auth=("mallory", "x"))

        assert response.status_code == 401

    async def test_inactive_user(self, client: AsyncClient):
        response = await client.get("/api/v2/monitors", auth=("carol", "carol-password"))

        assert response.status_code == 401

    async def test_malformed_header(self, client: AsyncClient):
        response = await client.get("/api/v2/monitors", headers={"Authorization": "Basic !!!"})

        assert response.status_code == 401
        assert "error" in response.json()

    async def test_unauthenticated_write_has_no_effect(self, client: AsyncClient, alice_auth, scheduler):
        response = await client.post(
            "/api/v2/monitors",
            json={"name": "x", "type": "http", "url": "https://example.com"},
        )

        assert response.status_code == 401
        assert scheduler.events == []
        assert (await client.get("/api/v2/monitors", auth=alice_auth)).json() == []


class TestErrorEnvelope:
    async def test_malformed_json(self, client: AsyncClient, alice_auth):
        response = await client.post(
            "/api/v2/monitors",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
            auth=alice_auth,
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid request")

    async def test_unknown_route(self, client: AsyncClient, alice_auth):
        response = await client.get("/api/v2/nothing-here", auth=alice_auth)

        assert response.status_code == 404
        assert set(response.json()) == {"error"}

    async def test_unexpected_exception_is_generic_500(self, client: AsyncClient, alice_auth):
        with patch(
            "modules.backend.services.tag.TagService.list_tags",
            new=AsyncMock(side_effect=RuntimeError("secret internals")),
        ):
            response = await client.get("/api/v2/tags", auth=alice_auth)

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    async def test_request_id_header(self, client: AsyncClient, alice_auth):
        response = await client.get(
            "/api/v2/tags", auth=alice_auth, headers={"X-Request-ID": "req-123"},
        )

        assert response.headers["X-Request-ID"] == "req-123"
