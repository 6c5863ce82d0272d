"""
CLI Test Fixtures.

Commands run through Typer's CliRunner against an httpx MockTransport,
so every HTTP call the CLI makes is recorded and answered in-process.
"""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from modules.cli.client import APIClient

Responder = Callable[[httpx.Request], httpx.Response]


class FakeApi:
    """
    Canned responses keyed by (method, path) plus a log of every request.

    Usage:
        def test_list(fake_api):
            fake_api.route("GET", "/api/v2/monitors", json=[])
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], list[Responder]] = {}

    def route(self, method: str, path: str, status: int = 200, json: Any = None) -> None:
        """Queue a response. The last queued response repeats."""
        self._routes.setdefault((method, path), []).append(
            lambda request: httpx.Response(status, json=json)
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responders = self._routes.get((request.method, request.url.path))
        if not responders:
            return httpx.Response(404, json={"error": "Not Found"})
        responder = responders.pop(0) if len(responders) > 1 else responders[0]
        return responder(request)

    def body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture(autouse=True)
def cli_config_path(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.uptime-kuma-cli.json."""
    path = tmp_path / "uptime-kuma-cli.json"
    monkeypatch.setenv("UPTIME_KUMA_CLI_CONFIG", str(path))
    return path


@pytest.fixture
def fake_api(monkeypatch) -> FakeApi:
    api = FakeApi()

    def _client(config=None) -> APIClient:
        return APIClient(
            "http://kuma.test/api/v2",
            "admin",
            "secret",
            transport=httpx.MockTransport(api.handler),
        )

    monkeypatch.setattr("modules.cli.client.get_api_client", _client)
    monkeypatch.setattr("modules.cli.commands.monitors.get_api_client", _client)
    return api
