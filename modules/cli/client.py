"""
HTTP Client for CLI.

Async client for the ``/api/v2`` REST API. Every request carries the
configured Basic credentials and ``X-Frontend-ID: cli`` for log routing.
Non-2xx responses and transport failures surface as ApiError carrying
the message to show the user.
"""

from typing import Any

import httpx
import typer

from modules.backend.core.logging import get_logger, log_with_source
from modules.cli.config import CliConfig, CliConfigError, load_config

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    """A request that did not produce a 2xx response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _error_message(response: httpx.Response) -> str:
    """Prefer the server's ``{"error": ...}`` text, else the status line."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"Request failed with status code {response.status_code}"


class APIClient:
    """
    HTTP client for the monitoring API.

    Usage:
        client = APIClient("http://localhost:3001/api/v2", "admin", "secret")
        monitors = await client.get("/monitors")
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: API root including the ``/api/v2`` prefix
            username: Basic auth user
            password: Basic auth password
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._auth = httpx.BasicAuth(username, password)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                auth=self._auth,
                headers={"X-Frontend-ID": "cli"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> Any:
        """
        Make an HTTP request and return the decoded JSON body.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path below ``/api/v2`` (e.g., /monitors)
            **kwargs: Additional arguments for httpx

        Raises:
            ApiError: On a non-2xx response or transport failure
        """
        client = await self._get_client()

        log_with_source(logger, "cli", "debug", "API request", method=method, path=path)

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "cli",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise ApiError(str(e) or type(e).__name__) from e

        log_with_source(
            logger,
            "cli",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if not response.is_success:
            raise ApiError(_error_message(response), response.status_code)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            log_with_source(
                logger, "cli", "error", "Invalid JSON in response",
                method=method, path=path, status_code=response.status_code,
            )
            raise ApiError("Invalid JSON in response", response.status_code) from e

    async def get(self, path: str, **kwargs: Any) -> Any:
        """Make a GET request."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        """Make a POST request."""
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> Any:
        """Make a PUT request."""
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        """Make a DELETE request."""
        return await self.request("DELETE", path, **kwargs)


def get_api_client(config: CliConfig | None = None) -> APIClient:
    """
    Build a client from the saved CLI config.

    An unreadable config file is reported on stderr and the defaults are
    used, the same as when no file exists.
    """
    if config is None:
        try:
            config = load_config()
        except CliConfigError as e:
            typer.echo(str(e), err=True)
            config = CliConfig()
    return APIClient(
        config.api_base_url,
        config.auth.username,
        config.auth.password,
    )


async def call_api(method: str, path: str, **kwargs: Any) -> Any:
    """One request with a fresh client from the saved config."""
    client = get_api_client()
    try:
        return await client.request(method, path, **kwargs)
    finally:
        await client.close()
