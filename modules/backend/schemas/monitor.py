"""
Monitor Schemas.

Pydantic schemas for monitor and heartbeat request/response validation.
JSON field names follow the web application's wire format (camelCase for
``retryInterval``, ``authMethod``, ``ignoreTls``, ``upsideDown``).
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import Field

from modules.backend.schemas.base import RequestSchema, ResponseSchema


class MonitorType(str, Enum):
    """Supported check types."""

    HTTP = "http"
    KEYWORD = "keyword"
    JSON_QUERY = "json-query"
    PING = "ping"
    TCP = "tcp"
    DNS = "dns"
    PUSH = "push"


class MonitorFields(RequestSchema):
    """
    Allow-list of client-writable monitor fields.

    Everything is optional here; required fields and defaults are
    enforced by the service so that create and update share one list.
    """

    name: str | None = Field(default=None, max_length=150, examples=["Homepage"])
    description: str | None = None
    type: MonitorType | None = Field(default=None, examples=["http"])
    url: str | None = Field(default=None, examples=["https://example.com"])
    hostname: str | None = Field(default=None, max_length=255)
    port: int | None = Field(default=None, ge=0, le=65535)
    method: str | None = Field(default=None, max_length=10, examples=["GET"])
    body: str | None = None
    headers: dict[str, Any] | None = None
    keyword: str | None = Field(default=None, max_length=255)
    interval: int | None = Field(default=None, ge=1, description="Check interval in seconds")
    retry_interval: int | None = Field(default=None, ge=1, alias="retryInterval")
    maxretries: int | None = Field(default=None, ge=0)
    timeout: int | None = Field(default=None, ge=0)
    weight: int | None = None
    active: bool | None = None
    auth_method: str | None = Field(default=None, alias="authMethod")
    basic_auth_user: str | None = None
    basic_auth_pass: str | None = None
    ignore_tls: bool | None = Field(default=None, alias="ignoreTls")
    upside_down: bool | None = Field(default=None, alias="upsideDown")
    maxredirects: int | None = Field(default=None, ge=0)


class MonitorCreate(MonitorFields):
    """Schema for POST /monitors."""


class MonitorUpdate(MonitorFields):
    """Schema for PUT /monitors/{id}. Only supplied fields are changed."""


class HeartbeatResponse(ResponseSchema):
    """One recorded check result."""

    id: int
    monitor_id: int
    status: int = Field(description="0=DOWN, 1=UP, 2=PENDING, 3=MAINTENANCE")
    msg: str | None
    ping: int | None = Field(description="Response time in milliseconds")
    time: datetime
    important: bool
    duration: int


class MonitorResponse(ResponseSchema):
    """
    Monitor as returned by the API.

    Apart from ``id``, ``user_id`` and ``latestHeartbeat`` every field is
    accepted back by MonitorCreate, so exported monitors re-import as-is.
    """

    id: int
    user_id: int
    name: str
    description: str | None
    type: str
    url: str
    hostname: str | None
    port: int | None
    method: str
    body: str | None
    headers: dict[str, Any] | None
    keyword: str | None
    interval: int
    retry_interval: int = Field(alias="retryInterval")
    maxretries: int
    timeout: int | None
    weight: int
    active: bool
    auth_method: str | None = Field(alias="authMethod")
    basic_auth_user: str | None
    basic_auth_pass: str | None
    ignore_tls: bool = Field(alias="ignoreTls")
    upside_down: bool = Field(alias="upsideDown")
    maxredirects: int
    latest_heartbeat: HeartbeatResponse | None = Field(default=None, alias="latestHeartbeat")


class MonitorActiveResponse(ResponseSchema):
    """Result of pause/resume."""

    message: str
    active: bool
