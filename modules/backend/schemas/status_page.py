"""
Status Page Schemas.
"""

from pydantic import Field

from modules.backend.schemas.base import RequestSchema, ResponseSchema
from modules.backend.schemas.monitor import MonitorResponse


class StatusPageCreate(RequestSchema):
    """Schema for POST /status-pages. slug and title are required."""

    slug: str | None = Field(
        default=None,
        max_length=255,
        pattern=r"^[A-Za-z0-9-]+$",
        examples=["public-status"],
    )
    title: str | None = Field(default=None, max_length=255, examples=["Public Status"])
    description: str | None = None
    published: bool = True
    monitor_ids: list[int] = Field(
        default_factory=list,
        description="Monitors (owned by the caller) to show on the page",
    )


class StatusPageResponse(ResponseSchema):
    id: int
    user_id: int
    slug: str
    title: str
    description: str | None
    published: bool


class StatusPageDetailResponse(StatusPageResponse):
    """Single status page including its monitors."""

    monitors: list[MonitorResponse]
