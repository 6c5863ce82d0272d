"""
Maintenance Schemas.
"""

from datetime import datetime

from pydantic import Field

from modules.backend.schemas.base import RequestSchema, ResponseSchema


class MaintenanceCreate(RequestSchema):
    """Schema for POST /maintenance. title, start_date and end_date are required."""

    title: str | None = Field(default=None, max_length=150, examples=["Database upgrade"])
    description: str | None = None
    start_date: datetime | None = Field(default=None, examples=["2026-01-10T22:00:00Z"])
    end_date: datetime | None = Field(default=None, examples=["2026-01-11T02:00:00Z"])
    active: bool = True


class MaintenanceResponse(ResponseSchema):
    id: int
    user_id: int
    title: str
    description: str | None
    start_date: datetime
    end_date: datetime
    active: bool
    created_date: datetime
