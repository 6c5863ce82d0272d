"""
Tag Schemas.
"""

from pydantic import Field

from modules.backend.schemas.base import RequestSchema, ResponseSchema


class TagCreate(RequestSchema):
    """Schema for POST /tags. Both fields are required."""

    name: str | None = Field(default=None, max_length=255, examples=["production"])
    color: str | None = Field(default=None, max_length=255, examples=["#FF5733"])


class TagResponse(ResponseSchema):
    id: int
    user_id: int
    name: str
    color: str
