"""
System Schemas.
"""

from pydantic import BaseModel, ConfigDict, Field


class InfoResponse(BaseModel):
    """Response for GET /info."""

    version: str
    monitor_count: int = Field(alias="monitorCount")
    server_time: str = Field(alias="serverTime", description="ISO 8601 UTC")

    model_config = ConfigDict(populate_by_name=True)
