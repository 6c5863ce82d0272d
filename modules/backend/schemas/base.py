"""
Base Schemas.

Shared response shapes. Resources are returned as bare JSON objects or
arrays; failures are always ``{"error": "<message>"}``.
"""

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str


class MessageResponse(BaseModel):
    """Plain acknowledgement for operations without a resource body."""

    message: str


class RequestSchema(BaseModel):
    """
    Base for request bodies.

    Unknown keys are rejected so clients can never smuggle ``id`` or
    ``user_id`` (or a typo) into a write. Fields accept either their
    JSON alias or the Python name.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ResponseSchema(BaseModel):
    """Base for response bodies built from ORM instances."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
