# Pydantic schemas package
from modules.backend.schemas.base import (
    ErrorResponse,
    MessageResponse,
    RequestSchema,
    ResponseSchema,
)

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "RequestSchema",
    "ResponseSchema",
]
