"""
Application Exceptions.

Raised by services and dependencies, turned into ``{"error": message}``
responses by exception_handlers.py. The ``code`` is only logged.

    NotFoundError        404  missing, or owned by someone else
    ValidationError      400  bad or missing fields
    AuthenticationError  401  missing/invalid Basic credentials
    ConflictError        409  duplicate status page slug
    DatabaseError        503  storage unavailable
"""


class ApplicationError(Exception):
    """Base for errors whose message is safe to show to the API caller."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(message)


class NotFoundError(ApplicationError):
    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class ValidationError(ApplicationError):
    """``details`` names the offending fields for the logs."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class AuthenticationError(ApplicationError):
    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, code="AUTH_UNAUTHORIZED")


class ConflictError(ApplicationError):
    def __init__(self, message: str = "Resource conflict") -> None:
        super().__init__(message, code="RES_CONFLICT")


class DatabaseError(ApplicationError):
    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message, code="SYS_DATABASE_ERROR")
