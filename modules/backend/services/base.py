"""
Base Service.

Shared plumbing for the resource services: the session, a module logger,
required/empty field checks that produce the API's field-list messages,
and translation of SQLAlchemy failures into application errors.

Usage:
    class TagService(BaseService):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(session)
            self.repo = TagRepository(session)

        async def create_tag(self, user: User, data: TagCreate) -> Tag:
            self._validate_required(data.model_dump(), ["name", "color"])
            return await self._execute_db_operation(
                "create_tag",
                self.repo.create(user_id=user.id, name=data.name, color=data.color),
            )
"""

from collections.abc import Awaitable, Iterable, Mapping
from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.exceptions import (
    ConflictError,
    DatabaseError,
    ValidationError,
)
from modules.backend.core.logging import get_logger

T = TypeVar("T")


def is_blank(value: Any) -> bool:
    """None, or a string with nothing but whitespace."""
    return value is None or (isinstance(value, str) and not value.strip())


class BaseService:
    """
    Base class for the resource services.

    Subclasses call ``super().__init__(session)`` and build their
    repositories on ``self.session``.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def _execute_db_operation(
        self,
        operation: str,
        coro: Awaitable[T],
        conflict_message: str = "Resource already exists",
    ) -> T:
        """
        Await a repository call, mapping storage errors.

        A unique-constraint violation becomes ConflictError(conflict_message)
        so a race between two creates still answers 409. Anything else from
        SQLAlchemy becomes DatabaseError, which the handlers report as 503.
        """
        try:
            return await coro
        except IntegrityError as e:
            self._logger.warning(
                "Integrity error",
                extra={"operation": operation, "error": str(e)},
            )
            text = str(e).lower()
            if "unique" in text or "duplicate" in text:
                raise ConflictError(conflict_message) from e
            raise DatabaseError(f"Database constraint violation: {operation}") from e
        except SQLAlchemyError as e:
            self._logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database operation failed: {operation}") from e

    def _validate_required(self, fields: Mapping[str, Any], field_names: list[str]) -> None:
        """
        Reject a create whose required fields are missing or blank.

        The message lists every required field of the resource, e.g.
        ``Missing required fields: name, type, url``; ``details`` lists
        only the ones that were actually missing.
        """
        missing = [name for name in field_names if is_blank(fields.get(name))]
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(field_names)}",
                details={"missing_fields": missing},
            )

    def _reject_cleared(self, changes: Mapping[str, Any], protected: Iterable[str]) -> None:
        """Reject an update that would blank out any of the protected fields."""
        protected = set(protected)
        cleared = sorted(
            name for name, value in changes.items() if name in protected and is_blank(value)
        )
        if cleared:
            raise ValidationError(
                f"Fields cannot be empty: {', '.join(cleared)}",
                details={"empty_fields": cleared},
            )

    async def _commit(self, operation: str) -> None:
        """
        Commit the request session now instead of when the request ends.

        Used inside a per-monitor lock so the next holder of the lock
        reads the committed state.
        """
        await self._execute_db_operation(operation, self.session.commit())

    def _log_operation(self, operation: str, **context: Any) -> None:
        self._logger.info(operation, extra={"service": self.__class__.__name__, **context})

    def _log_debug(self, message: str, **context: Any) -> None:
        self._logger.debug(message, extra={"service": self.__class__.__name__, **context})
