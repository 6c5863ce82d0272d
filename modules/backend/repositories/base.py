"""
Base Repository.

Base class for repositories of user-owned records. Every lookup is scoped
by ``user_id``: a record owned by someone else is indistinguishable from
one that does not exist.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.exceptions import NotFoundError
from modules.backend.core.logging import get_logger
from modules.backend.models.base import Base

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with owner-scoped CRUD operations.

    Subclasses set the model class and, optionally, the default ordering:

        class TagRepository(BaseRepository[Tag]):
            model = Tag
            default_order = (Tag.name.asc(),)
    """

    model: type[ModelType]
    default_order: tuple[Any, ...] = ()

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @property
    def _label(self) -> str:
        return self.model.__name__

    async def get_owned_or_none(self, id: int, user_id: int) -> ModelType | None:
        """Get a record by ID if it belongs to the user."""
        result = await self.session.execute(
            select(self.model).where(
                self.model.id == id,
                self.model.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_owned(self, id: int, user_id: int) -> ModelType:
        """
        Get a record by ID if it belongs to the user.

        Raises:
            NotFoundError: If the record does not exist or has another owner
        """
        instance = await self.get_owned_or_none(id, user_id)
        if instance is None:
            raise NotFoundError(f"{self._label} not found")
        return instance

    async def list_owned(self, user_id: int) -> list[ModelType]:
        """Get all records of a user in the repository's default order."""
        result = await self.session.execute(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(*self.default_order)
        )
        return list(result.scalars().all())

    async def count_owned(self, user_id: int) -> int:
        """Count the records of a user."""
        result = await self.session.execute(
            select(func.count())
            .select_from(self.model)
            .where(self.model.user_id == user_id)
        )
        return result.scalar_one()

    async def create(self, **kwargs: Any) -> ModelType:
        """Create a new record."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def update(self, instance: ModelType, **kwargs: Any) -> ModelType:
        """Apply already-validated field values to a loaded record."""
        for key, value in kwargs.items():
            setattr(instance, key, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, instance: ModelType) -> None:
        """Delete a loaded record."""
        await self.session.delete(instance)
        await self.session.flush()
