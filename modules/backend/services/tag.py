"""
Tag Service.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.models.tag import Tag
from modules.backend.models.user import User
from modules.backend.repositories.tag import TagRepository
from modules.backend.schemas.tag import TagCreate
from modules.backend.services.base import BaseService


class TagService(BaseService):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = TagRepository(session)

    async def list_tags(self, user: User) -> list[Tag]:
        return await self.repo.list_owned(user.id)

    async def create_tag(self, user: User, data: TagCreate) -> Tag:
        """
        Create a tag for the user.

        Raises:
            ValidationError: If name or color is missing
        """
        self._validate_required(data.model_dump(), ["name", "color"])
        self._log_operation("Creating tag", name=data.name)

        return await self._execute_db_operation(
            "create_tag",
            self.repo.create(user_id=user.id, name=data.name, color=data.color),
        )
