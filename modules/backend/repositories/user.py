"""
User Repository.

Read-only access to the host application's user accounts.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.models.user import User


class UserRepository:
    """Lookups used to resolve request credentials."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_active_by_username(self, username: str) -> User | None:
        """Return the active user with this username, if any."""
        result = await self.session.execute(
            select(User).where(
                User.username == username,
                User.active == True,  # noqa: E712
            )
        )
        return result.scalar_one_or_none()
