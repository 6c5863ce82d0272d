"""
Status Page Repository.
"""

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from modules.backend.models.monitor import Monitor
from modules.backend.models.status_page import StatusPage
from modules.backend.repositories.base import BaseRepository


class StatusPageRepository(BaseRepository[StatusPage]):
    """
    Repository for StatusPage model.

    Slugs are unique across all users, so ``slug_exists`` deliberately
    ignores ownership while ``get_owned_by_slug`` does not.
    """

    model = StatusPage
    default_order = (StatusPage.title.asc(),)

    async def slug_exists(self, slug: str) -> bool:
        """Check whether any user already has a page with this slug."""
        result = await self.session.execute(
            select(StatusPage.id).where(StatusPage.slug == slug)
        )
        return result.scalar_one_or_none() is not None

    async def get_owned_by_slug(self, slug: str, user_id: int) -> StatusPage | None:
        """Get the user's page by slug with its monitors loaded."""
        result = await self.session.execute(
            select(StatusPage)
            .where(StatusPage.slug == slug, StatusPage.user_id == user_id)
            .options(selectinload(StatusPage.monitors))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def create_with_monitors(self, monitors: list[Monitor], **kwargs) -> StatusPage:
        """Create a page and link it to the given monitors."""
        page = StatusPage(**kwargs)
        page.monitors = list(monitors)
        self.session.add(page)
        await self.session.flush()
        return page
