"""
Status Page Service.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.exceptions import ConflictError, NotFoundError, ValidationError
from modules.backend.models.status_page import StatusPage
from modules.backend.models.user import User
from modules.backend.repositories.monitor import MonitorRepository
from modules.backend.repositories.status_page import StatusPageRepository
from modules.backend.schemas.status_page import StatusPageCreate
from modules.backend.services.base import BaseService

SLUG_TAKEN = "Slug already exists"


class StatusPageService(BaseService):
    """
    Service for status pages.

    Reads are scoped to the caller; slug uniqueness is checked against
    every user's pages.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = StatusPageRepository(session)
        self.monitors = MonitorRepository(session)

    async def list_status_pages(self, user: User) -> list[StatusPage]:
        """List the user's status pages by title."""
        return await self.repo.list_owned(user.id)

    async def get_status_page(self, user: User, slug: str) -> StatusPage:
        """
        Get one of the user's status pages with its monitors.

        Raises:
            NotFoundError: If no page of the user has this slug
        """
        page = await self.repo.get_owned_by_slug(slug, user.id)
        if page is None:
            raise NotFoundError("Status page not found")
        return page

    async def create_status_page(self, user: User, data: StatusPageCreate) -> StatusPage:
        """
        Create a status page, optionally linked to some of the user's monitors.

        Raises:
            ValidationError: If slug or title is missing, or a monitor ID is
                not one of the user's monitors
            ConflictError: If the slug is already used by any user
        """
        self._validate_required(data.model_dump(), ["slug", "title"])

        if await self.repo.slug_exists(data.slug):
            raise ConflictError(SLUG_TAKEN)

        monitor_ids = list(dict.fromkeys(data.monitor_ids))
        monitors = await self.monitors.list_by_ids(monitor_ids, user.id)
        unknown = sorted(set(monitor_ids) - {m.id for m in monitors})
        if unknown:
            raise ValidationError(
                f"Unknown monitor IDs: {', '.join(str(i) for i in unknown)}",
                details={"unknown_monitor_ids": unknown},
            )

        self._log_operation("Creating status page", slug=data.slug, monitors=len(monitors))

        return await self._execute_db_operation(
            "create_status_page",
            self.repo.create_with_monitors(
                monitors,
                user_id=user.id,
                slug=data.slug,
                title=data.title,
                description=data.description,
                published=data.published,
            ),
            conflict_message=SLUG_TAKEN,
        )
