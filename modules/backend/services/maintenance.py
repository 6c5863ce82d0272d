"""
Maintenance Service.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.exceptions import ValidationError
from modules.backend.core.utils import to_naive_utc, utc_now
from modules.backend.models.maintenance import Maintenance
from modules.backend.models.user import User
from modules.backend.repositories.maintenance import MaintenanceRepository
from modules.backend.schemas.maintenance import MaintenanceCreate
from modules.backend.services.base import BaseService


class MaintenanceService(BaseService):
    """Service for maintenance windows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = MaintenanceRepository(session)

    async def list_maintenance(self, user: User) -> list[Maintenance]:
        """List the user's maintenance windows, newest first."""
        return await self.repo.list_owned(user.id)

    async def create_maintenance(self, user: User, data: MaintenanceCreate) -> Maintenance:
        """
        Create a maintenance window. ``created_date`` is set here, never by the client.

        Raises:
            ValidationError: If title, start_date or end_date is missing,
                or the window ends before it starts
        """
        self._validate_required(data.model_dump(), ["title", "start_date", "end_date"])

        start_date = to_naive_utc(data.start_date)
        end_date = to_naive_utc(data.end_date)
        if end_date < start_date:
            raise ValidationError("end_date must not be before start_date")

        self._log_operation("Creating maintenance", title=data.title)

        return await self._execute_db_operation(
            "create_maintenance",
            self.repo.create(
                user_id=user.id,
                title=data.title,
                description=data.description,
                start_date=start_date,
                end_date=end_date,
                active=data.active,
                created_date=utc_now(),
            ),
        )
