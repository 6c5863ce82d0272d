"""
System Service.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.utils import isoformat_utc, utc_now
from modules.backend.models.user import User
from modules.backend.repositories.monitor import MonitorRepository
from modules.backend.schemas.system import InfoResponse
from modules.backend.services.base import BaseService


class SystemService(BaseService):
    def __init__(self, session: AsyncSession, version: str) -> None:
        super().__init__(session)
        self.monitors = MonitorRepository(session)
        self.version = version

    async def get_info(self, user: User) -> InfoResponse:
        """Server version, the caller's monitor count and the current UTC time."""
        return InfoResponse(
            version=self.version,
            monitor_count=await self.monitors.count_owned(user.id),
            server_time=isoformat_utc(utc_now()),
        )
