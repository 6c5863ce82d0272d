"""
Monitor Repository.

Data access layer for monitors and their heartbeats.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.models.monitor import Heartbeat, Monitor
from modules.backend.models.status_page import monitor_status_page
from modules.backend.repositories.base import BaseRepository


class MonitorRepository(BaseRepository[Monitor]):
    """
    Repository for Monitor model.

    Lists are ordered the way the dashboard shows them: heaviest weight
    first, then by name.
    """

    model = Monitor
    default_order = (Monitor.weight.desc(), Monitor.name.asc())

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def list_by_ids(self, ids: list[int], user_id: int) -> list[Monitor]:
        """Get the user's monitors among the given IDs. Unknown IDs are skipped."""
        if not ids:
            return []
        result = await self.session.execute(
            select(Monitor)
            .where(Monitor.id.in_(ids), Monitor.user_id == user_id)
            .order_by(*self.default_order)
        )
        return list(result.scalars().all())

    async def delete_with_dependents(self, monitor: Monitor) -> None:
        """Delete a monitor together with its heartbeats and status page links."""
        await self.session.execute(
            delete(Heartbeat).where(Heartbeat.monitor_id == monitor.id)
        )
        await self.session.execute(
            delete(monitor_status_page).where(monitor_status_page.c.monitor_id == monitor.id)
        )
        await self.delete(monitor)


class HeartbeatRepository:
    """Read-only heartbeat queries. Heartbeats are written by the scheduler."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_previous_heartbeat(self, monitor_id: int) -> Heartbeat | None:
        """Return the most recent heartbeat of a monitor."""
        result = await self.session.execute(
            select(Heartbeat)
            .where(Heartbeat.monitor_id == monitor_id)
            .order_by(Heartbeat.time.desc(), Heartbeat.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_for_monitor(
        self,
        monitor_id: int,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Heartbeat]:
        """
        Get a page of heartbeats, newest first.

        Args:
            monitor_id: Monitor whose heartbeats to return
            limit: Maximum number of heartbeats
            offset: Number of newest heartbeats to skip

        Returns:
            List of heartbeats
        """
        result = await self.session.execute(
            select(Heartbeat)
            .where(Heartbeat.monitor_id == monitor_id)
            .order_by(Heartbeat.time.desc(), Heartbeat.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())
