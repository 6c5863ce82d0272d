"""
Monitor Service.

Business logic for monitors. Besides CRUD, the service owns one
invariant: after every successful call, a monitor's stored ``active``
flag matches whether the scheduler is running it.

    create  active            -> start
    update  inactive -> active -> start
            active -> inactive -> stop
            active -> active   -> stop, start (picks up the new settings)
    pause   active            -> stop      (no-op when already inactive)
    resume  inactive          -> start     (no-op when already active)
    delete  active            -> stop
"""

from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.concurrency import get_monitor_lock, release_monitor_lock
from modules.backend.core.config_schema import MonitorDefaultsSchema
from modules.backend.core.scheduler import MonitorScheduler
from modules.backend.models.monitor import Heartbeat, Monitor
from modules.backend.models.user import User
from modules.backend.repositories.monitor import HeartbeatRepository, MonitorRepository
from modules.backend.schemas.monitor import MonitorCreate, MonitorUpdate
from modules.backend.services.base import BaseService

REQUIRED_FIELDS = ["name", "type", "url"]

# Columns that must always hold a value once the monitor exists
NON_NULLABLE_FIELDS = frozenset({
    "name",
    "type",
    "url",
    "method",
    "interval",
    "retry_interval",
    "maxretries",
    "weight",
    "active",
    "ignore_tls",
    "upside_down",
    "maxredirects",
})


def _load_monitor_defaults() -> MonitorDefaultsSchema:
    from modules.backend.core.config import get_app_config

    return get_app_config().application.monitor_defaults


class MonitorService(BaseService):
    """
    Service for monitor business logic.

    All lookups are scoped to the calling user. Mutations of an existing
    monitor hold that monitor's lock from the read of ``active`` until the
    scheduler has been told about the new state and the change is committed.
    """

    def __init__(
        self,
        session: AsyncSession,
        scheduler: MonitorScheduler,
        defaults: MonitorDefaultsSchema | None = None,
    ) -> None:
        super().__init__(session)
        self.repo = MonitorRepository(session)
        self.heartbeats = HeartbeatRepository(session)
        self.scheduler = scheduler
        self._defaults = defaults

    @property
    def defaults(self) -> MonitorDefaultsSchema:
        if self._defaults is None:
            self._defaults = _load_monitor_defaults()
        return self._defaults

    async def list_monitors(self, user: User) -> list[tuple[Monitor, Heartbeat | None]]:
        """
        List the user's monitors with their latest heartbeat.

        Returns:
            (monitor, latest heartbeat or None) pairs
        """
        monitors = await self.repo.list_owned(user.id)
        return [
            (monitor, await self.heartbeats.get_previous_heartbeat(monitor.id))
            for monitor in monitors
        ]

    async def get_monitor(self, user: User, monitor_id: int) -> tuple[Monitor, Heartbeat | None]:
        """
        Get one of the user's monitors with its latest heartbeat.

        Raises:
            NotFoundError: If the monitor does not exist or has another owner
        """
        monitor = await self.repo.get_owned(monitor_id, user.id)
        return monitor, await self.heartbeats.get_previous_heartbeat(monitor.id)

    async def create_monitor(self, user: User, data: MonitorCreate) -> Monitor:
        """
        Create a monitor and start it if active.

        Unset numeric fields and ``active`` take the configured defaults.

        Raises:
            ValidationError: If name, type or url is missing
        """
        values = data.model_dump(exclude_none=True, mode="json")
        self._validate_required(values, REQUIRED_FIELDS)

        defaults = self.defaults
        values.setdefault("interval", defaults.interval)
        values.setdefault("retry_interval", defaults.retry_interval)
        values.setdefault("maxretries", defaults.maxretries)
        values.setdefault("weight", defaults.weight)
        values.setdefault("active", defaults.active)

        self._log_operation("Creating monitor", name=values["name"], type=values["type"])

        monitor = await self._execute_db_operation(
            "create_monitor",
            self.repo.create(user_id=user.id, **values),
        )

        if monitor.active:
            await self.scheduler.start(monitor)

        self._log_debug("Monitor created", monitor_id=monitor.id, active=monitor.active)
        return monitor

    async def update_monitor(self, user: User, monitor_id: int, data: MonitorUpdate) -> Monitor:
        """
        Update a monitor and reconcile its scheduler task.

        Only fields present in the request are changed. ``id`` and
        ``user_id`` are not part of MonitorUpdate and are rejected before
        reaching the service.

        Raises:
            NotFoundError: If the monitor does not exist or has another owner
            ValidationError: If a required field would be cleared
        """
        changes = data.model_dump(exclude_unset=True, mode="json")
        self._reject_cleared(changes, NON_NULLABLE_FIELDS)

        async with get_monitor_lock(monitor_id):
            monitor = await self.repo.get_owned(monitor_id, user.id)
            if not changes:
                return monitor

            was_active = monitor.active
            self._log_operation(
                "Updating monitor",
                monitor_id=monitor_id,
                fields=sorted(changes),
            )

            monitor = await self._execute_db_operation(
                "update_monitor",
                self.repo.update(monitor, **changes),
            )

            if was_active and not monitor.active:
                await self.scheduler.stop(monitor.id)
            elif not was_active and monitor.active:
                await self.scheduler.start(monitor)
            elif monitor.active:
                # Restart so the running task never uses stale settings
                await self.scheduler.stop(monitor.id)
                await self.scheduler.start(monitor)

            await self._commit("update_monitor")
            return monitor

    async def delete_monitor(self, user: User, monitor_id: int) -> None:
        """
        Stop and delete a monitor with its heartbeats and status page links.

        Raises:
            NotFoundError: If the monitor does not exist or has another owner
        """
        async with get_monitor_lock(monitor_id):
            monitor = await self.repo.get_owned(monitor_id, user.id)
            self._log_operation("Deleting monitor", monitor_id=monitor_id)

            if monitor.active:
                await self.scheduler.stop(monitor.id)

            await self._execute_db_operation(
                "delete_monitor",
                self.repo.delete_with_dependents(monitor),
            )
            await self._commit("delete_monitor")
        release_monitor_lock(monitor_id)

    async def pause_monitor(self, user: User, monitor_id: int) -> Monitor:
        """
        Deactivate a monitor. Already paused monitors are returned unchanged.

        Raises:
            NotFoundError: If the monitor does not exist or has another owner
        """
        async with get_monitor_lock(monitor_id):
            monitor = await self.repo.get_owned(monitor_id, user.id)
            if not monitor.active:
                return monitor

            self._log_operation("Pausing monitor", monitor_id=monitor_id)
            monitor = await self._execute_db_operation(
                "pause_monitor",
                self.repo.update(monitor, active=False),
            )
            await self.scheduler.stop(monitor.id)
            await self._commit("pause_monitor")
            return monitor

    async def resume_monitor(self, user: User, monitor_id: int) -> Monitor:
        """
        Activate a monitor. Already active monitors are returned unchanged.

        Raises:
            NotFoundError: If the monitor does not exist or has another owner
        """
        async with get_monitor_lock(monitor_id):
            monitor = await self.repo.get_owned(monitor_id, user.id)
            if monitor.active:
                return monitor

            self._log_operation("Resuming monitor", monitor_id=monitor_id)
            monitor = await self._execute_db_operation(
                "resume_monitor",
                self.repo.update(monitor, active=True),
            )
            await self.scheduler.start(monitor)
            await self._commit("resume_monitor")
            return monitor

    async def list_heartbeats(
        self,
        user: User,
        monitor_id: int,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Heartbeat]:
        """
        Get a page of a monitor's heartbeats, newest first.

        Raises:
            NotFoundError: If the monitor does not exist or has another owner
        """
        monitor = await self.repo.get_owned(monitor_id, user.id)
        return await self.heartbeats.list_for_monitor(monitor.id, limit=limit, offset=offset)
