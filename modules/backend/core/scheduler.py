"""
Monitor Scheduler Interface.

The check loop that actually checks monitors lives in the host
application. The API only needs to tell it when a monitor starts or
stops, so it depends on this narrow protocol instead of a global server
instance. ``create_app(scheduler=...)`` injects the implementation and
endpoints receive it through the ``Scheduler`` dependency.

InMemoryMonitorScheduler is the default used when no host scheduler is
supplied: it tracks which monitors would be running and with which
configuration, and logs every transition.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from modules.backend.core.logging import get_logger, log_with_source
from modules.backend.models.monitor import Monitor

logger = get_logger(__name__)


@runtime_checkable
class MonitorScheduler(Protocol):
    """Start/stop control over the host's monitor check tasks."""

    async def start(self, monitor: Monitor) -> None:
        """Start (or restart) the check task for a monitor."""
        ...

    async def stop(self, monitor_id: int) -> None:
        """Stop the check task for a monitor. No-op if it is not running."""
        ...


@dataclass
class SchedulerEvent:
    action: str
    monitor_id: int


@dataclass
class InMemoryMonitorScheduler:
    """
    Scheduler that records running monitors without probing anything.

    Attributes:
        running: monitor id -> configuration snapshot taken at start
        events: ordered history of start/stop calls
    """

    running: dict[int, dict[str, Any]] = field(default_factory=dict)
    events: list[SchedulerEvent] = field(default_factory=list)

    async def start(self, monitor: Monitor) -> None:
        self.running[monitor.id] = {
            "type": monitor.type,
            "url": monitor.url,
            "interval": monitor.interval,
            "retry_interval": monitor.retry_interval,
            "maxretries": monitor.maxretries,
        }
        self.events.append(SchedulerEvent("start", monitor.id))
        log_with_source(
            logger, "scheduler", "info", "Monitor started",
            monitor_id=monitor.id, interval=monitor.interval,
        )

    async def stop(self, monitor_id: int) -> None:
        self.running.pop(monitor_id, None)
        self.events.append(SchedulerEvent("stop", monitor_id))
        log_with_source(logger, "scheduler", "info", "Monitor stopped", monitor_id=monitor_id)

    def is_running(self, monitor_id: int) -> bool:
        return monitor_id in self.running

    async def stop_all(self) -> None:
        """Stop every running monitor. Used on application shutdown."""
        for monitor_id in list(self.running):
            await self.stop(monitor_id)
