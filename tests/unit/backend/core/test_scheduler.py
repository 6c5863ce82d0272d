"""
Unit Tests for the Monitor Scheduler Interface.
"""

from types import SimpleNamespace

import pytest

from modules.backend.core.scheduler import (
    InMemoryMonitorScheduler,
    MonitorScheduler,
    SchedulerEvent,
)


def _monitor(monitor_id: int = 1, interval: int = 60) -> SimpleNamespace:
    return SimpleNamespace(
        id=monitor_id,
        type="http",
        url="https://example.com",
        interval=interval,
        retry_interval=60,
        maxretries=0,
    )


class TestInMemoryMonitorScheduler:
    """Tests for InMemoryMonitorScheduler."""

    def test_satisfies_protocol(self):
        """The default scheduler implements MonitorScheduler."""
        assert isinstance(InMemoryMonitorScheduler(), MonitorScheduler)

    @pytest.mark.asyncio
    async def test_start_records_snapshot(self):
        """start keeps the configuration the task runs with."""
        scheduler = InMemoryMonitorScheduler()

        await scheduler.start(_monitor(interval=30))

        assert scheduler.is_running(1)
        assert scheduler.running[1]["interval"] == 30
        assert scheduler.events == [SchedulerEvent("start", 1)]

    @pytest.mark.asyncio
    async def test_stop_unknown_is_harmless(self):
        """Stopping a monitor that is not running only records the call."""
        scheduler = InMemoryMonitorScheduler()

        await scheduler.stop(9)

        assert not scheduler.is_running(9)
        assert scheduler.events == [SchedulerEvent("stop", 9)]

    @pytest.mark.asyncio
    async def test_stop_all(self):
        """stop_all stops every running monitor."""
        scheduler = InMemoryMonitorScheduler()
        await scheduler.start(_monitor(1))
        await scheduler.start(_monitor(2))

        await scheduler.stop_all()

        assert scheduler.running == {}
