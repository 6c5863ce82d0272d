"""
Concurrency Infrastructure.

Per-monitor locks that serialise state transitions on a single monitor.

Update, pause, resume and delete each read ``active``, write it and then
start or stop the scheduler task. Two such requests interleaving on the
same monitor could leave the stored flag and the scheduler disagreeing,
so every mutation of an existing monitor runs under that monitor's lock.
Locks are process-local: one API process owns one scheduler.

Usage:
    from modules.backend.core.concurrency import get_monitor_lock

    async with get_monitor_lock(monitor_id):
        ...
"""

import asyncio

from modules.backend.core.logging import get_logger

logger = get_logger(__name__)

_monitor_locks: dict[int, asyncio.Lock] = {}


def get_monitor_lock(monitor_id: int) -> asyncio.Lock:
    """Get the lock guarding a monitor's active state, creating it lazily."""
    lock = _monitor_locks.get(monitor_id)
    if lock is None:
        lock = asyncio.Lock()
        _monitor_locks[monitor_id] = lock
        logger.debug("Monitor lock created", extra={"monitor_id": monitor_id})
    return lock


def release_monitor_lock(monitor_id: int) -> None:
    """Forget the lock of a deleted monitor."""
    _monitor_locks.pop(monitor_id, None)


def clear_monitor_locks() -> None:
    """Drop all locks. Called during application shutdown."""
    _monitor_locks.clear()
    logger.debug("Monitor locks cleared")
