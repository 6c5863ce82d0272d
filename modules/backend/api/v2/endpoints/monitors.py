"""
Monitors API Endpoints.

REST API endpoints for monitor management. Every lookup is scoped to
the authenticated user; monitors of other users answer 404.
"""

from fastapi import APIRouter, Depends

from modules.backend.core.dependencies import CurrentUser, DbSession, Scheduler
from modules.backend.core.pagination import PaginationParams, get_pagination_params
from modules.backend.models.monitor import Heartbeat, Monitor
from modules.backend.schemas.base import MessageResponse
from modules.backend.schemas.monitor import (
    HeartbeatResponse,
    MonitorActiveResponse,
    MonitorCreate,
    MonitorResponse,
    MonitorUpdate,
)
from modules.backend.services.monitor import MonitorService

router = APIRouter()


def _to_response(monitor: Monitor, heartbeat: Heartbeat | None = None) -> MonitorResponse:
    response = MonitorResponse.model_validate(monitor)
    if heartbeat is not None:
        response.latest_heartbeat = HeartbeatResponse.model_validate(heartbeat)
    return response


@router.get(
    "",
    response_model=list[MonitorResponse],
    summary="List monitors",
    description="List the caller's monitors, each with its latest heartbeat.",
)
async def list_monitors(
    user: CurrentUser,
    db: DbSession,
    scheduler: Scheduler,
) -> list[MonitorResponse]:
    service = MonitorService(db, scheduler)
    pairs = await service.list_monitors(user)
    return [_to_response(monitor, heartbeat) for monitor, heartbeat in pairs]


@router.get(
    "/{monitor_id}",
    response_model=MonitorResponse,
    summary="Get a monitor",
)
async def get_monitor(
    monitor_id: int,
    user: CurrentUser,
    db: DbSession,
    scheduler: Scheduler,
) -> MonitorResponse:
    service = MonitorService(db, scheduler)
    monitor, heartbeat = await service.get_monitor(user, monitor_id)
    return _to_response(monitor, heartbeat)


@router.post(
    "",
    response_model=MonitorResponse,
    status_code=201,
    summary="Create a monitor",
    description="Create a monitor owned by the caller; active monitors start immediately.",
)
async def create_monitor(
    data: MonitorCreate,
    user: CurrentUser,
    db: DbSession,
    scheduler: Scheduler,
) -> MonitorResponse:
    service = MonitorService(db, scheduler)
    monitor = await service.create_monitor(user, data)
    return _to_response(monitor)


@router.put(
    "/{monitor_id}",
    response_model=MonitorResponse,
    summary="Update a monitor",
    description="Change only the supplied fields. A running monitor is restarted.",
)
async def update_monitor(
    monitor_id: int,
    data: MonitorUpdate,
    user: CurrentUser,
    db: DbSession,
    scheduler: Scheduler,
) -> MonitorResponse:
    service = MonitorService(db, scheduler)
    monitor = await service.update_monitor(user, monitor_id, data)
    return _to_response(monitor)


@router.delete(
    "/{monitor_id}",
    response_model=MessageResponse,
    summary="Delete a monitor",
)
async def delete_monitor(
    monitor_id: int,
    user: CurrentUser,
    db: DbSession,
    scheduler: Scheduler,
) -> MessageResponse:
    service = MonitorService(db, scheduler)
    await service.delete_monitor(user, monitor_id)
    return MessageResponse(message="Monitor deleted successfully")


@router.post(
    "/{monitor_id}/pause",
    response_model=MonitorActiveResponse,
    summary="Pause a monitor",
)
async def pause_monitor(
    monitor_id: int,
    user: CurrentUser,
    db: DbSession,
    scheduler: Scheduler,
) -> MonitorActiveResponse:
    service = MonitorService(db, scheduler)
    monitor = await service.pause_monitor(user, monitor_id)
    return MonitorActiveResponse(message="Monitor paused successfully", active=monitor.active)


@router.post(
    "/{monitor_id}/resume",
    response_model=MonitorActiveResponse,
    summary="Resume a monitor",
)
async def resume_monitor(
    monitor_id: int,
    user: CurrentUser,
    db: DbSession,
    scheduler: Scheduler,
) -> MonitorActiveResponse:
    service = MonitorService(db, scheduler)
    monitor = await service.resume_monitor(user, monitor_id)
    return MonitorActiveResponse(message="Monitor resumed successfully", active=monitor.active)


@router.get(
    "/{monitor_id}/heartbeats",
    response_model=list[HeartbeatResponse],
    summary="List heartbeats",
    description="Heartbeats of one monitor, newest first.",
)
async def list_heartbeats(
    monitor_id: int,
    user: CurrentUser,
    db: DbSession,
    scheduler: Scheduler,
    pagination: PaginationParams = Depends(get_pagination_params),
) -> list[HeartbeatResponse]:
    service = MonitorService(db, scheduler)
    heartbeats = await service.list_heartbeats(
        user,
        monitor_id,
        limit=pagination.limit,
        offset=pagination.offset,
    )
    return [HeartbeatResponse.model_validate(hb) for hb in heartbeats]
