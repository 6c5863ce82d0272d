"""
Maintenance API Endpoints.
"""

from fastapi import APIRouter

from modules.backend.core.dependencies import CurrentUser, DbSession
from modules.backend.schemas.maintenance import MaintenanceCreate, MaintenanceResponse
from modules.backend.services.maintenance import MaintenanceService

router = APIRouter()


@router.get(
    "",
    response_model=list[MaintenanceResponse],
    summary="List maintenance windows",
)
async def list_maintenance(user: CurrentUser, db: DbSession) -> list[MaintenanceResponse]:
    windows = await MaintenanceService(db).list_maintenance(user)
    return [MaintenanceResponse.model_validate(window) for window in windows]


@router.post(
    "",
    response_model=MaintenanceResponse,
    status_code=201,
    summary="Create a maintenance window",
)
async def create_maintenance(
    data: MaintenanceCreate,
    user: CurrentUser,
    db: DbSession,
) -> MaintenanceResponse:
    window = await MaintenanceService(db).create_maintenance(user, data)
    return MaintenanceResponse.model_validate(window)
