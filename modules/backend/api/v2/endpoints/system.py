"""
System API Endpoints.
"""

from fastapi import APIRouter

from modules.backend.core.config import get_app_config
from modules.backend.core.dependencies import CurrentUser, DbSession
from modules.backend.schemas.system import InfoResponse
from modules.backend.services.system import SystemService

router = APIRouter()


@router.get(
    "/info",
    response_model=InfoResponse,
    summary="Server information",
    description="Server version, the caller's monitor count and server time.",
)
async def get_info(user: CurrentUser, db: DbSession) -> InfoResponse:
    version = get_app_config().application.version
    return await SystemService(db, version).get_info(user)
