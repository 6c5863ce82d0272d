"""
Status Pages API Endpoints.
"""

from fastapi import APIRouter

from modules.backend.core.dependencies import CurrentUser, DbSession
from modules.backend.schemas.status_page import (
    StatusPageCreate,
    StatusPageDetailResponse,
    StatusPageResponse,
)
from modules.backend.services.status_page import StatusPageService

router = APIRouter()


@router.get(
    "",
    response_model=list[StatusPageResponse],
    summary="List status pages",
)
async def list_status_pages(user: CurrentUser, db: DbSession) -> list[StatusPageResponse]:
    pages = await StatusPageService(db).list_status_pages(user)
    return [StatusPageResponse.model_validate(page) for page in pages]


@router.get(
    "/{slug}",
    response_model=StatusPageDetailResponse,
    summary="Get a status page",
    description="One of the caller's status pages, including its monitors.",
)
async def get_status_page(slug: str, user: CurrentUser, db: DbSession) -> StatusPageDetailResponse:
    page = await StatusPageService(db).get_status_page(user, slug)
    return StatusPageDetailResponse.model_validate(page)


@router.post(
    "",
    response_model=StatusPageResponse,
    status_code=201,
    summary="Create a status page",
)
async def create_status_page(
    data: StatusPageCreate,
    user: CurrentUser,
    db: DbSession,
) -> StatusPageResponse:
    page = await StatusPageService(db).create_status_page(user, data)
    return StatusPageResponse.model_validate(page)
