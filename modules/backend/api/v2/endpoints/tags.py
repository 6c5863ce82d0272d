"""
Tags API Endpoints.
"""

from fastapi import APIRouter

from modules.backend.core.dependencies import CurrentUser, DbSession
from modules.backend.schemas.tag import TagCreate, TagResponse
from modules.backend.services.tag import TagService

router = APIRouter()


@router.get("", response_model=list[TagResponse], summary="List tags")
async def list_tags(user: CurrentUser, db: DbSession) -> list[TagResponse]:
    tags = await TagService(db).list_tags(user)
    return [TagResponse.model_validate(tag) for tag in tags]


@router.post("", response_model=TagResponse, status_code=201, summary="Create a tag")
async def create_tag(data: TagCreate, user: CurrentUser, db: DbSession) -> TagResponse:
    tag = await TagService(db).create_tag(user, data)
    return TagResponse.model_validate(tag)
