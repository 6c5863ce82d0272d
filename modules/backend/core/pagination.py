"""
Pagination Utilities.

Offset-based pagination for list endpoints.

Query values are parsed leniently: a missing, non-numeric or out-of-range
``limit`` falls back to the configured default, a bad ``offset`` to 0.
Limits above the configured maximum are capped.
"""

from dataclasses import dataclass

from fastapi import Query

from modules.backend.core.config import get_app_config


@dataclass
class PaginationParams:
    """Pagination parameters extracted from query string."""

    limit: int
    offset: int


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def resolve_pagination(
    limit: str | None,
    offset: str | None,
    default_limit: int,
    max_limit: int,
) -> PaginationParams:
    """Turn raw query strings into bounded pagination parameters."""
    parsed_limit = _parse_int(limit)
    if parsed_limit is None or parsed_limit <= 0:
        parsed_limit = default_limit
    parsed_limit = min(parsed_limit, max_limit)

    parsed_offset = _parse_int(offset)
    if parsed_offset is None or parsed_offset < 0:
        parsed_offset = 0

    return PaginationParams(limit=parsed_limit, offset=parsed_offset)


def get_pagination_params(
    limit: str | None = Query(
        default=None,
        description="Maximum number of items to return",
    ),
    offset: str | None = Query(
        default=None,
        description="Number of items to skip",
    ),
) -> PaginationParams:
    """
    FastAPI dependency for pagination parameters.

    Usage:
        @router.get("/items")
        async def list_items(
            pagination: PaginationParams = Depends(get_pagination_params),
        ):
            ...
    """
    pagination = get_app_config().application.pagination
    return resolve_pagination(
        limit,
        offset,
        default_limit=pagination.default_limit,
        max_limit=pagination.max_limit,
    )
