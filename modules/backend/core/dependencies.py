"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

import asyncio
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.database import get_db_session
from modules.backend.core.exceptions import AuthenticationError
from modules.backend.core.logging import get_logger
from modules.backend.core.scheduler import MonitorScheduler
from modules.backend.core.security import verify_password
from modules.backend.models.user import User
from modules.backend.repositories.user import UserRepository

logger = get_logger(__name__)

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]

_basic_auth = HTTPBasic(auto_error=False, realm="api")


async def get_current_user(
    db: DbSession,
    credentials: HTTPBasicCredentials | None = Depends(_basic_auth),
) -> User:
    """
    Resolve the calling user from HTTP Basic credentials.

    The user must exist, be active and the password must match its bcrypt
    hash. Every failure is reported the same way so callers cannot test
    which usernames exist.

    Raises:
        AuthenticationError: If credentials are missing or invalid
    """
    if credentials is None:
        raise AuthenticationError()

    user = await UserRepository(db).get_active_by_username(credentials.username)
    if user is None:
        logger.info("Authentication failed: unknown or inactive user")
        raise AuthenticationError()

    # bcrypt is deliberately slow; keep it off the event loop
    valid = await asyncio.to_thread(verify_password, credentials.password, user.password)
    if not valid:
        logger.info("Authentication failed: bad password", extra={"user_id": user.id})
        raise AuthenticationError()

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


def get_scheduler(request: Request) -> MonitorScheduler:
    """Return the scheduler injected into the application at creation time."""
    return request.app.state.scheduler


Scheduler = Annotated[MonitorScheduler, Depends(get_scheduler)]
