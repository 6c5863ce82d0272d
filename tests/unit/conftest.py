"""
Unit Test Fixtures.

Unit tests never touch a database; services get a mocked session and
mocked repositories.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    AsyncSession stand-in. ``add`` is synchronous on the real session.

    Usage:
        def test_service(mock_db_session: AsyncMock):
            service = TagService(mock_db_session)
    """
    session = AsyncMock()
    session.add = MagicMock()
    return session
