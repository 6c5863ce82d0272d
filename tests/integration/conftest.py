"""
Integration Test Fixtures.

Fixtures for integration tests - the full FastAPI stack over a real
(in-memory) database, with the scheduler replaced by the in-memory one
so tests can see every start and stop.
"""

from collections.abc import AsyncGenerator
from datetime import datetime

import bcrypt
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.database import get_db_session
from modules.backend.core.scheduler import InMemoryMonitorScheduler
from modules.backend.models import Heartbeat, User

ALICE = ("alice", "alice-password")
BOB = ("bob", "bob-password")


def _fast_hash(password: str) -> str:
    # Minimum bcrypt cost keeps the suite fast; verification is cost-agnostic
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=4)).decode("utf-8")


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
async def users(db_session: AsyncSession) -> dict[str, User]:
    """Seed two active users and one inactive user."""
    alice = User(username=ALICE[0], password=_fast_hash(ALICE[1]), active=True)
    bob = User(username=BOB[0], password=_fast_hash(BOB[1]), active=True)
    carol = User(username="carol", password=_fast_hash("carol-password"), active=False)
    db_session.add_all([alice, bob, carol])
    await db_session.flush()
    return {"alice": alice, "bob": bob, "carol": carol}


@pytest.fixture
def alice_auth() -> tuple[str, str]:
    return ALICE


@pytest.fixture
def bob_auth() -> tuple[str, str]:
    return BOB


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def scheduler() -> InMemoryMonitorScheduler:
    return InMemoryMonitorScheduler()


@pytest.fixture
def app(db_session: AsyncSession, scheduler: InMemoryMonitorScheduler) -> FastAPI:
    """
    Application wired to the test session and the in-memory scheduler.

    Most handlers only flush. Monitor mutations commit inside their lock;
    those writes go away with the per-test schema drop in db_engine.
    """
    from modules.backend.main import create_app

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    application = create_app(scheduler=scheduler)
    application.dependency_overrides[get_db_session] = override_get_db_session
    return application


@pytest.fixture
async def client(app: FastAPI, users: dict[str, User]) -> AsyncGenerator[AsyncClient, None]:
    """
    Unauthenticated HTTP client against the app; users are already seeded.

    Usage:
        async def test_list(client: AsyncClient, alice_auth):
            response = await client.get("/api/v2/monitors", auth=alice_auth)
            assert response.status_code == 200
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# =============================================================================
# Data Helpers
# =============================================================================


@pytest.fixture
def add_heartbeat(db_session: AsyncSession):
    """Insert a heartbeat the way the host's check loop would."""

    async def _add(monitor_id: int, status: int, time: datetime, ping: int | None = None, msg: str | None = None) -> Heartbeat:
        heartbeat = Heartbeat(monitor_id=monitor_id, status=status, time=time, ping=ping, msg=msg)
        db_session.add(heartbeat)
        await db_session.flush()
        return heartbeat

    return _add


@pytest.fixture
def create_monitor(client: AsyncClient, alice_auth: tuple[str, str]):
    """POST a monitor as alice and return the response body."""

    async def _create(auth: tuple[str, str] | None = None, **fields) -> dict:
        payload = {"name": "Homepage", "type": "http", "url": "https://example.com"}
        payload.update(fields)
        response = await client.post("/api/v2/monitors", json=payload, auth=auth or alice_auth)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
