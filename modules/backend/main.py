"""
FastAPI Application Entry Point.

Builds the Uptime Kuma REST API. The monitor scheduler is injected at
construction time so the web process, tests and embedders can each
supply their own.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from modules.backend.api import health
from modules.backend.api.v2 import router as api_v2_router
from modules.backend.core.concurrency import clear_monitor_locks
from modules.backend.core.config import get_app_config
from modules.backend.core.database import create_tables, dispose_engine
from modules.backend.core.exception_handlers import register_exception_handlers
from modules.backend.core.logging import get_logger, setup_logging
from modules.backend.core.middleware import RequestContextMiddleware
from modules.backend.core.scheduler import InMemoryMonitorScheduler, MonitorScheduler

logger = get_logger(__name__)

_app: FastAPI | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    app_config = get_app_config()
    setup_logging(level=app_config.logging.level)

    if app_config.database.create_tables:
        await create_tables()

    logger.info(
        "Application starting",
        extra={
            "app_name": app_config.application.name,
            "env": app_config.application.environment,
            "scheduler": type(app.state.scheduler).__name__,
        },
    )
    yield
    logger.info("Application shutting down")

    stop_all = getattr(app.state.scheduler, "stop_all", None)
    if stop_all is not None:
        await stop_all()
    clear_monitor_locks()
    await dispose_engine()


def create_app(scheduler: MonitorScheduler | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        scheduler: Receives start/stop calls for monitors. Defaults to an
            in-memory scheduler that only tracks which monitors run.
    """
    app_config = get_app_config()
    app_settings = app_config.application

    app = FastAPI(
        title=app_settings.name,
        description=app_settings.description,
        version=app_settings.version,
        docs_url="/docs" if app_settings.docs_enabled else None,
        redoc_url="/redoc" if app_settings.docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.scheduler = scheduler if scheduler is not None else InMemoryMonitorScheduler()

    app.add_middleware(RequestContextMiddleware)

    cors_origins = app_settings.cors.origins
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_v2_router, prefix=app_settings.api_prefix)

    return app


def get_app() -> FastAPI:
    """
    Get the application instance (lazy initialization).

    This function creates the app on first call and caches it.
    Use this instead of importing `app` directly to avoid
    import-time configuration errors.
    """
    global _app
    if _app is None:
        _app = create_app()
    return _app


# For uvicorn: `uvicorn modules.backend.main:app`
def __getattr__(name: str) -> FastAPI:
    """Support lazy access to `app` for uvicorn compatibility."""
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
