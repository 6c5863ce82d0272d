"""
API Version 2 Router.

Aggregates all v2 endpoint routers. Every route requires HTTP Basic
credentials of an active user.
"""

from fastapi import APIRouter

from modules.backend.api.v2.endpoints import maintenance, monitors, status_pages, system, tags

router = APIRouter()

router.include_router(monitors.router, prefix="/monitors", tags=["monitors"])
router.include_router(status_pages.router, prefix="/status-pages", tags=["status-pages"])
router.include_router(tags.router, prefix="/tags", tags=["tags"])
router.include_router(maintenance.router, prefix="/maintenance", tags=["maintenance"])
router.include_router(system.router, tags=["system"])
