"""Central API router composition.

This module mounts the individual route modules on one router so the app
factory needs a single `FastAPI.include_router(...)` call.
"""

from fastapi import APIRouter

from .analytics import router as analytics_router
from .health import router as health_router
from .players import router as players_router
from .sessions import router as sessions_router

router = APIRouter()

router.include_router(health_router)
router.include_router(players_router)
router.include_router(sessions_router)
router.include_router(analytics_router)
