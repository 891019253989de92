"""
Combined router for all web UI endpoints.

This module aggregates all web UI routers into a single router that can be
included in the main FastAPI app under /api/web.
"""

from fastapi import APIRouter

from contractdrift.interfaces.api.web import drift_if

# Create combined router
router = APIRouter(prefix="/api/web")

router.include_router(drift_if.router)
