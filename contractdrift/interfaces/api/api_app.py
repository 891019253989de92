"""
FastAPI application setup and configuration.
Main entry point for the contractdrift API service.

Architecture:
- All routes live under /api/web
- Endpoints inject services from the Application container
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from contractdrift.__version__ import __version__
from contractdrift.interfaces.api import web


# ----------------------------------------------------------------------
#  App lifecycle
# ----------------------------------------------------------------------
@asynccontextmanager
async def lifespan(_app_instance: FastAPI):
    """
    FastAPI lifespan context manager.

    Starts the Application on startup and clears session state on shutdown.
    """
    from contractdrift.app import application

    application.start()
    logging.info("[API] FastAPI starting")

    try:
        yield
    finally:
        logging.info("[API] FastAPI shutting down...")
        application.stop()
        logging.info("[API] Shutdown complete")


# ----------------------------------------------------------------------
#  FastAPI app
# ----------------------------------------------------------------------
api_app = FastAPI(title="contractdrift", version=__version__, lifespan=lifespan)


# Global exception handler
@api_app.exception_handler(Exception)
async def exception_handler(request: Request, exc: Exception):
    logging.exception(f"[API] Exception: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


api_app.include_router(web.router)


@api_app.get("/api/health")
async def health() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok", "version": __version__}
