"""Web UI API routers."""

from contractdrift.interfaces.api.web.router import router

__all__ = ["router"]
