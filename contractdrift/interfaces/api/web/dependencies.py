"""
FastAPI dependency injection helpers for web endpoints.

ARCHITECTURE:
- Endpoints should ONLY inject services, never raw infrastructure
- Services encapsulate all business logic
- Endpoints are thin presentation layers that call services and format responses
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException

if TYPE_CHECKING:
    from contractdrift.services.config_svc import ConfigService
    from contractdrift.services.drift_svc import DriftService


def get_drift_service() -> DriftService:
    """Get DriftService instance."""
    from contractdrift.app import application

    service = application.services.get("drift")
    if service is None:
        raise HTTPException(status_code=503, detail="Drift service not available")
    return service  # type: ignore[no-any-return]


def get_config_service() -> ConfigService:
    """Get ConfigService instance."""
    from contractdrift.app import application

    return application.get_service("config")  # type: ignore[no-any-return]
