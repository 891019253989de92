"""CLI Bootstrap Service - Service Container for CLI Commands.

Provides service instances to CLI commands without the running API.

Architecture:
- This is a SERVICE layer module (interfaces → services)
- CLI commands SHOULD use these bootstrap functions to get service instances
"""

from __future__ import annotations

from contractdrift.services.config_svc import ConfigService
from contractdrift.services.drift_svc import DriftService


def get_config_service() -> ConfigService:
    """Get ConfigService instance for CLI operations."""
    return ConfigService()


def get_drift_service(config_service: ConfigService | None = None) -> DriftService:
    """Get a fresh DriftService configured from YAML/env settings."""
    config_service = config_service or get_config_service()
    return DriftService(config_service.make_settings())
