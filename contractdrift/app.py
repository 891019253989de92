"""
Application composition root and dependency injection container.

Architecture:
- Application owns: config service, settings, drift service
- Access services via: application.get_service("name") or application.services["name"]
- Do NOT construct services directly in interfaces; use this container

The singleton instance is available as `application` at module level.
"""

from __future__ import annotations

import logging
from typing import Any

from contractdrift.services.config_svc import ConfigService
from contractdrift.services.drift_svc import DriftService


class Application:
    """
    Application composition root.

    Services are created eagerly in __init__; there are no workers or
    background resources, so start() only logs and stop() only clears the
    drift session.
    """

    def __init__(self, config_service: ConfigService | None = None) -> None:
        self.config_service = config_service or ConfigService()
        self.settings = self.config_service.make_settings()
        self.api_host = self.settings.api_host
        self.api_port = self.settings.api_port
        self.services: dict[str, Any] = {}
        self.register_service("config", self.config_service)
        self.register_service("drift", DriftService(self.settings))

    def register_service(self, name: str, service: Any) -> None:
        self.services[name] = service

    def get_service(self, name: str) -> Any:
        """Get a registered service by name."""
        if name not in self.services:
            raise KeyError(f"Service '{name}' not registered")
        return self.services[name]

    def start(self) -> None:
        logging.info(f"[Application] Ready (markup parser: {self.settings.markup_parser})")

    def stop(self) -> None:
        drift = self.services.get("drift")
        if drift is not None:
            drift.reset()
        logging.info("[Application] Stopped")


application = Application()
