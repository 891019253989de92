"""
Config domain DTOs.

Data transfer objects for configuration service results.
These form cross-layer contracts between services and interfaces.

Rules:
- Import only stdlib and typing (no contractdrift.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class DriftSettings:
    """User-configurable settings consumed by services and interfaces."""

    log_level: str = "INFO"
    api_host: str = "127.0.0.1"
    api_port: int = 8357
    markup_parser: Literal["subset", "yaml"] = "subset"
    max_upload_bytes: int = 10 * 1024 * 1024


@dataclass
class InternalInfoResult:
    """Result from config_service.get_internal_info."""

    version: str
    recognized_methods: tuple[str, ...]
    field_usage_limit: int
    safe_threshold: float
    medium_threshold: float
