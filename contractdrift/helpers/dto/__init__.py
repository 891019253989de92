"""
Domain-specific DTOs (Data Transfer Objects) used across multiple layers.

DTOs live in helpers/dto/<domain>_dto.py and form cross-layer contracts
within that domain (interfaces → services → workflows → components).

Rules for DTO modules:
- Import only stdlib and typing (no contractdrift.* imports)
- Contain ONLY dataclass/type definitions and simple type aliases
- No I/O, no business logic
- Pure data structures with optional simple properties
"""

from __future__ import annotations

from contractdrift.helpers.dto.config_dto import DriftSettings, InternalInfoResult
from contractdrift.helpers.dto.drift_dto import (
    BreakingRisk,
    DriftDashboard,
    DriftReport,
    Endpoint,
    FieldUsage,
    Issue,
    Mismatch,
    SpecEndpoint,
)
from contractdrift.helpers.dto.intake_dto import (
    DocumentRole,
    FileParseFailure,
    IntakeResult,
    LoadedDocument,
    SubmissionResult,
)

__all__ = [
    "BreakingRisk",
    "DocumentRole",
    "DriftDashboard",
    "DriftReport",
    "DriftSettings",
    "Endpoint",
    "FieldUsage",
    "FileParseFailure",
    "IntakeResult",
    "InternalInfoResult",
    "Issue",
    "LoadedDocument",
    "Mismatch",
    "SpecEndpoint",
    "SubmissionResult",
]
