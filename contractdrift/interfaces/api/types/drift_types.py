"""Drift API types - Pydantic models for drift analysis endpoints.

External API contracts for drift endpoints.
These models are thin adapters around DTOs from helpers/dto/drift_dto.py.
Field names follow the camelCase report contract.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from contractdrift.helpers.dto.drift_dto import (
        BreakingRisk,
        DriftDashboard,
        DriftReport,
        Endpoint,
        FieldUsage,
        Issue,
        Mismatch,
    )
    from contractdrift.helpers.dto.intake_dto import FileParseFailure, SubmissionResult


# ──────────────────────────────────────────────────────────────────────
# Request Models
# ──────────────────────────────────────────────────────────────────────


class AnalyzeRequest(BaseModel):
    """Request to analyze two already-parsed documents."""

    spec: dict[str, Any] = Field(..., description="Parsed specification (info.title, paths)")
    traffic: dict[str, Any] = Field(..., description="Parsed traffic statistics (meta, aggregated_stats)")
    spec_name: str | None = Field(default=None, description="Optional report name overriding info.title")


# ──────────────────────────────────────────────────────────────────────
# Response Models
# ──────────────────────────────────────────────────────────────────────


class EndpointResponse(BaseModel):
    """A declared endpoint with its traffic and risk."""

    method: str = Field(..., description="Uppercased HTTP method")
    path: str = Field(..., description="Path as declared in the specification")
    hits: int = Field(..., ge=0, description="Observed request count")
    risk: Literal["ok", "dead", "warning"] = Field(..., description="Endpoint classification")

    @classmethod
    def from_dto(cls, dto: Endpoint) -> EndpointResponse:
        """Convert DTO to response model."""
        return cls(method=dto.method, path=dto.path, hits=dto.hits, risk=dto.risk)


class MismatchResponse(BaseModel):
    """A field-level mismatch between traffic and the contract."""

    type: Literal["extra", "unused", "type"]
    endpoint: str
    field: str
    frequency: Any = Field(..., description="Traffic value echoed as received")
    severity: Literal["warning", "error"]
    expected: str | None = None
    actual: str | None = None

    @classmethod
    def from_dto(cls, dto: Mismatch) -> MismatchResponse:
        """Convert DTO to response model."""
        return cls(
            type=dto.type,
            endpoint=dto.endpoint,
            field=dto.field,
            frequency=dto.frequency,
            severity=dto.severity,
            expected=dto.expected,
            actual=dto.actual,
        )


class BreakingRiskResponse(BaseModel):
    """Consequence of removing a field or endpoint."""

    action: Literal["Field", "Endpoint"]
    target: str
    impact: str
    severity: Literal["high", "medium", "safe", "deprecated"]

    @classmethod
    def from_dto(cls, dto: BreakingRisk) -> BreakingRiskResponse:
        """Convert DTO to response model."""
        return cls(action=dto.action, target=dto.target, impact=dto.impact, severity=dto.severity)


class FieldUsageResponse(BaseModel):
    """Usage of one field (null when the traffic value was not a number)."""

    field: str
    usage: float | None

    @classmethod
    def from_dto(cls, dto: FieldUsage) -> FieldUsageResponse:
        """Convert DTO to response model."""
        return cls(field=dto.field, usage=None if math.isnan(dto.usage) else dto.usage)


class IssueResponse(BaseModel):
    """Entry of the merged issue list."""

    type: Literal["extra", "unused", "type", "dead", "deprecated"]
    endpoint: str
    field: str
    frequency: Any
    severity: str
    expected: str | None = None
    actual: str | None = None

    @classmethod
    def from_dto(cls, dto: Issue) -> IssueResponse:
        """Convert DTO to response model."""
        return cls(
            type=dto.type,
            endpoint=dto.endpoint,
            field=dto.field,
            frequency=dto.frequency,
            severity=dto.severity,
            expected=dto.expected,
            actual=dto.actual,
        )


class DriftReportResponse(BaseModel):
    """The drift report contract."""

    specName: str
    totalEndpoints: int
    trafficSamples: int
    endpoints: list[EndpointResponse]
    mismatches: list[MismatchResponse]
    breakingRisks: list[BreakingRiskResponse]
    fieldUsage: list[FieldUsageResponse]

    @classmethod
    def from_dto(cls, dto: DriftReport) -> DriftReportResponse:
        """Convert DTO to response model."""
        return cls(
            specName=dto.spec_name,
            totalEndpoints=dto.total_endpoints,
            trafficSamples=dto.traffic_samples,
            endpoints=[EndpointResponse.from_dto(e) for e in dto.endpoints],
            mismatches=[MismatchResponse.from_dto(m) for m in dto.mismatches],
            breakingRisks=[BreakingRiskResponse.from_dto(r) for r in dto.breaking_risks],
            fieldUsage=[FieldUsageResponse.from_dto(u) for u in dto.field_usage],
        )


class DriftDashboardResponse(BaseModel):
    """Report plus issue list, optimizer list and health score."""

    report: DriftReportResponse
    issues: list[IssueResponse]
    optimizer: list[BreakingRiskResponse]
    healthScore: int = Field(..., ge=0, le=100)

    @classmethod
    def from_dto(cls, dto: DriftDashboard) -> DriftDashboardResponse:
        """Convert DTO to response model."""
        return cls(
            report=DriftReportResponse.from_dto(dto.report),
            issues=[IssueResponse.from_dto(i) for i in dto.issues],
            optimizer=[BreakingRiskResponse.from_dto(r) for r in dto.optimizer],
            healthScore=dto.health_score,
        )


class FileFailureResponse(BaseModel):
    """A file that could not be parsed."""

    name: str
    reason: str

    @classmethod
    def from_dto(cls, dto: FileParseFailure) -> FileFailureResponse:
        """Convert DTO to response model."""
        return cls(name=dto.name, reason=dto.reason)


class UploadResponse(BaseModel):
    """Result of uploading files to the drift session."""

    specFile: str | None = Field(None, description="Name of the current specification file")
    trafficFile: str | None = Field(None, description="Name of the current traffic file")
    failures: list[FileFailureResponse] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list, description="Files with unsupported extensions")
    dashboard: DriftDashboardResponse | None = Field(
        None, description="Present once both a specification and traffic were accepted"
    )

    @classmethod
    def from_dto(cls, dto: SubmissionResult) -> UploadResponse:
        """Convert DTO to response model."""
        return cls(
            specFile=dto.spec_name,
            trafficFile=dto.traffic_name,
            failures=[FileFailureResponse.from_dto(f) for f in dto.intake.failures],
            skipped=list(dto.intake.skipped),
            dashboard=DriftDashboardResponse.from_dto(dto.dashboard) if dto.dashboard else None,
        )


class DriftInfoResponse(BaseModel):
    """Version and effective analysis settings."""

    version: str
    recognizedMethods: list[str]
    fieldUsageLimit: int
    safeThreshold: float
    mediumThreshold: float
    markupParser: Literal["subset", "yaml"]
    maxUploadBytes: int
