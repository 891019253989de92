"""Drift domain DTOs.

These dataclasses represent the entities derived by the drift engine:
classified endpoints, field mismatches, breaking-change risks, field usage,
and the report and dashboard that bundle them.

Rules:
- Import only stdlib and typing (no contractdrift.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Literal

EndpointRisk = Literal["ok", "dead", "warning"]
MismatchType = Literal["extra", "unused", "type"]
MismatchSeverity = Literal["warning", "error"]
IssueType = Literal["extra", "unused", "type", "dead", "deprecated"]
RiskAction = Literal["Field", "Endpoint"]
RiskSeverity = Literal["high", "medium", "safe", "deprecated"]


@dataclass(frozen=True)
class SpecEndpoint:
    """An endpoint declared in the specification."""

    method: str  # Uppercased HTTP verb
    path: str
    deprecated: bool = False

    @property
    def key(self) -> str:
        return f"{self.method} {self.path}"


@dataclass(frozen=True)
class Endpoint:
    """A declared endpoint joined with its observed traffic."""

    method: str
    path: str
    hits: int
    risk: EndpointRisk

    @property
    def key(self) -> str:
        return f"{self.method} {self.path}"


@dataclass(frozen=True)
class Mismatch:
    """A field-level divergence between traffic and the contract.

    ``frequency`` echoes the raw traffic value (e.g. "12%" or 12).
    ``expected``/``actual`` are only set for type mismatches.
    """

    type: MismatchType
    endpoint: str
    field: str
    frequency: Any
    severity: MismatchSeverity
    expected: str | None = None
    actual: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type,
            "endpoint": self.endpoint,
            "field": self.field,
            "frequency": self.frequency,
            "severity": self.severity,
        }
        if self.type == "type":
            data["expected"] = self.expected
            data["actual"] = self.actual
        return data


@dataclass(frozen=True)
class BreakingRisk:
    """Consequence of removing a field or endpoint from the contract."""

    action: RiskAction
    target: str  # Field name or "METHOD path"
    impact: str
    severity: RiskSeverity

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action,
            "target": self.target,
            "impact": self.impact,
            "severity": self.severity,
        }


@dataclass(frozen=True)
class FieldUsage:
    """Usage percentage of one field (NaN when unparseable)."""

    field: str
    usage: float

    def to_dict(self) -> dict[str, Any]:
        # NaN has no JSON representation
        return {"field": self.field, "usage": None if math.isnan(self.usage) else self.usage}


@dataclass(frozen=True)
class Issue:
    """Entry of the merged issue list: a mismatch or a dead/deprecated endpoint."""

    type: IssueType
    endpoint: str
    field: str
    frequency: Any
    severity: str
    expected: str | None = None
    actual: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type,
            "endpoint": self.endpoint,
            "field": self.field,
            "frequency": self.frequency,
            "severity": self.severity,
        }
        if self.type == "type":
            data["expected"] = self.expected
            data["actual"] = self.actual
        return data


@dataclass(frozen=True)
class DriftReport:
    """Complete result of one engine call.

    Recomputed on every call; never mutated or persisted by the engine.
    """

    spec_name: str
    total_endpoints: int
    traffic_samples: int
    endpoints: tuple[Endpoint, ...]
    mismatches: tuple[Mismatch, ...]
    breaking_risks: tuple[BreakingRisk, ...]
    field_usage: tuple[FieldUsage, ...]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase report contract."""
        return {
            "specName": self.spec_name,
            "totalEndpoints": self.total_endpoints,
            "trafficSamples": self.traffic_samples,
            "endpoints": [
                {"method": e.method, "path": e.path, "hits": e.hits, "risk": e.risk} for e in self.endpoints
            ],
            "mismatches": [m.to_dict() for m in self.mismatches],
            "breakingRisks": [r.to_dict() for r in self.breaking_risks],
            "fieldUsage": [u.to_dict() for u in self.field_usage],
        }


@dataclass(frozen=True)
class DriftDashboard:
    """Report plus the views a consumer shows next to it."""

    report: DriftReport
    issues: tuple[Issue, ...]
    optimizer: tuple[BreakingRisk, ...]
    health_score: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize the report together with issues, optimizer and health score."""
        return {
            "report": self.report.to_dict(),
            "issues": [i.to_dict() for i in self.issues],
            "optimizer": [r.to_dict() for r in self.optimizer],
            "healthScore": self.health_score,
        }

    @property
    def ok_count(self) -> int:
        return sum(1 for e in self.report.endpoints if e.risk == "ok")

    @property
    def dead_count(self) -> int:
        return sum(1 for e in self.report.endpoints if e.risk == "dead")

    @property
    def deprecated_count(self) -> int:
        return sum(1 for e in self.report.endpoints if e.risk == "warning")
