"""Workflow for the consumer views of a drift report.

Builds the merged issue list, the optimizer list (what can be deleted) and
the health score. All sorts are stable, so ties keep their input order.
"""

from __future__ import annotations

import math

from contractdrift.components.contract.breaking_risk_comp import format_hits
from contractdrift.helpers.dto.drift_dto import BreakingRisk, DriftDashboard, DriftReport, Endpoint, Issue

ISSUE_SEVERITY_ORDER = {"error": 0, "warning": 1, "dead": 2}
OPTIMIZER_ACTION_ORDER = {"Field": 0, "Endpoint": 1}
OPTIMIZER_SEVERITY_ORDER = {"safe": 0, "deprecated": 1}
OPTIMIZER_SEVERITIES = ("safe", "deprecated")


def collect_issues(report: DriftReport) -> list[Issue]:
    """Merge mismatches with dead and deprecated endpoints, most severe first."""
    issues = [
        Issue(
            type=m.type,
            endpoint=m.endpoint,
            field=m.field,
            frequency=m.frequency,
            severity=m.severity,
            expected=m.expected,
            actual=m.actual,
        )
        for m in report.mismatches
    ]
    issues.extend(
        Issue(type="dead", endpoint=e.key, field=e.key, frequency="0 requests", severity="dead")
        for e in report.endpoints
        if e.risk == "dead"
    )
    issues.extend(
        Issue(
            type="deprecated",
            endpoint=e.key,
            field=e.key,
            frequency=f"{format_hits(e.hits)} requests",
            severity="warning",
        )
        for e in report.endpoints
        if e.risk == "warning"
    )
    issues.sort(key=lambda i: ISSUE_SEVERITY_ORDER.get(i.severity, 3))
    return issues


def collect_optimizer_items(report: DriftReport) -> list[BreakingRisk]:
    """Breaking risks that can be acted on: safe deletions and deprecated endpoints.

    Ordered fields before endpoints, then safe before deprecated.
    """
    items = [r for r in report.breaking_risks if r.severity in OPTIMIZER_SEVERITIES]
    items.sort(
        key=lambda r: (
            OPTIMIZER_ACTION_ORDER.get(r.action, 2),
            OPTIMIZER_SEVERITY_ORDER.get(r.severity, 2),
        )
    )
    return items


def compute_health_score(endpoints: tuple[Endpoint, ...] | list[Endpoint]) -> int:
    """Percentage of healthy endpoints, rounded half up; 0 with no endpoints."""
    if not endpoints:
        return 0
    ok = sum(1 for e in endpoints if e.risk == "ok")
    return math.floor(100 * ok / len(endpoints) + 0.5)


def assemble_dashboard(report: DriftReport) -> DriftDashboard:
    """Bundle a report with its issue list, optimizer list and health score."""
    return DriftDashboard(
        report=report,
        issues=tuple(collect_issues(report)),
        optimizer=tuple(collect_optimizer_items(report)),
        health_score=compute_health_score(report.endpoints),
    )
