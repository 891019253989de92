"""Breaking-change risk assessment for fields and endpoints.

Answers "what breaks if this is removed from the contract?" using observed
usage. Field thresholds are strict: below 5% is safe, below 30% is medium,
anything else (including unparseable values) is high.
"""

from __future__ import annotations

from typing import Any

from contractdrift.components.contract.field_heuristics_comp import is_below, is_top_level_field
from contractdrift.components.contract.mismatch_detector_comp import iter_endpoint_fields
from contractdrift.helpers.dto.drift_dto import BreakingRisk, Endpoint, RiskSeverity
from contractdrift.helpers.percent_helper import parse_percentage

SAFE_THRESHOLD = 5.0
MEDIUM_THRESHOLD = 30.0


def field_risk_severity(presence: float) -> RiskSeverity:
    """Map a presence percentage to a field risk severity."""
    if is_below(presence, SAFE_THRESHOLD):
        return "safe"
    if is_below(presence, MEDIUM_THRESHOLD):
        return "medium"
    return "high"


def format_hits(hits: int) -> str:
    """Format a request count with thousands separators."""
    return f"{hits:,}"


def assess_field_risks(field_presence: dict[str, Any]) -> list[BreakingRisk]:
    """Assess removal risk for every top-level field in field-presence data.

    Dotted (nested) fields are excluded. A field present under several
    endpoints yields one entry per endpoint.
    """
    risks: list[BreakingRisk] = []
    for _endpoint, field_name, raw in iter_endpoint_fields(field_presence):
        if not is_top_level_field(field_name):
            continue
        severity = field_risk_severity(parse_percentage(raw))
        impact = "Safe to delete" if severity == "safe" else f"Don't delete - {raw} of traffic"
        risks.append(BreakingRisk(action="Field", target=field_name, impact=impact, severity=severity))
    return risks


def assess_endpoint_risks(endpoints: list[Endpoint]) -> list[BreakingRisk]:
    """Assess removal risk for dead and deprecated-but-live endpoints.

    Healthy endpoints produce no entry.
    """
    risks: list[BreakingRisk] = []
    for endpoint in endpoints:
        if endpoint.risk == "dead":
            risks.append(
                BreakingRisk(
                    action="Endpoint",
                    target=endpoint.key,
                    impact="Safe to delete - no traffic",
                    severity="safe",
                )
            )
        elif endpoint.risk == "warning":
            risks.append(
                BreakingRisk(
                    action="Endpoint",
                    target=endpoint.key,
                    impact=f"Deprecated - still {format_hits(endpoint.hits)} requests",
                    severity="deprecated",
                )
            )
    return risks
