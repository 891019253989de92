"""Workflow for comparing a specification against aggregated traffic.

Orchestrates: registry → correlation → mismatches → risks → field usage

This is the drift engine. It is a pure transform of its two inputs: no I/O,
no shared state, and no exceptions for any JSON-like input. Missing or
malformed sections degrade to empty results.
"""

from __future__ import annotations

import logging
from typing import Any

from contractdrift.components.contract.breaking_risk_comp import assess_endpoint_risks, assess_field_risks
from contractdrift.components.contract.endpoint_registry_comp import build_endpoint_registry
from contractdrift.components.contract.field_usage_comp import rank_field_usage
from contractdrift.components.contract.mismatch_detector_comp import (
    detect_presence_mismatches,
    detect_type_mismatches,
)
from contractdrift.components.contract.traffic_correlator_comp import correlate_endpoints
from contractdrift.helpers.dto.drift_dto import DriftReport
from contractdrift.helpers.percent_helper import parse_count

logger = logging.getLogger(__name__)

DEFAULT_SPEC_NAME = "API Spec"


def _section(doc: Any, *keys: str) -> dict[str, Any]:
    """Walk nested mappings, returning {} as soon as a level is missing."""
    node = doc
    for key in keys:
        if not isinstance(node, dict):
            return {}
        node = node.get(key)
    return node if isinstance(node, dict) else {}


def _spec_title(spec_doc: Any) -> str:
    title = _section(spec_doc, "info").get("title")
    return title if isinstance(title, str) and title else DEFAULT_SPEC_NAME


def analyze_contract_workflow(
    spec_doc: dict[str, Any],
    traffic_doc: dict[str, Any],
    *,
    spec_name: str | None = None,
) -> DriftReport:
    """Derive the drift report for one specification and one traffic document.

    Workflow:
    1. Build the endpoint registry from ``paths``
    2. Correlate with ``aggregated_stats.by_endpoint`` and classify risk
    3. Detect presence and type mismatches
    4. Assess field and endpoint breaking risks
    5. Rank field usage for the first endpoint with presence data

    Args:
        spec_doc: Parsed specification document
        traffic_doc: Parsed traffic statistics document
        spec_name: Optional display name overriding ``info.title``

    Returns:
        DriftReport (immutable)
    """
    stats = _section(traffic_doc, "aggregated_stats")
    by_endpoint = _section(stats, "by_endpoint")
    field_presence = _section(stats, "field_presence")
    type_observations = _section(stats, "type_observations")

    # Step 1-2: Registry and traffic correlation
    registry = build_endpoint_registry(spec_doc if isinstance(spec_doc, dict) else {})
    endpoints = correlate_endpoints(registry, by_endpoint)

    # Step 3: Field mismatches
    mismatches = detect_presence_mismatches(field_presence) + detect_type_mismatches(type_observations)

    # Step 4: Breaking risks, fields first
    breaking_risks = assess_field_risks(field_presence) + assess_endpoint_risks(endpoints)

    # Step 5: Field usage
    field_usage = rank_field_usage(field_presence)

    report = DriftReport(
        spec_name=spec_name or _spec_title(spec_doc),
        total_endpoints=len(registry),
        traffic_samples=parse_count(_section(traffic_doc, "meta").get("total_requests")),
        endpoints=tuple(endpoints),
        mismatches=tuple(mismatches),
        breaking_risks=tuple(breaking_risks),
        field_usage=tuple(field_usage),
    )

    logger.debug(
        f"[Drift] {report.spec_name}: {report.total_endpoints} endpoints, "
        f"{len(report.mismatches)} mismatches, {len(report.breaking_risks)} breaking risks"
    )
    return report
