"""Join declared endpoints with observed hit counts and classify their risk."""

from __future__ import annotations

from typing import Any

from contractdrift.helpers.dto.drift_dto import Endpoint, EndpointRisk, SpecEndpoint
from contractdrift.helpers.percent_helper import parse_count


def classify_endpoint_risk(hits: int, deprecated: bool) -> EndpointRisk:
    """Classify one endpoint.

    Precedence: no traffic is ``dead`` even when deprecated; live deprecated
    endpoints are ``warning``; everything else is ``ok``.
    """
    if hits == 0:
        return "dead"
    if deprecated:
        return "warning"
    return "ok"


def lookup_hits(by_endpoint: dict[str, Any], key: str) -> int:
    """Return the request count recorded for ``key`` (0 when absent)."""
    entry = by_endpoint.get(key)
    if not isinstance(entry, dict):
        return 0
    return parse_count(entry.get("count"))


def correlate_endpoints(
    registry: dict[str, SpecEndpoint],
    by_endpoint: dict[str, Any],
) -> list[Endpoint]:
    """Classify every declared endpoint against the traffic counts.

    Endpoints seen in traffic but absent from the specification are not
    reported; drift is framed from the contract's point of view.

    Args:
        registry: Output of build_endpoint_registry
        by_endpoint: ``aggregated_stats.by_endpoint`` from the traffic document

    Returns:
        Endpoints sorted by hits, busiest first (stable for ties)
    """
    endpoints = []
    for key, spec_endpoint in registry.items():
        hits = lookup_hits(by_endpoint, key)
        endpoints.append(
            Endpoint(
                method=spec_endpoint.method,
                path=spec_endpoint.path,
                hits=hits,
                risk=classify_endpoint_risk(hits, spec_endpoint.deprecated),
            )
        )
    endpoints.sort(key=lambda e: e.hits, reverse=True)
    return endpoints
