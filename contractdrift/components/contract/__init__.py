"""Contract drift components.

This module provides components for:
- Endpoint registry extraction from a specification
- Traffic correlation and endpoint risk classification
- Field mismatch detection (presence and type observations)
- Breaking-change risk assessment and field usage ranking
"""

from contractdrift.components.contract.breaking_risk_comp import (
    assess_endpoint_risks,
    assess_field_risks,
)
from contractdrift.components.contract.endpoint_registry_comp import (
    build_endpoint_registry,
    endpoint_key,
)
from contractdrift.components.contract.field_usage_comp import rank_field_usage
from contractdrift.components.contract.mismatch_detector_comp import (
    detect_presence_mismatches,
    detect_type_mismatches,
)
from contractdrift.components.contract.traffic_correlator_comp import (
    classify_endpoint_risk,
    correlate_endpoints,
)

__all__ = [
    "assess_endpoint_risks",
    "assess_field_risks",
    "build_endpoint_registry",
    "classify_endpoint_risk",
    "correlate_endpoints",
    "detect_presence_mismatches",
    "detect_type_mismatches",
    "endpoint_key",
    "rank_field_usage",
]
