"""Field mismatch detection over traffic field-presence and type observations.

Field-level analysis does not consult the endpoint registry: presence data
may reference endpoints the specification never declared.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from contractdrift.components.contract.field_heuristics_comp import (
    first_unexpected_type,
    has_mixed_types,
    is_likely_undocumented,
    is_unused,
)
from contractdrift.helpers.dto.drift_dto import Mismatch
from contractdrift.helpers.percent_helper import parse_percentage

UNKNOWN_FREQUENCY = "?"


def iter_endpoint_fields(section: Any) -> Iterator[tuple[str, str, Any]]:
    """Yield (endpoint, field, value) triples from an endpoint → field → value mapping.

    Non-mapping entries are skipped.
    """
    if not isinstance(section, dict):
        return
    for endpoint, fields in section.items():
        if not isinstance(fields, dict):
            continue
        for field_name, value in fields.items():
            yield str(endpoint), str(field_name), value


def detect_presence_mismatches(field_presence: dict[str, Any]) -> list[Mismatch]:
    """Emit ``extra`` and ``unused`` mismatches from field-presence data.

    The two rules are independent checks: a ``_v2`` field with 0% presence
    yields both an ``extra`` and an ``unused`` mismatch.

    Args:
        field_presence: endpoint key → field name → presence percentage

    Returns:
        Mismatches in document order
    """
    mismatches: list[Mismatch] = []
    for endpoint, field_name, raw in iter_endpoint_fields(field_presence):
        presence = parse_percentage(raw)
        if is_likely_undocumented(field_name):
            mismatches.append(
                Mismatch(type="extra", endpoint=endpoint, field=field_name, frequency=raw, severity="warning")
            )
        if is_unused(field_name, presence):
            mismatches.append(
                Mismatch(type="unused", endpoint=endpoint, field=field_name, frequency=raw, severity="warning")
            )
    return mismatches


def detect_type_mismatches(type_observations: dict[str, Any]) -> list[Mismatch]:
    """Emit ``type`` mismatches for fields observed with more than one type.

    Only the first observed type that differs from ``expected`` is reported,
    even if several unexpected types were seen.

    Args:
        type_observations: endpoint key → field name → {expected, observed}

    Returns:
        Mismatches in document order
    """
    mismatches: list[Mismatch] = []
    for endpoint, field_name, data in iter_endpoint_fields(type_observations):
        if not isinstance(data, dict):
            continue
        observed = data.get("observed")
        if not isinstance(observed, dict) or not has_mixed_types(observed):
            continue

        expected = data.get("expected")
        # Two distinct observed keys always include one that differs from expected
        actual = first_unexpected_type(expected, observed)
        mismatches.append(
            Mismatch(
                type="type",
                endpoint=endpoint,
                field=field_name,
                frequency=observed.get(actual) or UNKNOWN_FREQUENCY,
                severity="error",
                expected=None if expected is None else str(expected),
                actual=str(actual),
            )
        )
    return mismatches
