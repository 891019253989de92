"""Field classification heuristics.

These are naming-convention predicates, not a cross-reference against the
specification's schemas. Keep them isolated here so a real schema diff can
replace them without touching the aggregation in mismatch_detector_comp.
"""

from __future__ import annotations

import math

UNDOCUMENTED_MARKERS: tuple[str, ...] = ("metadata", "_v2")
METADATA_MARKER = "metadata"


def is_likely_undocumented(field_name: str) -> bool:
    """True when the name suggests an undocumented extension (``metadata``, ``_v2``)."""
    return any(marker in field_name for marker in UNDOCUMENTED_MARKERS)


def is_unused(field_name: str, presence: float) -> bool:
    """True when the field never appears in traffic (metadata fields excepted)."""
    return presence == 0 and METADATA_MARKER not in field_name


def is_top_level_field(field_name: str) -> bool:
    """True for fields without a dotted parent path."""
    return "." not in field_name


def has_mixed_types(observed: dict) -> bool:
    """True when more than one concrete type was observed for a field."""
    return len(observed) > 1


def first_unexpected_type(expected: object, observed: dict) -> str | None:
    """First observed type that differs from ``expected``, in observation order."""
    for type_name in observed:
        if type_name != expected:
            return type_name
    return None


def is_below(value: float, threshold: float) -> bool:
    """Strict threshold check; NaN is never below anything."""
    return not math.isnan(value) and value < threshold
