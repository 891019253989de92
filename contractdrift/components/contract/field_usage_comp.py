"""Field usage ranking.

The ranking is drawn from a single endpoint, the first one in the traffic
document's field-presence section, not from a global aggregate.
"""

from __future__ import annotations

import math
from typing import Any

from contractdrift.helpers.dto.drift_dto import FieldUsage
from contractdrift.helpers.percent_helper import parse_percentage

FIELD_USAGE_LIMIT = 8


def _usage_sort_key(usage: FieldUsage) -> float:
    # NaN sorts after every real value
    return math.inf if math.isnan(usage.usage) else -usage.usage


def rank_field_usage(field_presence: dict[str, Any], limit: int = FIELD_USAGE_LIMIT) -> list[FieldUsage]:
    """Rank the first ``limit`` fields of the first endpoint by usage, highest first."""
    if not isinstance(field_presence, dict):
        return []
    for fields in field_presence.values():
        if not isinstance(fields, dict):
            return []
        ranked = [
            FieldUsage(field=str(name), usage=parse_percentage(raw))
            for name, raw in list(fields.items())[:limit]
        ]
        ranked.sort(key=_usage_sort_key)
        return ranked
    return []
