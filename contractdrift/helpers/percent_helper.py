"""
Percentage parsing for traffic statistics.

Traffic documents express presence and type frequencies either as numbers
(``42``, ``12.5``) or as strings optionally suffixed with ``%`` (``"42%"``).
Malformed and non-finite values become NaN, which compares false against
every threshold.
"""

from __future__ import annotations

import math
import re
from typing import Any

# Plain decimal or exponent notation only (no inf, nan or digit separators)
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_percentage(value: Any) -> float:
    """
    Parse a numeric-or-percent-string value into a float.

    Args:
        value: Raw traffic value (int, float, or string like "12%")

    Returns:
        Parsed float, or NaN when the value is not a finite number

    Example:
        >>> parse_percentage("12.5%")
        12.5
        >>> parse_percentage(3)
        3.0
        >>> math.isnan(parse_percentage("n/a"))
        True
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        try:
            parsed = float(value)
        except OverflowError:
            return math.nan
        return parsed if math.isfinite(parsed) else math.nan
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    if text.endswith("%"):
        text = text[:-1].rstrip()
    if not _NUMBER_RE.fullmatch(text):
        return math.nan
    parsed = float(text)
    return parsed if math.isfinite(parsed) else math.nan


def parse_count(value: Any) -> int:
    """
    Parse a request count, defaulting to 0 for anything that is not a count.

    Integral floats and numeric strings are accepted; negative values and
    non-numeric values become 0.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        return int(value) if math.isfinite(value) and value > 0 else 0
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return 0
        return int(parsed) if math.isfinite(parsed) and parsed > 0 else 0
    return 0
