"""Aggregate an HTTP archive (HAR) into traffic statistics.

A HAR file records individual requests; the drift engine consumes
pre-aggregated statistics. This component derives them:

- ``meta.total_requests``: number of entries
- ``aggregated_stats.by_endpoint``: request count per "METHOD /path"
- ``aggregated_stats.field_presence``: share of JSON request bodies carrying
  each field (nested fields as dotted paths)
- ``aggregated_stats.type_observations``: fields seen with more than one
  JSON type; the most frequent type is taken as the expected one

Paths are recorded literally. Templated specification paths such as
``/users/{id}`` only match traffic recorded on the same literal path.
"""

from __future__ import annotations

import json
import logging
from collections import Counter, defaultdict
from typing import Any
from urllib.parse import urlparse

from contractdrift.components.contract.endpoint_registry_comp import endpoint_key

logger = logging.getLogger(__name__)


def is_har_document(doc: dict[str, Any]) -> bool:
    """True for HTTP archives that have not been aggregated yet."""
    log = doc.get("log")
    return isinstance(log, dict) and isinstance(log.get("entries"), list) and "aggregated_stats" not in doc


def json_type_name(value: Any) -> str:
    """JSON type name of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "unknown"


def collect_observed_fields(payload: dict[str, Any], prefix: str, out: dict[str, str]) -> None:
    """Record the JSON type of every field in ``payload``, descending into objects."""
    for key, value in payload.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        out[path] = json_type_name(value)
        if isinstance(value, dict):
            collect_observed_fields(value, path, out)


def format_percentage(value: float) -> str:
    """Render a share as a percent string, e.g. 33.3333 -> "33.3%"."""
    return f"{round(value, 1):g}%"


def _request_body(request: dict[str, Any]) -> dict[str, Any] | None:
    post_data = request.get("postData")
    if not isinstance(post_data, dict):
        return None
    text = post_data.get("text")
    if not isinstance(text, str) or not text.strip():
        return None
    try:
        body = json.loads(text)
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def aggregate_har(doc: dict[str, Any]) -> dict[str, Any]:
    """Build a traffic document from HAR entries.

    Entries without a usable request (method and URL) are skipped but still
    count toward ``total_requests``.
    """
    entries = doc["log"]["entries"]

    counts: Counter[str] = Counter()
    body_samples: Counter[str] = Counter()
    field_hits: dict[str, Counter[str]] = defaultdict(Counter)
    type_hits: dict[str, dict[str, Counter[str]]] = defaultdict(lambda: defaultdict(Counter))
    skipped = 0

    for entry in entries:
        request = entry.get("request") if isinstance(entry, dict) else None
        if not isinstance(request, dict):
            skipped += 1
            continue
        method = request.get("method")
        url = request.get("url")
        if not isinstance(method, str) or not isinstance(url, str):
            skipped += 1
            continue

        key = endpoint_key(method, urlparse(url).path or "/")
        counts[key] += 1

        body = _request_body(request)
        if body is None:
            continue
        body_samples[key] += 1
        observed: dict[str, str] = {}
        collect_observed_fields(body, "", observed)
        for field_name, type_name in observed.items():
            field_hits[key][field_name] += 1
            type_hits[key][field_name][type_name] += 1

    if skipped:
        logger.info(f"[Intake] Skipped {skipped} HAR entries without a request method/url")

    field_presence = {
        key: {name: format_percentage(100 * hits / body_samples[key]) for name, hits in fields.items()}
        for key, fields in field_hits.items()
    }

    type_observations: dict[str, dict[str, Any]] = {}
    for key, fields in type_hits.items():
        for field_name, types in fields.items():
            if len(types) < 2:
                continue
            total = sum(types.values())
            type_observations.setdefault(key, {})[field_name] = {
                "expected": types.most_common(1)[0][0],
                "observed": {name: format_percentage(100 * n / total) for name, n in types.items()},
            }

    return {
        "meta": {"total_requests": len(entries), "source": "har"},
        "aggregated_stats": {
            "by_endpoint": {key: {"count": count} for key, count in counts.items()},
            "field_presence": field_presence,
            "type_observations": type_observations,
        },
    }
