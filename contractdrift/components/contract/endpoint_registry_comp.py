"""Endpoint registry extraction from a parsed specification.

Only the verbs in RECOGNIZED_METHODS are registered. Anything else under a
path (``options``, ``head``, ``parameters``, vendor extensions) is skipped
silently.
"""

from __future__ import annotations

from typing import Any

from contractdrift.helpers.dto.drift_dto import SpecEndpoint

RECOGNIZED_METHODS: tuple[str, ...] = ("get", "post", "put", "patch", "delete")


def endpoint_key(method: str, path: str) -> str:
    """Normalize (method, path) into the "METHOD /path" key used by traffic data."""
    return f"{method.upper()} {path}"


def build_endpoint_registry(spec_doc: dict[str, Any]) -> dict[str, SpecEndpoint]:
    """Extract declared endpoints from a specification document.

    Args:
        spec_doc: Parsed specification (``paths`` → method → details)

    Returns:
        Mapping of endpoint key to SpecEndpoint, in document order
    """
    paths = spec_doc.get("paths") if isinstance(spec_doc, dict) else None
    if not isinstance(paths, dict):
        return {}

    registry: dict[str, SpecEndpoint] = {}
    for path, methods in paths.items():
        if not isinstance(methods, dict):
            continue
        for method, details in methods.items():
            if not isinstance(method, str) or method not in RECOGNIZED_METHODS:
                continue
            deprecated = bool(details.get("deprecated", False)) if isinstance(details, dict) else False
            spec_endpoint = SpecEndpoint(method=method.upper(), path=str(path), deprecated=deprecated)
            registry[spec_endpoint.key] = spec_endpoint
    return registry
