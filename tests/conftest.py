"""
Pytest fixtures and configuration for the test suite.

Provides small specification/traffic documents shared by unit and
integration tests, and isolates configuration from the host environment.
"""

import copy
import os
import sys
from pathlib import Path
from typing import Any

import pytest

# Add project root to path so tests can import contractdrift package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


SHOP_SPEC: dict[str, Any] = {
    "openapi": "3.0.0",
    "info": {"title": "Shop API"},
    "paths": {
        "/users": {
            "get": {},
            "post": {"deprecated": False},
            "options": {},
        },
        "/orders": {
            "post": {"deprecated": True},
            "delete": {},
        },
        "/health": {
            "head": {},
        },
    },
}

SHOP_TRAFFIC: dict[str, Any] = {
    "meta": {"total_requests": 12500},
    "aggregated_stats": {
        "by_endpoint": {
            "GET /users": {"count": 9000},
            "POST /users": {"count": 1200},
            "POST /orders": {"count": 42},
            "GET /internal/ping": {"count": 2258},
        },
        "field_presence": {
            "GET /users": {
                "id": "100%",
                "email": "0%",
                "metadata_extra": "12%",
                "token": "3%",
                "nickname": "15%",
                "user.token": "60%",
            },
            "POST /users": {
                "name": 98,
                "avatar_v2": "0%",
            },
        },
        "type_observations": {
            "GET /users": {
                "age": {"expected": "number", "observed": {"number": "80%", "string": "20%"}},
                "id": {"expected": "string", "observed": {"string": "100%"}},
            },
        },
    },
}


@pytest.fixture
def shop_spec() -> dict[str, Any]:
    """Specification with four recognized endpoints and two ignored verbs."""
    return copy.deepcopy(SHOP_SPEC)


@pytest.fixture
def shop_traffic() -> dict[str, Any]:
    """Traffic statistics matching shop_spec."""
    return copy.deepcopy(SHOP_TRAFFIC)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no config files and no CONTRACTDRIFT_* environment variables."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CONFIG_PATH", raising=False)
    for key in list(os.environ):
        if key.startswith("CONTRACTDRIFT_"):
            monkeypatch.delenv(key, raising=False)
    return tmp_path
