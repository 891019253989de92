"""
Integration tests for the drift web API (/api/web/drift/*).

Services are injected through FastAPI dependency overrides so each test
gets a fresh session.
"""

import json

import pytest
from fastapi.testclient import TestClient

from contractdrift.helpers.dto.config_dto import DriftSettings
from contractdrift.interfaces.api.api_app import api_app
from contractdrift.interfaces.api.web.dependencies import get_config_service, get_drift_service
from contractdrift.services.config_svc import ConfigService
from contractdrift.services.drift_svc import DriftService

pytestmark = [pytest.mark.integration]


@pytest.fixture
def drift_service():
    return DriftService(DriftSettings())


@pytest.fixture
def api_client(drift_service, isolated_config):
    """Create TestClient with overridden service dependencies."""
    config_service = ConfigService(overrides={"markup_parser": "yaml"})
    api_app.dependency_overrides[get_drift_service] = lambda: drift_service
    api_app.dependency_overrides[get_config_service] = lambda: config_service

    yield TestClient(api_app)

    # Cleanup: Reset dependency overrides
    api_app.dependency_overrides.clear()


def _upload(*files):
    return [("files", (name, content.encode(), "application/octet-stream")) for name, content in files]


class TestHealthEndpoint:
    def test_health(self, api_client):
        response = api_client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestAnalyzeEndpoint:
    """Test POST /api/web/drift/analyze."""

    def test_analyze_documents(self, api_client, shop_spec, shop_traffic):
        response = api_client.post("/api/web/drift/analyze", json={"spec": shop_spec, "traffic": shop_traffic})

        assert response.status_code == 200
        data = response.json()
        assert data["healthScore"] == 50
        assert data["report"]["specName"] == "Shop API"
        assert data["report"]["trafficSamples"] == 12500
        assert [i["type"] for i in data["issues"]][0] == "type"
        assert data["optimizer"][-1] == {
            "action": "Endpoint",
            "target": "POST /orders",
            "impact": "Deprecated - still 42 requests",
            "severity": "deprecated",
        }

    def test_analyze_unparseable_usage_is_null(self, api_client):
        traffic = {"aggregated_stats": {"field_presence": {"GET /a": {"x": "n/a"}}}}

        response = api_client.post("/api/web/drift/analyze", json={"spec": {}, "traffic": traffic})

        assert response.status_code == 200
        assert response.json()["report"]["fieldUsage"] == [{"field": "x", "usage": None}]

    def test_analyze_requires_both_documents(self, api_client, shop_spec):
        response = api_client.post("/api/web/drift/analyze", json={"spec": shop_spec})
        assert response.status_code == 422


class TestUploadEndpoint:
    """Test POST /api/web/drift/upload and the session endpoints."""

    def test_upload_both_files(self, api_client, shop_spec, shop_traffic):
        files = _upload(("shop.json", json.dumps(shop_spec)), ("traffic.json", json.dumps(shop_traffic)))

        response = api_client.post("/api/web/drift/upload", files=files)

        assert response.status_code == 200
        data = response.json()
        assert data["specFile"] == "shop.json"
        assert data["trafficFile"] == "traffic.json"
        assert data["failures"] == []
        assert data["dashboard"]["report"]["specName"] == "shop.json"

    def test_upload_in_two_steps(self, api_client, shop_spec, shop_traffic):
        first = api_client.post("/api/web/drift/upload", files=_upload(("shop.json", json.dumps(shop_spec))))
        assert first.json()["dashboard"] is None
        assert api_client.get("/api/web/drift/current").status_code == 404

        second = api_client.post("/api/web/drift/upload", files=_upload(("traffic.json", json.dumps(shop_traffic))))
        assert second.json()["dashboard"]["healthScore"] == 50

        current = api_client.get("/api/web/drift/current")
        assert current.status_code == 200
        assert current.json()["healthScore"] == 50

    def test_parse_failure_is_reported_per_file(self, api_client, shop_traffic):
        files = _upload(("shop.yaml", "title: Shop\n  version: 1\n"), ("traffic.json", json.dumps(shop_traffic)))

        response = api_client.post("/api/web/drift/upload", files=files)

        assert response.status_code == 200
        data = response.json()
        assert data["trafficFile"] == "traffic.json"
        assert data["specFile"] is None
        assert data["failures"][0]["name"] == "shop.yaml"
        assert "cannot nest under a scalar value" in data["failures"][0]["reason"]

    def test_unsupported_files_are_skipped(self, api_client):
        response = api_client.post("/api/web/drift/upload", files=_upload(("notes.txt", "hello")))

        assert response.status_code == 200
        assert response.json()["skipped"] == ["notes.txt"]

    def test_oversized_file_is_rejected(self, isolated_config, shop_spec):
        small = DriftService(DriftSettings(max_upload_bytes=10))
        api_app.dependency_overrides[get_drift_service] = lambda: small
        try:
            client = TestClient(api_app)
            response = client.post("/api/web/drift/upload", files=_upload(("shop.json", json.dumps(shop_spec))))
        finally:
            api_app.dependency_overrides.clear()

        assert response.status_code == 200
        data = response.json()
        assert data["specFile"] is None
        assert data["failures"] == [{"name": "shop.json", "reason": "file larger than 10 bytes"}]

    def test_reset(self, api_client, shop_spec, shop_traffic):
        files = _upload(("shop.json", json.dumps(shop_spec)), ("traffic.json", json.dumps(shop_traffic)))
        api_client.post("/api/web/drift/upload", files=files)

        response = api_client.post("/api/web/drift/reset")

        assert response.status_code == 200
        assert response.json() == {"status": "reset"}
        assert api_client.get("/api/web/drift/current").status_code == 404


class TestInfoEndpoint:
    def test_info(self, api_client):
        response = api_client.get("/api/web/drift/info")

        assert response.status_code == 200
        data = response.json()
        assert data["recognizedMethods"] == ["get", "post", "put", "patch", "delete"]
        assert data["fieldUsageLimit"] == 8
        assert data["markupParser"] == "yaml"
