"""Tests for DriftService session handling."""

import json

import pytest

from contractdrift.helpers.dto.config_dto import DriftSettings
from contractdrift.helpers.exceptions import DocumentParseError
from contractdrift.services.drift_svc import DriftService


@pytest.fixture
def service() -> DriftService:
    return DriftService(DriftSettings())


@pytest.fixture
def spec_file(shop_spec):
    return ("shop.json", json.dumps(shop_spec))


@pytest.fixture
def traffic_file(shop_traffic):
    return ("traffic.json", json.dumps(shop_traffic).encode())


class TestAnalyze:
    @pytest.mark.unit
    def test_stateless_analysis(self, service, shop_spec, shop_traffic) -> None:
        dashboard = service.analyze(shop_spec, shop_traffic)

        assert dashboard.report.spec_name == "Shop API"
        assert dashboard.health_score == 50
        assert service.current_dashboard() is None


class TestLoadFile:
    @pytest.mark.unit
    def test_uses_configured_markup_parser(self) -> None:
        service = DriftService(DriftSettings(markup_parser="yaml"))
        loaded = service.load_file("spec.yaml", "tags:\n  - users\n")
        assert loaded.content == {"tags": ["users"]}

    @pytest.mark.unit
    def test_parse_errors_propagate(self, service) -> None:
        with pytest.raises(DocumentParseError):
            service.load_file("spec.yaml", "title: Shop\n  version: 1\n")


class TestSubmitFiles:
    """Analysis is deferred until both documents are accepted."""

    @pytest.mark.unit
    def test_waits_for_both_documents(self, service, spec_file, traffic_file) -> None:
        first = service.submit_files([spec_file])
        assert not first.ready
        assert first.spec_name == "shop.json"
        assert first.traffic_name is None

        second = service.submit_files([traffic_file])
        assert second.ready
        assert second.dashboard.report.spec_name == "shop.json"
        assert service.current_dashboard() is second.dashboard

    @pytest.mark.unit
    def test_single_batch_with_both_files(self, service, spec_file, traffic_file) -> None:
        result = service.submit_files([traffic_file, spec_file])

        assert result.ready
        assert result.dashboard.report.total_endpoints == 4

    @pytest.mark.unit
    def test_failed_file_keeps_previous_documents(self, service, spec_file, traffic_file) -> None:
        service.submit_files([spec_file, traffic_file])
        before = service.current_dashboard()

        result = service.submit_files([("traffic.json", "{broken")])

        assert len(result.intake.failures) == 1
        assert result.dashboard is before
        assert result.traffic_name == "traffic.json"

    @pytest.mark.unit
    def test_new_traffic_replaces_old(self, service, spec_file, traffic_file) -> None:
        service.submit_files([spec_file, traffic_file])

        replacement = {"meta": {"total_requests": 5}, "aggregated_stats": {"by_endpoint": {}}}
        result = service.submit_files([("quiet.json", json.dumps(replacement))])

        assert result.traffic_name == "quiet.json"
        assert result.dashboard.report.traffic_samples == 5
        assert result.dashboard.health_score == 0

    @pytest.mark.unit
    def test_reset_forgets_everything(self, service, spec_file, traffic_file) -> None:
        service.submit_files([spec_file, traffic_file])

        service.reset()

        assert service.current_dashboard() is None
        result = service.submit_files([traffic_file])
        assert not result.ready
        assert result.spec_name is None


OPENAPI_MARKUP = """\
openapi: 3.0.3
info:
  title: Shop API
  description: |
    Public shop endpoints.
    Auth: bearer token
servers:
  - url: https://api.shop.test
tags:
  - name: users
paths:
  /users:
    get:
      tags:
        - users
      parameters:
        - name: limit
          in: query
          required: false
      responses:
        '200':
          description: OK
  /orders:
    post:
      deprecated: true
      requestBody:
        content:
          application/json:
            schema:
              required:
                - item
"""


class TestOpenApiMarkup:
    """Ordinary OpenAPI markup is read with the built-in parser."""

    @pytest.mark.unit
    def test_spec_with_lists_is_accepted(self, service, shop_traffic) -> None:
        result = service.submit_files([("openapi.yaml", OPENAPI_MARKUP), ("traffic.json", json.dumps(shop_traffic))])

        assert result.intake.failures == ()
        assert result.spec_name == "openapi.yaml"
        report = result.dashboard.report
        assert report.total_endpoints == 2
        assert [(e.key, e.risk) for e in report.endpoints] == [("GET /users", "ok"), ("POST /orders", "warning")]

    @pytest.mark.unit
    def test_list_holders_read_as_empty_mappings(self, service) -> None:
        loaded = service.load_file("openapi.yaml", OPENAPI_MARKUP)

        assert loaded.role == "spec"
        assert loaded.content["servers"] == {}
        assert loaded.content["paths"]["/users"]["get"]["parameters"] == {}
        assert loaded.content["info"]["description"] == "Public shop endpoints.\nAuth: bearer token"
