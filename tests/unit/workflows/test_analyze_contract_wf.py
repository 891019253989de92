"""Tests for the contract drift analysis workflow."""

import json

import pytest

from contractdrift.workflows.drift.analyze_contract_wf import DEFAULT_SPEC_NAME, analyze_contract_workflow


def _traffic(by_endpoint=None, field_presence=None, type_observations=None, total=0):
    return {
        "meta": {"total_requests": total},
        "aggregated_stats": {
            "by_endpoint": by_endpoint or {},
            "field_presence": field_presence or {},
            "type_observations": type_observations or {},
        },
    }


class TestScenarios:
    """Small end-to-end drift cases."""

    @pytest.mark.unit
    def test_declared_endpoint_without_traffic_is_dead(self) -> None:
        report = analyze_contract_workflow({"paths": {"/users": {"get": {}}}}, _traffic())

        assert [(e.key, e.hits, e.risk) for e in report.endpoints] == [("GET /users", 0, "dead")]
        assert [r.to_dict() for r in report.breaking_risks] == [
            {"action": "Endpoint", "target": "GET /users", "impact": "Safe to delete - no traffic", "severity": "safe"}
        ]

    @pytest.mark.unit
    def test_deprecated_endpoint_with_traffic_is_warning(self) -> None:
        spec = {"paths": {"/orders": {"post": {"deprecated": True}}}}
        report = analyze_contract_workflow(spec, _traffic(by_endpoint={"POST /orders": {"count": 42}}))

        assert report.endpoints[0].risk == "warning"
        assert report.breaking_risks[0].severity == "deprecated"
        assert "42" in report.breaking_risks[0].impact

    @pytest.mark.unit
    def test_presence_mismatches(self) -> None:
        traffic = _traffic(field_presence={"GET /users": {"email": "0%", "metadata_extra": "12%"}})
        report = analyze_contract_workflow({}, traffic)

        assert [(m.type, m.field, m.severity) for m in report.mismatches] == [
            ("unused", "email", "warning"),
            ("extra", "metadata_extra", "warning"),
        ]

    @pytest.mark.unit
    def test_type_mismatch(self) -> None:
        observations = {"GET /users": {"age": {"expected": "number", "observed": {"number": "80%", "string": "20%"}}}}
        report = analyze_contract_workflow({}, _traffic(type_observations=observations))

        assert [m.to_dict() for m in report.mismatches] == [
            {
                "type": "type",
                "endpoint": "GET /users",
                "field": "age",
                "frequency": "20%",
                "severity": "error",
                "expected": "number",
                "actual": "string",
            }
        ]

    @pytest.mark.unit
    @pytest.mark.parametrize(("presence", "severity"), [("3%", "safe"), ("15%", "medium"), ("60%", "high")])
    def test_field_breaking_risk_thresholds(self, presence, severity) -> None:
        traffic = _traffic(field_presence={"GET /users": {"token": presence, "user.token": presence}})
        report = analyze_contract_workflow({}, traffic)

        assert [(r.target, r.severity) for r in report.breaking_risks] == [("token", severity)]


class TestShopReport:
    """Full report for the shared shop documents."""

    @pytest.mark.unit
    def test_header(self, shop_spec, shop_traffic) -> None:
        report = analyze_contract_workflow(shop_spec, shop_traffic)

        assert report.spec_name == "Shop API"
        assert report.total_endpoints == 4
        assert report.traffic_samples == 12500

    @pytest.mark.unit
    def test_spec_name_override(self, shop_spec, shop_traffic) -> None:
        report = analyze_contract_workflow(shop_spec, shop_traffic, spec_name="shop.yaml")
        assert report.spec_name == "shop.yaml"

    @pytest.mark.unit
    def test_default_spec_name(self, shop_traffic) -> None:
        assert analyze_contract_workflow({}, shop_traffic).spec_name == DEFAULT_SPEC_NAME
        assert analyze_contract_workflow({"info": {"title": ""}}, shop_traffic).spec_name == DEFAULT_SPEC_NAME

    @pytest.mark.unit
    def test_mismatches_presence_before_type(self, shop_spec, shop_traffic) -> None:
        report = analyze_contract_workflow(shop_spec, shop_traffic)

        assert [(m.type, m.field) for m in report.mismatches] == [
            ("unused", "email"),
            ("extra", "metadata_extra"),
            ("extra", "avatar_v2"),
            ("unused", "avatar_v2"),
            ("type", "age"),
        ]

    @pytest.mark.unit
    def test_breaking_risks_fields_before_endpoints(self, shop_spec, shop_traffic) -> None:
        report = analyze_contract_workflow(shop_spec, shop_traffic)

        assert [(r.action, r.target) for r in report.breaking_risks] == [
            ("Field", "id"),
            ("Field", "email"),
            ("Field", "metadata_extra"),
            ("Field", "token"),
            ("Field", "nickname"),
            ("Field", "name"),
            ("Field", "avatar_v2"),
            ("Endpoint", "POST /orders"),
            ("Endpoint", "DELETE /orders"),
        ]

    @pytest.mark.unit
    def test_report_serialization_keys(self, shop_spec, shop_traffic) -> None:
        data = analyze_contract_workflow(shop_spec, shop_traffic).to_dict()

        assert list(data) == [
            "specName",
            "totalEndpoints",
            "trafficSamples",
            "endpoints",
            "mismatches",
            "breakingRisks",
            "fieldUsage",
        ]
        assert data["fieldUsage"][0] == {"field": "id", "usage": 100.0}


class TestProperties:
    """Invariants that hold for any input."""

    @pytest.mark.unit
    def test_endpoints_sorted_by_hits(self, shop_spec, shop_traffic) -> None:
        hits = [e.hits for e in analyze_contract_workflow(shop_spec, shop_traffic).endpoints]
        assert hits == sorted(hits, reverse=True)

    @pytest.mark.unit
    def test_total_counts_unique_recognized_pairs(self) -> None:
        spec = {"paths": {"/a": {"get": {}, "trace": {}, "parameters": {}}, "/b": {"patch": {}, "put": {}}}}
        report = analyze_contract_workflow(spec, _traffic())

        assert report.total_endpoints == 3
        assert {e.method for e in report.endpoints} == {"GET", "PATCH", "PUT"}

    @pytest.mark.unit
    def test_repeated_calls_are_identical(self, shop_spec, shop_traffic) -> None:
        first = json.dumps(analyze_contract_workflow(shop_spec, shop_traffic).to_dict())
        second = json.dumps(analyze_contract_workflow(shop_spec, shop_traffic).to_dict())
        assert first == second

    @pytest.mark.unit
    def test_inputs_are_not_mutated(self, shop_spec, shop_traffic) -> None:
        spec_before = json.dumps(shop_spec)
        traffic_before = json.dumps(shop_traffic)

        analyze_contract_workflow(shop_spec, shop_traffic)

        assert json.dumps(shop_spec) == spec_before
        assert json.dumps(shop_traffic) == traffic_before

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("spec", "traffic"),
        [
            ({}, {}),
            (None, None),
            ({"paths": []}, {"aggregated_stats": "broken"}),
            ({"info": "text"}, {"meta": {"total_requests": "lots"}, "aggregated_stats": {"by_endpoint": []}}),
        ],
    )
    def test_malformed_documents_degrade_to_empty_report(self, spec, traffic) -> None:
        report = analyze_contract_workflow(spec, traffic)

        assert report.total_endpoints == 0
        assert report.traffic_samples == 0
        assert report.endpoints == ()
        assert report.mismatches == ()
        assert report.breaking_risks == ()
        assert report.field_usage == ()
