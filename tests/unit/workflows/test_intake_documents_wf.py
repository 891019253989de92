"""Tests for the document intake workflow."""

import json

import pytest

from contractdrift.workflows.drift.intake_documents_wf import intake_documents_workflow

SPEC_MARKUP = "info:\n  title: Shop API\npaths:\n  /users:\n    get:\n"


class TestIntakeDocumentsWorkflow:
    """Per-file decoding and role assignment."""

    @pytest.mark.unit
    def test_accepts_spec_and_traffic(self, shop_traffic) -> None:
        result = intake_documents_workflow(
            [("shop.yaml", SPEC_MARKUP), ("traffic.json", json.dumps(shop_traffic))]
        )

        assert result.spec.name == "shop.yaml"
        assert result.spec.content["info"]["title"] == "Shop API"
        assert result.traffic.name == "traffic.json"
        assert result.failures == ()
        assert result.skipped == ()

    @pytest.mark.unit
    def test_order_of_files_does_not_matter(self, shop_traffic) -> None:
        result = intake_documents_workflow(
            [("traffic.json", json.dumps(shop_traffic)), ("shop.yaml", SPEC_MARKUP)]
        )
        assert result.spec.role == "spec"
        assert result.traffic.role == "traffic"

    @pytest.mark.unit
    def test_broken_file_does_not_block_the_other(self) -> None:
        result = intake_documents_workflow([("shop.yaml", "title: Shop\n  version: 1\n"), ("traffic.json", "{}")])

        assert result.spec is None
        assert result.traffic is not None
        assert len(result.failures) == 1
        assert result.failures[0].name == "shop.yaml"
        assert "cannot nest under a scalar value" in result.failures[0].reason

    @pytest.mark.unit
    def test_unsupported_files_are_skipped(self) -> None:
        result = intake_documents_workflow([("notes.txt", "hello")])

        assert result.skipped == ("notes.txt",)
        assert result.spec is None
        assert result.traffic is None

    @pytest.mark.unit
    def test_last_file_of_a_role_wins(self) -> None:
        result = intake_documents_workflow([("a.json", "{}"), ("b.json", '{"meta": {}}')])
        assert result.traffic.name == "b.json"

    @pytest.mark.unit
    def test_yaml_parser_option(self) -> None:
        result = intake_documents_workflow([("shop.yaml", "tags:\n  - a\n")], markup_parser="yaml")

        assert result.failures == ()
        assert result.spec.content == {"tags": ["a"]}
