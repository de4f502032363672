"""Tests for the output and parameter naming policy."""

import pytest

from common_helper.naming import compute_key, output_id


class TestComputeKey:
    @pytest.mark.parametrize("key", ["Endpoint", "dbHost", "a/b", "x"])
    def test_project_prefix_applied_by_default(self, key):
        assert compute_key(key, True, None, "svc") == f"svc-{key}"

    @pytest.mark.parametrize("key", ["Endpoint", "dbHost"])
    def test_custom_prefix_replaces_project_prefix(self, key):
        assert compute_key(key, True, "shared", "svc") == f"shared-{key}"

    @pytest.mark.parametrize("custom", [None, "", "shared"])
    def test_prefix_disabled_returns_key_verbatim(self, custom):
        assert compute_key("Endpoint", False, custom, "svc") == "Endpoint"

    def test_empty_custom_prefix_falls_back_to_project_prefix(self):
        assert compute_key("Endpoint", True, "", "svc") == "svc-Endpoint"


class TestOutputId:
    def test_output_id_is_prefixed_with_output(self):
        assert output_id("A") == "Output-A"

    def test_output_id_ignores_prefix_policy(self):
        assert output_id("svc-A") == "Output-svc-A"
