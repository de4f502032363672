"""Tests for the CDK-backed output registry and parameter store."""

import pytest
from aws_cdk import Stack, Token
from aws_cdk.assertions import Template

from common_helper import DuplicateRegistrationError
from common_helper.registry import CfnOutputRegistry, SsmParameterStore


class TestCfnOutputRegistry:
    def test_register_creates_exported_output(self, stack):
        CfnOutputRegistry(stack).register("Output-Endpoint", "svc-Endpoint", "https://x")

        outputs = Template.from_stack(stack).find_outputs("*")
        assert list(outputs.values()) == [
            {"Value": "https://x", "Export": {"Name": "svc-Endpoint"}},
        ]

    def test_duplicate_local_id_raises(self, stack):
        registry = CfnOutputRegistry(stack)
        registry.register("Output-A", "A", "v")

        with pytest.raises(DuplicateRegistrationError) as exc_info:
            registry.register("Output-A", "B", "w")
        assert exc_info.value.identifier == "Output-A"
        assert exc_info.value.scope_path == stack.node.path

    def test_same_local_id_in_different_stacks(self, cdk_app):
        for name in ("First", "Second"):
            CfnOutputRegistry(Stack(cdk_app, name)).register("Output-A", f"{name}-A", "v")


class TestSsmParameterStore:
    def test_write_uses_key_as_construct_id_by_default(self, stack):
        SsmParameterStore(stack).write("svc-dbHost", "10.0.0.1")

        assert stack.node.try_find_child("svc-dbHost") is not None
        Template.from_stack(stack).has_resource_properties(
            "AWS::SSM::Parameter", {"Name": "svc-dbHost", "Value": "10.0.0.1"},
        )

    def test_write_with_explicit_construct_id(self, stack):
        SsmParameterStore(stack).write("svc-dbHost", "10.0.0.1", "dbHost")

        assert stack.node.try_find_child("dbHost") is not None

    def test_duplicate_name_raises(self, stack):
        store = SsmParameterStore(stack)
        store.write("svc-dbHost", "10.0.0.1", "first")

        with pytest.raises(DuplicateRegistrationError):
            store.write("svc-dbHost", "10.0.0.2", "second")

    def test_duplicate_construct_id_raises(self, stack):
        SsmParameterStore(stack).write("svc-dbHost", "10.0.0.1", "dbHost")

        with pytest.raises(DuplicateRegistrationError) as exc_info:
            SsmParameterStore(stack).write("other-dbHost", "10.0.0.2", "dbHost")
        assert exc_info.value.identifier == "dbHost"

    def test_resolve_returns_unresolved_token(self, stack):
        assert Token.is_unresolved(SsmParameterStore(stack).resolve("svc-dbHost"))

    def test_resolve_missing_parameter_does_not_fail_at_synth(self, stack):
        SsmParameterStore(stack).resolve("never-written")

        Template.from_stack(stack).has_parameter(
            "*", {"Type": "AWS::SSM::Parameter::Value<String>", "Default": "never-written"},
        )
