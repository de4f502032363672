"""Base stack that carries a ``CommonHelper`` for its subclasses."""

from typing import Any

from aws_cdk import Stack
from constructs import Construct

from .config import HelperConfig, ProjectConfig, VariableMap
from .helper import CommonHelper


class BaseStack(Stack):
    """CDK stack named and tagged after the project it belongs to.

    The stack name is ``<project_prefix>-<construct_id>``. All stacks of an app
    should receive the same ``variables`` mapping so values put by one stack
    can be read by stacks defined after it.

    Attributes:
        project_config: Project settings the stack was created with.
        common_helper: Helper bound to this stack.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        project_config: ProjectConfig,
        variables: VariableMap,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("stack_name", f"{project_config.project_prefix}-{construct_id}")
        kwargs.setdefault("env", project_config.to_environment())
        super().__init__(scope, construct_id, **kwargs)

        self.project_config = project_config
        self.common_helper = CommonHelper(
            HelperConfig(
                stack_name=self.stack_name,
                project_prefix=project_config.project_prefix,
                scope=self,
                variables=variables,
                env=kwargs["env"],
            ),
        )

        self.tags.set_tag("Project", project_config.name)
        self.tags.set_tag("Stage", project_config.stage)
        self.tags.set_tag("ManagedBy", "CDK")

    def export_output(
        self,
        key: str,
        value: str,
        prefix_enable: bool = True,
        prefix_custom_name: str | None = None,
    ) -> None:
        self.common_helper.export_output(key, value, prefix_enable, prefix_custom_name)

    def put_parameter(
        self,
        param_key: str,
        param_value: str,
        prefix_enable: bool = True,
        prefix_custom_name: str | None = None,
    ) -> str:
        return self.common_helper.put_parameter(
            param_key, param_value, prefix_enable, prefix_custom_name,
        )

    def get_parameter(
        self,
        param_key: str,
        prefix_enable: bool = True,
        prefix_custom_name: str | None = None,
    ) -> str:
        return self.common_helper.get_parameter(param_key, prefix_enable, prefix_custom_name)

    def put_variable(self, variable_key: str, variable_value: str) -> None:
        self.common_helper.put_variable(variable_key, variable_value)

    def get_variable(self, variable_key: str) -> str | None:
        return self.common_helper.get_variable(variable_key)
