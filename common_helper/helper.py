"""Cross-stack naming helper for CDK stacks.

A ``CommonHelper`` is bound to one stack. It publishes outputs for other
stacks to import, writes and resolves SSM parameters under a consistent
naming policy, shares plain variables between stacks defined in the same
process, and looks up enumerated values by their string form.

Values written with ``put_parameter`` are literal, but ``get_parameter``
returns a CDK token that CloudFormation resolves during deployment. Do not
compare the result of ``get_parameter`` with the stored value at synth time.
"""

import logging
from typing import Any, Protocol

from .config import HelperConfig
from .enums import EnumCandidates, find_enum_type
from .naming import compute_key, output_id
from .registry import CfnOutputRegistry, OutputRegistry, ParameterStore, SsmParameterStore

logger = logging.getLogger(__name__)


class ICommonHelper(Protocol):
    """Operations a stack uses to share values with other stacks."""

    def find_enum_type(self, enum_set: EnumCandidates, target: str) -> Any | None: ...

    def export_output(
        self,
        key: str,
        value: str,
        prefix_enable: bool = True,
        prefix_custom_name: str | None = None,
    ) -> None: ...

    def put_parameter(
        self,
        param_key: str,
        param_value: str,
        prefix_enable: bool = True,
        prefix_custom_name: str | None = None,
    ) -> str: ...

    def get_parameter(
        self,
        param_key: str,
        prefix_enable: bool = True,
        prefix_custom_name: str | None = None,
    ) -> str: ...

    def put_variable(self, variable_key: str, variable_value: str) -> None: ...

    def get_variable(self, variable_key: str) -> str | None: ...


class CommonHelper:
    """Naming and state helper bound to a single stack.

    Attributes:
        config: Construction settings.
        stack_name: Identifier of the bound stack.
        project_prefix: Default prefix for exported and stored names.
    """

    def __init__(
        self,
        config: HelperConfig,
        output_registry: OutputRegistry | None = None,
        parameter_store: ParameterStore | None = None,
    ) -> None:
        self.config = config
        self.stack_name = config.stack_name
        self.project_prefix = config.project_prefix
        if output_registry is None:
            output_registry = CfnOutputRegistry(config.scope)
        if parameter_store is None:
            parameter_store = SsmParameterStore(config.scope)
        self.output_registry = output_registry
        self.parameter_store = parameter_store

    def find_enum_type(self, enum_set: EnumCandidates, target: str) -> Any | None:
        """Return the first value in ``enum_set`` whose string form is ``target``."""
        return find_enum_type(enum_set, target)

    def compute_key(
        self,
        key: str,
        prefix_enable: bool = True,
        prefix_custom_name: str | None = None,
    ) -> str:
        """Apply the naming policy with this helper's project prefix."""
        return compute_key(key, prefix_enable, prefix_custom_name, self.project_prefix)

    def export_output(
        self,
        key: str,
        value: str,
        prefix_enable: bool = True,
        prefix_custom_name: str | None = None,
    ) -> None:
        """Export ``value`` for import by other stacks.

        The output is registered as ``Output-<key>`` and exported as
        ``<prefix>-<key>``, or as ``key`` when ``prefix_enable`` is false.
        Exporting the same key twice from one stack raises
        ``DuplicateRegistrationError``.
        """
        export_name = self.compute_key(key, prefix_enable, prefix_custom_name)
        self.output_registry.register(output_id(key), export_name, value)

    def put_parameter(
        self,
        param_key: str,
        param_value: str,
        prefix_enable: bool = True,
        prefix_custom_name: str | None = None,
    ) -> str:
        """Store ``param_value`` in SSM Parameter Store.

        Returns:
            ``param_key`` unchanged. Pass it to ``get_parameter`` with the same
            prefix arguments to read the parameter back.
        """
        parameter_name = self.compute_key(param_key, prefix_enable, prefix_custom_name)
        self.parameter_store.write(parameter_name, param_value, param_key)
        return param_key

    def get_parameter(
        self,
        param_key: str,
        prefix_enable: bool = True,
        prefix_custom_name: str | None = None,
    ) -> str:
        """Return a deploy-time token for a stored parameter.

        Deployment fails if no parameter exists under the computed name.
        """
        parameter_name = self.compute_key(param_key, prefix_enable, prefix_custom_name)
        return self.parameter_store.resolve(parameter_name)

    def put_variable(self, variable_key: str, variable_value: str) -> None:
        """Set a shared variable, replacing any earlier value for the key."""
        logger.debug("Setting variable %s on %s", variable_key, self.stack_name)
        self.config.variables[variable_key] = variable_value

    def get_variable(self, variable_key: str) -> str | None:
        """Return a shared variable, or ``None`` if it was never set."""
        return self.config.variables.get(variable_key)
