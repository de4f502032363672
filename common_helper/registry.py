"""Output registry and parameter store collaborators backed by AWS CDK.

The helper only talks to the ``OutputRegistry`` and ``ParameterStore``
protocols. The CDK implementations below register ``CfnOutput`` exports and
SSM ``StringParameter`` resources against the construct the helper is bound
to, and reject reused identifiers with ``DuplicateRegistrationError``.
"""

import logging
from typing import Protocol

from aws_cdk import CfnOutput
from aws_cdk import aws_ssm as ssm
from constructs import Construct

from .exceptions import DuplicateRegistrationError

logger = logging.getLogger(__name__)


class OutputRegistry(Protocol):
    """Publishes named values for cross-stack reference."""

    def register(self, local_id: str, export_name: str, value: str) -> None: ...


class ParameterStore(Protocol):
    """Durable key-value store whose reads resolve at deploy time."""

    def write(self, key: str, value: str, construct_id: str | None = None) -> None: ...

    def resolve(self, key: str) -> str: ...


class CfnOutputRegistry:
    """Registers CloudFormation outputs with export names.

    Attributes:
        scope: The construct the outputs are created in.
    """

    def __init__(self, scope: Construct) -> None:
        self.scope = scope

    def register(self, local_id: str, export_name: str, value: str) -> None:
        """Create a ``CfnOutput`` exported under ``export_name``.

        Raises:
            DuplicateRegistrationError: If ``local_id`` is already taken in scope.
        """
        if self.scope.node.try_find_child(local_id) is not None:
            raise DuplicateRegistrationError(local_id, self.scope.node.path)

        logger.info("Exporting output %s as %s", local_id, export_name)
        CfnOutput(
            self.scope,
            local_id,
            export_name=export_name,
            value=value,
        )


class SsmParameterStore:
    """SSM Parameter Store access for one construct scope.

    Writes create ``StringParameter`` resources; reads return a token that
    CloudFormation replaces with the parameter value during deployment.

    Attributes:
        scope: The construct parameters are created in and resolved from.
    """

    def __init__(self, scope: Construct) -> None:
        self.scope = scope
        self._written: set[str] = set()

    def write(self, key: str, value: str, construct_id: str | None = None) -> None:
        """Create a string parameter named ``key``.

        Args:
            key: Full parameter name.
            value: Literal parameter value.
            construct_id: Construct id for the resource, ``key`` when omitted.

        Raises:
            DuplicateRegistrationError: If the parameter name or construct id
                is already used in this scope.
        """
        construct_id = construct_id or key
        if key in self._written:
            raise DuplicateRegistrationError(key, self.scope.node.path)
        if self.scope.node.try_find_child(construct_id) is not None:
            raise DuplicateRegistrationError(construct_id, self.scope.node.path)

        logger.info("Writing SSM parameter %s", key)
        ssm.StringParameter(
            self.scope,
            construct_id,
            parameter_name=key,
            string_value=value,
        )
        self._written.add(key)

    def resolve(self, key: str) -> str:
        """Return a deploy-time token for the parameter named ``key``."""
        logger.debug("Resolving SSM parameter %s", key)
        return ssm.StringParameter.value_for_string_parameter(self.scope, key)
