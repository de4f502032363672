"""Entry point for the example shared-configuration CDK application.

Defines a producer stack that exports an endpoint, stores a parameter and
puts a shared variable, and a consumer stack that reads all three back
through its own helper.

Environment Configuration Options:
    1. CDK context:
       cdk synth -c config=config/app-config.json

    2. Environment variables:
       PROJECT_NAME: Project name used in the project prefix
       PROJECT_STAGE: Deployment stage appended to the project name
       AWS_PROFILE: Named profile from AWS credentials file
       CDK_DEFAULT_ACCOUNT: Target AWS account for deployment
       CDK_DEFAULT_REGION: Target AWS region for deployment
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

import boto3
from aws_cdk import App, Environment
from constructs import Construct

from common_helper import BaseStack, ProjectConfig, project_config_from_context

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class DeploymentTier(Enum):
    """Size tiers a stack can be deployed with."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class StackConfiguration:
    """Deployment settings resolved before the app is built.

    Attributes:
        aws_profile: Optional AWS credentials profile name.
        tier: Deployment tier name, matched against ``DeploymentTier`` values.
    """

    aws_profile: str | None = None
    tier: str = DeploymentTier.SMALL.value


def create_deployment_environment(
    project: ProjectConfig,
    config: StackConfiguration,
) -> Environment:
    """Creates CDK Environment from the project and stack configuration.

    A named AWS profile takes precedence over the account and region of the
    project configuration.

    Args:
        project: Project settings.
        config: Stack configuration containing the optional AWS profile.

    Returns:
        CDK Environment with account and region resolved.
    """
    if config.aws_profile:
        session = boto3.Session(profile_name=config.aws_profile)
        sts = session.client("sts")
        account = sts.get_caller_identity()["Account"]
        return Environment(
            account=account,
            region=session.region_name or project.region,
        )

    return project.to_environment()


class ProducerStack(BaseStack):
    """Publishes values for the consumer stack."""

    def __init__(self, scope: Construct, construct_id: str, tier: str, **kwargs: Any) -> None:
        super().__init__(scope, construct_id, **kwargs)

        tier_type = self.common_helper.find_enum_type(DeploymentTier, tier)
        if tier_type is None:
            logger.warning("Unknown tier '%s', using %s", tier, DeploymentTier.SMALL.value)
            tier_type = DeploymentTier.SMALL

        endpoint = f"https://{self.project_config.project_prefix.lower()}.example.com"
        self.export_output("ServiceEndpoint", endpoint)
        self.put_parameter("DeploymentTier", tier_type.value)
        self.put_variable("ProducerStackName", self.stack_name)


class ConsumerStack(BaseStack):
    """Reads values published by the producer stack."""

    def __init__(self, scope: Construct, construct_id: str, **kwargs: Any) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.deployment_tier = self.get_parameter("DeploymentTier")
        self.producer_stack_name = self.get_variable("ProducerStackName")
        logger.info("Consumer reads parameters from %s", self.producer_stack_name)


def initialize_app(
    config: StackConfiguration | None = None,
    context: dict[str, Any] | None = None,
) -> App:
    """Initializes and configures the CDK application.

    Args:
        config: Optional stack configuration, defaults to the environment.
        context: Optional CDK context, e.g. ``{"config": "config/app-config.json"}``.

    Returns:
        Configured CDK App instance ready for synthesis.
    """
    config = config or StackConfiguration(
        aws_profile=os.environ.get("AWS_PROFILE"),
        tier=os.environ.get("DEPLOYMENT_TIER", DeploymentTier.SMALL.value),
    )
    app = App(context=context)
    project = project_config_from_context(app)
    env = create_deployment_environment(project, config)
    variables: dict[str, str] = {}

    producer = ProducerStack(
        app,
        "Producer",
        tier=config.tier,
        project_config=project,
        variables=variables,
        env=env,
        description="Publishes shared outputs and parameters",
    )

    consumer = ConsumerStack(
        app,
        "Consumer",
        project_config=project,
        variables=variables,
        env=env,
        description="Consumes shared outputs and parameters",
    )
    consumer.add_dependency(producer)

    return app


def main() -> None:
    """Main execution entry point."""
    app = initialize_app()
    app.synth()


if __name__ == "__main__":
    main()
