"""Global pytest configuration and fixtures for CDK testing."""

import os
from pathlib import Path

import pytest
from aws_cdk import App, Environment, Stack

from common_helper import CommonHelper, HelperConfig

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture(scope="session", autouse=True)
def configure_test_environment():
    """Configure environment variables for consistent testing."""
    test_env = {
        "AWS_DEFAULT_REGION": "us-east-1",
        "AWS_REGION": "us-east-1",
        "CDK_DEFAULT_REGION": "us-east-1",
        "CDK_DEFAULT_ACCOUNT": "123456789012",
        "CDK_DISABLE_VERSION_CHECK": "true",
        # Prevent actual AWS API calls during testing
        "AWS_ACCESS_KEY_ID": "testing",
        "AWS_SECRET_ACCESS_KEY": "testing",
        "AWS_SECURITY_TOKEN": "testing",
        "AWS_SESSION_TOKEN": "testing",
    }

    for key, value in test_env.items():
        if key not in os.environ:
            os.environ[key] = value


@pytest.fixture
def cdk_app():
    """Create a fresh CDK App instance for each test."""
    return App()


@pytest.fixture(scope="session")
def aws_environment():
    """Provide AWS environment configuration for testing."""
    return Environment(
        account=os.environ.get("CDK_DEFAULT_ACCOUNT", "123456789012"),
        region=os.environ.get("CDK_DEFAULT_REGION", "us-east-1"),
    )


@pytest.fixture
def stack(cdk_app):
    return Stack(cdk_app, "TestStack")


@pytest.fixture
def variables():
    return {}


@pytest.fixture
def helper(stack, variables, aws_environment):
    """Helper bound to ``stack`` with project prefix ``svc``."""
    return CommonHelper(
        HelperConfig(
            stack_name="TestStack",
            project_prefix="svc",
            scope=stack,
            variables=variables,
            env=aws_environment,
        ),
    )


@pytest.fixture
def app_config_path():
    return PROJECT_ROOT / "config" / "app-config.json"
