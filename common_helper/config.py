"""Configuration models for the common helper.

``HelperConfig`` is the immutable record a ``CommonHelper`` is constructed
from. ``ProjectConfig`` describes the deployment unit (project name, stage,
account and region) and is loaded from a JSON file, CDK context or the
environment.
"""

import json
import logging
import os
from collections.abc import MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from aws_cdk import Environment
from constructs import Construct
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-1"
CONFIG_CONTEXT_KEY = "config"

VariableMap = MutableMapping[str, str]


@dataclass(frozen=True)
class HelperConfig:
    """Construction settings for a ``CommonHelper``.

    Attributes:
        stack_name: Identifier of the stack the helper is bound to.
        project_prefix: Default prefix for exported and stored names.
        scope: Construct outputs and parameters are registered against.
        env: Deployment environment of the stack, if known.
        variables: Caller-owned variable map, shared by reference.
    """

    stack_name: str
    project_prefix: str
    scope: Construct
    variables: VariableMap
    env: Environment | None = None

    def __post_init__(self):
        """Reject missing or empty required fields."""
        for field_name in ("stack_name", "project_prefix"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(f"{field_name} must be a non-empty string")
        if self.scope is None:
            raise ConfigurationError("scope is required")
        if not isinstance(self.variables, MutableMapping):
            raise ConfigurationError("variables must be a mutable mapping")


class ProjectConfig(BaseModel):
    """Project-level settings shared by every stack of an app.

    Attributes:
        name: Project name, the first half of the project prefix.
        stage: Deployment stage, appended to the name in the project prefix.
        account: Target AWS account, environment-agnostic when omitted.
        region: Target AWS region.
        prefix_separator: Text placed between name and stage in the project
            prefix, empty by default.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name", min_length=1)
    stage: str = Field(alias="Stage", min_length=1)
    account: str | None = Field(default=None, alias="Account")
    region: str = Field(default=DEFAULT_REGION, alias="Region", min_length=1)
    prefix_separator: str = Field(default="", alias="PrefixSeparator")

    @property
    def project_prefix(self) -> str:
        """Prefix applied to exported and stored names, e.g. ``MyAppDev`` or ``MyApp-Dev``."""
        return f"{self.name}{self.prefix_separator}{self.stage}"

    def to_environment(self) -> Environment:
        """Build the CDK environment for this project."""
        return Environment(account=self.account, region=self.region)


def load_project_config(file_path: str | Path) -> ProjectConfig:
    """Load project settings from the ``Project`` section of a JSON file.

    Args:
        file_path: Path to the JSON configuration file.

    Returns:
        Validated project configuration.

    Raises:
        ConfigurationError: If the file is missing, is not valid JSON, lacks a
            ``Project`` section, or fails validation.
    """
    config_path = Path(file_path)
    try:
        with open(config_path) as f:
            data: dict[str, Any] = json.load(f)
        project = ProjectConfig.model_validate(data["Project"])
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {config_path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e
    except (KeyError, TypeError) as e:
        raise ConfigurationError(f"Missing 'Project' section in {config_path}") from e
    except ValidationError as e:
        raise ConfigurationError(f"Invalid project config in {config_path}: {e}") from e

    logger.info("Loaded project config %s from %s", project.project_prefix, config_path)
    return project


def project_config_from_context(scope: Construct) -> ProjectConfig:
    """Resolve project settings for a CDK app.

    The ``config`` context key (``cdk synth -c config=app-config.json``) takes
    precedence. Otherwise ``PROJECT_NAME``, ``PROJECT_STAGE``,
    ``CDK_DEFAULT_ACCOUNT`` and ``CDK_DEFAULT_REGION`` are read from the
    environment.

    Raises:
        ConfigurationError: If neither source provides a valid configuration.
    """
    config_path = scope.node.try_get_context(CONFIG_CONTEXT_KEY)
    if config_path:
        return load_project_config(config_path)

    try:
        return ProjectConfig(
            name=os.environ.get("PROJECT_NAME", ""),
            stage=os.environ.get("PROJECT_STAGE", ""),
            account=os.environ.get("CDK_DEFAULT_ACCOUNT"),
            region=os.environ.get("CDK_DEFAULT_REGION", DEFAULT_REGION),
        )
    except ValidationError as e:
        raise ConfigurationError(
            "Set the 'config' context key or PROJECT_NAME and PROJECT_STAGE",
        ) from e
