"""Cross-stack outputs, SSM parameters and shared variables for AWS CDK apps."""

from .base_stack import BaseStack
from .config import HelperConfig, ProjectConfig, load_project_config, project_config_from_context
from .enums import find_enum_type
from .exceptions import CommonHelperError, ConfigurationError, DuplicateRegistrationError
from .helper import CommonHelper, ICommonHelper
from .naming import compute_key, output_id

__all__ = [
    "BaseStack",
    "CommonHelper",
    "CommonHelperError",
    "ConfigurationError",
    "DuplicateRegistrationError",
    "HelperConfig",
    "ICommonHelper",
    "ProjectConfig",
    "compute_key",
    "find_enum_type",
    "load_project_config",
    "output_id",
    "project_config_from_context",
]
