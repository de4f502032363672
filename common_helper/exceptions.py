"""Exceptions raised by the common helper and its CDK collaborators."""


class CommonHelperError(Exception):
    """Base exception for common helper failures."""


class ConfigurationError(CommonHelperError, ValueError):
    """Raised when required construction or project settings are missing."""


class DuplicateRegistrationError(CommonHelperError):
    """Raised when an output or parameter is registered twice in one scope.

    Attributes:
        identifier: The local id or parameter name that was reused.
        scope_path: Construct path of the scope the identifier collided in.
    """

    def __init__(self, identifier: str, scope_path: str) -> None:
        self.identifier = identifier
        self.scope_path = scope_path
        super().__init__(
            f"'{identifier}' is already registered in scope '{scope_path}'"
        )
