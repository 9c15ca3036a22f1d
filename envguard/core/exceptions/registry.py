"""
Registry specific exceptions.
"""

from .base import EnvGuardError, ValidationError


class InvalidValueError(ValidationError):
    """Raised by the built-in validators when a value is rejected.

    Built-in validators never pass the rejected value, so the message is
    safe to print for sensitive variables.
    """

    def __init__(self, message: str):
        super().__init__(message=message)


class LateRequirementError(EnvGuardError):
    """
    Raised when a required variable is declared for the first time after
    the registry was frozen.

    This is an initialization-order defect in the application, not an
    environment problem. The registry logs and reports the full environment
    state before raising and never catches it itself.
    """

    def __init__(self, name: str, source: str = ""):
        self.name = name
        self.source = source
        super().__init__(
            f"Required environment variable '{name}' registered after freeze() "
            f"(from: {source or 'unknown'}). All required environment variables "
            f"must be declared before freeze(); move this declaration earlier "
            f"in initialization."
        )


class EnvironmentValidationError(EnvGuardError):
    """Raised when startup validation finds missing or invalid required variables."""

    def __init__(self, result):
        self.result = result
        names = ", ".join(issue.name for issue in result.issues)
        super().__init__(
            f"{result.failure_count} required environment variable(s) missing or invalid: {names}"
        )
