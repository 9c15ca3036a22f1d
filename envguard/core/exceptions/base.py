"""
Base exception classes for envguard.
"""


class EnvGuardError(Exception):
    """Base exception for all envguard errors."""
    pass


class ValidationError(EnvGuardError, ValueError):
    """Base exception for validation errors."""

    def __init__(self, field: str = None, value: str = None, message: str = None):
        self.field = field
        self.value = value
        self.message = message
        if not field and not value:
            super().__init__(message or "Validation error")
            return

        error_msg = "Validation error"
        if field:
            error_msg += f" for '{field}'"
        if value:
            error_msg += f" with value '{value}'"
        if message:
            error_msg += f": {message}"
        super().__init__(error_msg)


class ConfigurationError(EnvGuardError):
    """Base exception for envguard configuration errors."""

    def __init__(self, config_key: str = None, config_value: str = None, reason: str = None):
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
        message = "Configuration error"
        if config_key:
            message += f" for '{config_key}'"
        if config_value:
            message += f" with value '{config_value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
