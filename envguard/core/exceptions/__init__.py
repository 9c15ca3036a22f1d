"""
Core exceptions for envguard.

All exception classes used throughout the package, with a single base
class so callers can catch everything envguard raises in one place.
"""

# Base exceptions
from .base import (
    EnvGuardError,
    ValidationError,
    ConfigurationError
)

# Registry exceptions
from .registry import (
    InvalidValueError,
    LateRequirementError,
    EnvironmentValidationError
)

__all__ = [
    # Base exceptions
    'EnvGuardError',
    'ValidationError',
    'ConfigurationError',

    # Registry exceptions
    'InvalidValueError',
    'LateRequirementError',
    'EnvironmentValidationError'
]
