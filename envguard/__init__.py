"""
envguard: declare environment variables where they are used, validate them
all before serving.

    from envguard import EnvRegistry, must_validate, validators

    registry = EnvRegistry()
    api_key = registry.check(
        "STRIPE_API_KEY", source="payments", sensitive=True,
        validator=validators.not_empty,
    ).value
    ...
    must_validate(registry)
    registry.freeze()
"""

from envguard import validators
from envguard.config import EnvGuardConfig
from envguard.core import (
    Requirement, Outcome, OutcomeStatus, RegistryState, merge_requirements,
    EnvGuardError, ValidationError, ConfigurationError, InvalidValueError,
    LateRequirementError, EnvironmentValidationError
)
from envguard.logger import get_envguard_logger, init_logger, setup_logging
from envguard.registry import (
    EnvRegistry, EnvironmentSource, ProcessEnvironment, MappingEnvironment,
    ValidationIssue, ValidationResult, must_validate, get_default_registry
)
from envguard.reporting import render_report

__version__ = "0.1.0"

__all__ = [
    'validators',
    'EnvGuardConfig',
    'Requirement',
    'Outcome',
    'OutcomeStatus',
    'RegistryState',
    'merge_requirements',
    'EnvGuardError',
    'ValidationError',
    'ConfigurationError',
    'InvalidValueError',
    'LateRequirementError',
    'EnvironmentValidationError',
    'get_envguard_logger',
    'init_logger',
    'setup_logging',
    'EnvRegistry',
    'EnvironmentSource',
    'ProcessEnvironment',
    'MappingEnvironment',
    'ValidationIssue',
    'ValidationResult',
    'must_validate',
    'get_default_registry',
    'render_report'
]
