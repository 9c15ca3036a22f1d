"""
envguard configuration.
"""

from .settings import (
    EnvGuardConfig, LogLevel, show_values_enabled,
    SHOW_VALUES_VAR, LOG_LEVEL_VAR, JSON_LOGS_VAR, DEFAULT_EXIT_CODE
)

__all__ = [
    'EnvGuardConfig',
    'LogLevel',
    'show_values_enabled',
    'SHOW_VALUES_VAR',
    'LOG_LEVEL_VAR',
    'JSON_LOGS_VAR',
    'DEFAULT_EXIT_CODE'
]
