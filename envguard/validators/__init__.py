"""
Value validators.

Built-in validators for common environment variable formats and the
helper that runs any validator on behalf of the registry.
"""

from .base import run_validator
from .builtin import (
    url, duration, parse_duration, one_of, not_empty, port, base64,
    MIN_PORT, MAX_PORT
)

__all__ = [
    'run_validator',
    'url',
    'duration',
    'parse_duration',
    'one_of',
    'not_empty',
    'port',
    'base64',
    'MIN_PORT',
    'MAX_PORT'
]
