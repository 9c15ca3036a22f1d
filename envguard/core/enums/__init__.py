"""
Core enums for envguard.
"""

from .registry import (
    RegistryState,
    OutcomeStatus
)

__all__ = [
    'RegistryState',
    'OutcomeStatus'
]
