"""
Registry-related enums for envguard.
"""

from enum import Enum


class RegistryState(Enum):
    """Registry lifecycle states."""
    OPEN = "open"
    FROZEN = "frozen"


class OutcomeStatus(Enum):
    """Resolution status of a single environment variable."""
    OK = "ok"
    MISSING = "missing"
    INVALID = "invalid"

    def __str__(self) -> str:
        return self.value
