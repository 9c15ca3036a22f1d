"""
Environment variable registry.

This module provides the registry and its collaborators:
- EnvRegistry: merge, resolve-once and freeze state machine
- EnvironmentSource: where variable values come from
- ValidationResult / must_validate: startup validation
"""

import threading
from typing import Optional

from .environment import EnvironmentSource, ProcessEnvironment, MappingEnvironment
from .registry import EnvRegistry
from .validation import ValidationIssue, ValidationResult, must_validate

_default_registry: Optional[EnvRegistry] = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> EnvRegistry:
    """Get or create the process-wide registry backed by the process environment."""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = EnvRegistry()
        return _default_registry


__all__ = [
    'EnvRegistry',
    'EnvironmentSource',
    'ProcessEnvironment',
    'MappingEnvironment',
    'ValidationIssue',
    'ValidationResult',
    'must_validate',
    'get_default_registry'
]
