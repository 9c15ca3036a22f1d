"""
Environment sources.

The registry never reads ``os.environ`` directly; it asks an
``EnvironmentSource`` for one variable at a time. ``ProcessEnvironment`` is
the production source, ``MappingEnvironment`` keeps variables in memory for
tests and for embedding envguard where the process environment is not the
source of truth.
"""

import os
import threading
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional


class EnvironmentSource(ABC):
    """
    Abstract base class for environment sources.

    Defines the interface that all environment sources must implement.
    """

    @abstractmethod
    def lookup(self, name: str) -> Optional[str]:
        """Return the value of ``name``, or None when it is not set."""
        pass


class ProcessEnvironment(EnvironmentSource):
    """Environment source backed by the process environment."""

    def lookup(self, name: str) -> Optional[str]:
        return os.environ.get(name)


class MappingEnvironment(EnvironmentSource):
    """
    In-memory environment source.
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._lock = threading.RLock()
        self._values: Dict[str, str] = dict(initial or {})

    def lookup(self, name: str) -> Optional[str]:
        with self._lock:
            return self._values.get(name)

    def set(self, name: str, value: str):
        """Set a variable."""
        with self._lock:
            self._values[name] = value

    def unset(self, name: str):
        """Remove a variable if present."""
        with self._lock:
            self._values.pop(name, None)

    def snapshot(self) -> Dict[str, str]:
        """Copy of the current variables."""
        with self._lock:
            return self._values.copy()
