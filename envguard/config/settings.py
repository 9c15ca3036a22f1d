"""
envguard settings.

envguard configures itself from a handful of ENVGUARD_* variables. They
are read directly rather than through a registry so that loading settings
never declares anything.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from envguard.core.exceptions import ConfigurationError


SHOW_VALUES_VAR = "ENVGUARD_SHOW_VALUES"
LOG_LEVEL_VAR = "ENVGUARD_LOG_LEVEL"
JSON_LOGS_VAR = "ENVGUARD_JSON_LOGS"

DEFAULT_EXIT_CODE = 2


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "") == "1"


@dataclass
class EnvGuardConfig:
    """
    Runtime settings for envguard.

    Attributes:
        show_values: Include value previews in reports (sensitive values stay masked)
        log_level: Level for the root logger when envguard configures logging
        json_logs: Render log events as JSON instead of console output
        exit_code: Process exit status when startup validation fails
    """
    show_values: bool = False
    log_level: LogLevel = LogLevel.INFO
    json_logs: bool = False
    exit_code: int = DEFAULT_EXIT_CODE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EnvGuardConfig":
        """
        Build settings from ENVGUARD_* variables.

        Raises:
            ConfigurationError: If ENVGUARD_LOG_LEVEL is not a known level
        """
        if environ is None:
            environ = os.environ

        raw_level = environ.get(LOG_LEVEL_VAR, LogLevel.INFO.value)
        try:
            log_level = LogLevel(raw_level.strip().upper())
        except ValueError:
            raise ConfigurationError(
                LOG_LEVEL_VAR, raw_level,
                f"expected one of {', '.join(level.value for level in LogLevel)}"
            ) from None

        return cls(
            show_values=_flag(environ, SHOW_VALUES_VAR),
            log_level=log_level,
            json_logs=_flag(environ, JSON_LOGS_VAR),
        )


def show_values_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when ENVGUARD_SHOW_VALUES=1 in ``environ`` (default: the process environment)."""
    return _flag(os.environ if environ is None else environ, SHOW_VALUES_VAR)
