import logging
import sys
from typing import Any, Dict, Optional

import structlog
from structlog.types import Processor


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Configure structlog for the envguard package"""

    # Respect an application that already configured structlog itself
    if structlog.is_configured():
        return

    # Check if the root logger already has StreamHandlers with structlog formatters
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
            isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Format the exception only for JSON logs, as we want to pretty-print them when
        # using the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    # Diagnostics go to stderr so stdout stays free for rendered reports
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class EnvGuardStructLogger:
    """
    Structured logger for the envguard package.

    ``bind`` returns a new wrapper carrying its own context
    (``component="EnvRegistry"``). The context is applied per event rather
    than bound into a structlog logger, so loggers created before
    ``setup_logging`` still follow the final configuration.
    """

    def __init__(self, log_name: str = "envguard", context: Optional[Dict[str, Any]] = None):
        self.log_name = log_name
        self.logger = structlog.stdlib.get_logger(log_name)
        self._context: Dict[str, Any] = dict(context or {})

    def bind(self, **new_values: Any) -> "EnvGuardStructLogger":
        """Return a logger with ``new_values`` added to every event."""
        return EnvGuardStructLogger(self.log_name, {**self._context, **new_values})

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **{**self._context, **kw})

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **{**self._context, **kw})

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **{**self._context, **kw})

    warn = warning

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **{**self._context, **kw})

    def critical(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **{**self._context, **kw})

    def exception(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **{**self._context, **kw})


def get_envguard_logger(log_name: str = "envguard") -> EnvGuardStructLogger:
    """Return the package logger without touching the logging configuration."""
    return EnvGuardStructLogger(log_name)


def init_logger(config):
    """
    Initialize the structured logger for the envguard package.

    Args:
        config: EnvGuardConfig with logging settings

    Returns:
        EnvGuardStructLogger: Configured structured logger instance
    """
    setup_logging(json_logs=config.json_logs, log_level=config.log_level.value)
    return EnvGuardStructLogger("envguard")
