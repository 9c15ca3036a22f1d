"""
Command line interface.

    envguard check myapp.settings myapp.payments
    envguard report myapp.settings --show-values

Each module is imported; modules that expose ``declare_env(registry)`` get
it called with the default registry. Module-level declarations made on
``get_default_registry()`` at import time are picked up as well.
"""

import argparse
import importlib
import sys
from dataclasses import replace
from typing import List, Optional

from envguard.config import EnvGuardConfig, LogLevel
from envguard.core.exceptions import ConfigurationError
from envguard.logger import init_logger
from envguard.registry import EnvRegistry, get_default_registry, must_validate
from envguard.reporting import render_report

EXIT_OK = 0
EXIT_USAGE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envguard",
        description="Validate the environment variables declared by your modules",
    )
    parser.add_argument(
        "command",
        choices=["check", "report"],
        help="check: exit non-zero when required variables are missing or invalid; "
             "report: print the table only",
    )
    parser.add_argument("modules", nargs="+", help="Modules that declare environment variables")
    parser.add_argument("--show-values", action="store_true", default=None,
                        help="Show value previews (sensitive values stay masked)")
    parser.add_argument("--json-logs", action="store_true", default=None, help="Log as JSON")
    parser.add_argument("--log-level", choices=[level.value for level in LogLevel],
                        type=str.upper, help="Log level")
    return parser


def load_declarations(modules: List[str], registry: EnvRegistry):
    """Import ``modules`` and run their ``declare_env`` hooks against ``registry``."""
    for module_name in modules:
        module = importlib.import_module(module_name)
        declare_env = getattr(module, "declare_env", None)
        if callable(declare_env):
            declare_env(registry)


def main(argv: Optional[List[str]] = None, registry: Optional[EnvRegistry] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = EnvGuardConfig.from_env()
    except ConfigurationError as e:
        print(f"envguard: {e}", file=sys.stderr)
        return EXIT_USAGE

    overrides = {}
    if args.show_values is not None:
        overrides["show_values"] = args.show_values
    if args.json_logs is not None:
        overrides["json_logs"] = args.json_logs
    if args.log_level:
        overrides["log_level"] = LogLevel(args.log_level)
    config = replace(config, **overrides)

    logger = init_logger(config).bind(component="cli")

    if registry is None:
        registry = get_default_registry()

    try:
        load_declarations(args.modules, registry)
    except ImportError as e:
        print(f"envguard: cannot import module: {e}", file=sys.stderr)
        logger.error("Module import failed", error=str(e))
        return EXIT_USAGE

    if args.command == "report":
        render_report(registry.snapshot(), sys.stdout, show_values=config.show_values)
        return EXIT_OK

    try:
        must_validate(registry, sys.stdout, config)
    except SystemExit as e:
        return e.code
    return EXIT_OK
