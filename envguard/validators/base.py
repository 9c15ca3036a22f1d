"""
Validator execution.

Validators are plain callables over a single string. Built-in and
user-supplied validators are run the same way: whatever a validator raises
or returns is turned into an error value (or None) that the registry stores
on the Outcome.
"""

from typing import Optional

from envguard.core.exceptions import InvalidValueError
from envguard.core.requirement import Validator


def run_validator(validator: Validator, value: str) -> Optional[Exception]:
    """
    Run ``validator`` against ``value`` and return the error, if any.

    A validator fails by raising an exception, by returning an exception
    instance, or by returning False. Any other return value passes.
    """
    try:
        result = validator(value)
    except Exception as e:
        return e

    if isinstance(result, Exception):
        return result
    if result is False:
        name = getattr(validator, "__name__", type(validator).__name__)
        return InvalidValueError(f"validator {name} rejected the value")
    return None
