"""
Built-in validators.

Each validator takes the raw string value and raises ``InvalidValueError``
when it is rejected. Messages never include the value itself, so they are
safe to print for sensitive variables.
"""

import re
from datetime import timedelta
from typing import Callable
from urllib.parse import urlparse

from envguard.core.exceptions import InvalidValueError


MIN_PORT = 1
MAX_PORT = 65535

# Unit suffixes accepted in duration strings, in microseconds
_DURATION_UNITS = {
    "ns": 0.001,
    "us": 1,
    "µs": 1,  # micro sign
    "μs": 1,  # greek mu
    "ms": 1_000,
    "s": 1_000_000,
    "m": 60 * 1_000_000,
    "h": 60 * 60 * 1_000_000,
}
_DURATION_COMPONENT = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_DURATION_FULL = re.compile(r"(?:(?:\d+\.?\d*|\.\d+)(?:ns|us|µs|μs|ms|s|m|h))+")
# Largest duration a signed 64-bit nanosecond count can hold
_MAX_DURATION_MICROS = (2 ** 63 - 1) / 1_000
_BASE64_CHARS = re.compile(r"[A-Za-z0-9+/=]+")


def url(value: str):
    """Value must be an absolute URL with a scheme and a host."""
    if value == "":
        raise InvalidValueError("URL cannot be empty")

    try:
        parsed = urlparse(value)
    except ValueError as e:
        raise InvalidValueError(f"invalid URL: {e}") from e

    if not parsed.scheme:
        raise InvalidValueError("URL must have a scheme (http/https)")
    if not parsed.netloc:
        raise InvalidValueError("URL must have a host")


def parse_duration(value: str) -> timedelta:
    """
    Parse a duration string such as "300ms", "1.5h" or "2h45m".

    The format is an optional sign followed by one or more decimal numbers,
    each with a unit suffix (ns, us, ms, s, m, h). A bare "0" is accepted.

    Raises:
        InvalidValueError: If the string is not a valid duration
    """
    if value == "":
        raise InvalidValueError("duration cannot be empty")

    sign = 1
    body = value
    if body[0] in "+-":
        sign = -1 if body[0] == "-" else 1
        body = body[1:]

    if body == "0":
        return timedelta(0)
    if not body:
        raise InvalidValueError("invalid duration: missing number")
    if not _DURATION_FULL.fullmatch(body):
        if re.fullmatch(r"\d+\.?\d*|\.\d+", body):
            raise InvalidValueError("invalid duration: missing unit")
        raise InvalidValueError("invalid duration: expected numbers with units ns, us, ms, s, m or h")

    micros = 0.0
    for number, unit in _DURATION_COMPONENT.findall(body):
        micros += float(number) * _DURATION_UNITS[unit]
    if micros > _MAX_DURATION_MICROS:
        raise InvalidValueError("invalid duration: out of range")
    try:
        return sign * timedelta(microseconds=micros)
    except OverflowError as e:
        raise InvalidValueError("invalid duration: out of range") from e


def duration(value: str):
    """Value must be a duration string, see ``parse_duration``."""
    parse_duration(value)


def one_of(*options: str) -> Callable[[str], None]:
    """Return a validator accepting only the given options."""

    def validate_one_of(value: str):
        if value not in options:
            raise InvalidValueError(f"must be one of: {', '.join(options)}")

    validate_one_of.options = options
    return validate_one_of


def not_empty(value: str):
    """Value must contain something other than whitespace."""
    if value.strip() == "":
        raise InvalidValueError("value cannot be empty")


def port(value: str):
    """Value must be a TCP/UDP port number between 1 and 65535."""
    if value == "":
        raise InvalidValueError("port cannot be empty")
    if len(value) > 5:
        raise InvalidValueError("invalid port number")
    if not value.isascii() or not value.isdigit():
        raise InvalidValueError("port must be numeric")

    number = int(value)
    if number < MIN_PORT or number > MAX_PORT:
        raise InvalidValueError(f"port must be between {MIN_PORT} and {MAX_PORT}")


def base64(value: str):
    """Value must use the standard base64 alphabet with at most two padding characters."""
    if value == "":
        raise InvalidValueError("base64 value cannot be empty")
    if not _BASE64_CHARS.fullmatch(value):
        raise InvalidValueError("invalid base64 character")
    if value.count("=") > 2:
        raise InvalidValueError("invalid base64 padding")
