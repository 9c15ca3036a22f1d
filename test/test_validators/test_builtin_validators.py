"""
Tests for the built-in validators.
"""

from datetime import timedelta

import pytest

from envguard.core.exceptions import InvalidValueError, ValidationError
from envguard import validators
from envguard.validators import run_validator


@pytest.mark.parametrize("validator, value, valid", [
    (validators.url, "https://example.com", True),
    (validators.url, "postgres://user@db:5432/app", True),
    (validators.url, "not-a-url", False),
    (validators.url, "https://", False),
    (validators.url, "", False),
    (validators.duration, "30s", True),
    (validators.duration, "1h30m", True),
    (validators.duration, "1.5h", True),
    (validators.duration, "300ms", True),
    (validators.duration, "-2m", True),
    (validators.duration, "0", True),
    (validators.duration, "30x", False),
    (validators.duration, "30", False),
    (validators.duration, "", False),
    (validators.duration, "s", False),
    (validators.not_empty, "value", True),
    (validators.not_empty, "", False),
    (validators.not_empty, "   ", False),
    (validators.port, "8080", True),
    (validators.port, "1", True),
    (validators.port, "65535", True),
    (validators.port, "65536", False),
    (validators.port, "99999", False),
    (validators.port, "0", False),
    (validators.port, "00000", False),
    (validators.port, "123456", False),
    (validators.port, "80a", False),
    (validators.port, "-1", False),
    (validators.port, "", False),
    (validators.base64, "dGVzdA==", True),
    (validators.base64, "dGVzdA", True),
    (validators.base64, "test@#$", False),
    (validators.base64, "a===", False),
    (validators.base64, "", False),
])
def test_validators(validator, value, valid):
    error = run_validator(validator, value)

    assert (error is None) is valid


class TestOneOf:

    def test_accepts_listed_option(self):
        validator = validators.one_of("production", "development", "test")

        assert run_validator(validator, "production") is None

    def test_rejects_other_values(self):
        validator = validators.one_of("production", "development", "test")

        with pytest.raises(InvalidValueError) as exc_info:
            validator("staging")

        assert "production, development, test" in str(exc_info.value)


class TestParseDuration:

    @pytest.mark.parametrize("value, expected", [
        ("30s", timedelta(seconds=30)),
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("1.5h", timedelta(minutes=90)),
        ("250ms", timedelta(milliseconds=250)),
        ("10us", timedelta(microseconds=10)),
        ("-2m", timedelta(minutes=-2)),
        ("0", timedelta(0)),
    ])
    def test_parse(self, value, expected):
        assert validators.parse_duration(value) == expected

    def test_missing_unit_message(self):
        with pytest.raises(InvalidValueError) as exc_info:
            validators.parse_duration("30")

        assert "missing unit" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["99999999999999999999h", "2562048h", "-2562048h", "9" * 400 + "s"])
    def test_out_of_range(self, value):
        with pytest.raises(InvalidValueError, match="out of range"):
            validators.parse_duration(value)

    def test_largest_hour_count_accepted(self):
        assert validators.parse_duration("2562047h") == timedelta(hours=2562047)


class TestErrors:

    def test_messages_do_not_echo_value(self):
        error = run_validator(validators.port, "sk_live_secret")

        assert "sk_live_secret" not in str(error)

    def test_invalid_value_error_is_value_error(self):
        error = run_validator(validators.not_empty, "")

        assert isinstance(error, ValidationError)
        assert isinstance(error, ValueError)
        assert str(error) == "value cannot be empty"

    def test_arbitrary_exceptions_captured(self):
        def explode(value):
            raise RuntimeError("boom")

        error = run_validator(explode, "x")

        assert isinstance(error, RuntimeError)

    def test_truthy_return_passes(self):
        assert run_validator(lambda value: True, "x") is None
