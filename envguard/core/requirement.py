"""
Requirement and Outcome value types.

A ``Requirement`` is what one call site declares about an environment
variable. Every declaration for the same name is folded into one canonical
requirement with ``merge_requirements``; the first resolution of that
canonical requirement produces an ``Outcome`` that is cached for the life
of the registry.
"""

from dataclasses import dataclass, replace
from typing import Callable, Optional, Union

from .enums import OutcomeStatus
from .exceptions import InvalidValueError


# A validator receives the raw string value. It reports a problem by
# returning an exception, returning False, or raising.
Validator = Callable[[str], Union[Optional[Exception], bool]]


@dataclass(frozen=True)
class Requirement:
    """
    An environment variable need declared by one component.

    Attributes:
        name: Environment variable name, e.g. "STRIPE_API_KEY"
        source: Owning component, shown in reports
        description: Short help text for humans
        optional: Required unless set
        default: Value used when the variable is absent; "" means no default
        validator: Optional callable checking the value
        sensitive: Never show the value in reports
    """
    name: str
    source: str = ""
    description: str = ""
    optional: bool = False
    default: str = ""
    validator: Optional[Validator] = None
    sensitive: bool = False

    @property
    def required(self) -> bool:
        return not self.optional


def merge_requirements(canonical: Requirement, incoming: Requirement) -> Requirement:
    """
    Fold ``incoming`` into the canonical requirement for the same name.

    Flags move toward the more restrictive setting (required wins over
    optional, sensitive wins over not sensitive). Metadata is first-writer
    wins: a field that is already populated is never overwritten.
    """
    if canonical.name != incoming.name:
        raise ValueError(
            f"Cannot merge requirements for different names: "
            f"'{canonical.name}' and '{incoming.name}'"
        )

    return replace(
        canonical,
        optional=canonical.optional and incoming.optional,
        sensitive=canonical.sensitive or incoming.sensitive,
        source=canonical.source or incoming.source,
        description=canonical.description or incoming.description,
        default=canonical.default or incoming.default,
        validator=canonical.validator if canonical.validator is not None else incoming.validator,
    )


@dataclass(frozen=True)
class Outcome:
    """
    Cached resolution of one environment variable.

    Holds the canonical requirement as it was at first resolution; later
    declarations for the same name do not change an existing Outcome.
    """
    requirement: Requirement
    present: bool = False
    value: str = ""
    error: Optional[Exception] = None

    @property
    def name(self) -> str:
        return self.requirement.name

    @property
    def source(self) -> str:
        return self.requirement.source

    @property
    def description(self) -> str:
        return self.requirement.description

    @property
    def optional(self) -> bool:
        return self.requirement.optional

    @property
    def sensitive(self) -> bool:
        return self.requirement.sensitive

    @property
    def status(self) -> OutcomeStatus:
        if not self.present and not self.optional:
            return OutcomeStatus.MISSING
        if self.error is not None:
            return OutcomeStatus.INVALID
        return OutcomeStatus.OK

    @property
    def error_message(self) -> str:
        """
        Printable validation error, empty when there is none.

        For sensitive variables only messages from the built-in validators
        are shown, and only when they do not contain the value.
        """
        if self.error is None:
            return ""
        message = str(self.error)
        if self.sensitive and (
            not isinstance(self.error, InvalidValueError)
            or (self.value and self.value in message)
        ):
            return f"validation failed ({type(self.error).__name__}, value redacted)"
        return message

    @property
    def is_failure(self) -> bool:
        """True when this entry blocks startup (required and missing or invalid)."""
        return self.status is not OutcomeStatus.OK and not self.optional

    def __repr__(self) -> str:
        # Values stay out of reprs so outcomes can be logged safely
        return (
            f"Outcome(name={self.name!r}, present={self.present}, "
            f"status={self.status.value!r}, sensitive={self.sensitive})"
        )
