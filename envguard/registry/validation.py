"""
Startup validation.

``EnvRegistry.validate`` classifies every known variable into a
``ValidationResult``; ``must_validate`` renders the report and stops the
process when a required variable is missing or invalid.
"""

import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from envguard.config import EnvGuardConfig
from envguard.core import Outcome, OutcomeStatus
from envguard.core.exceptions import EnvironmentValidationError
from envguard.logger import get_envguard_logger
from envguard.reporting import render_report


@dataclass(frozen=True)
class ValidationIssue:
    """A required variable that blocks startup."""
    name: str
    source: str
    status: OutcomeStatus
    message: str


@dataclass
class ValidationResult:
    """Result of validating every known environment variable."""
    outcomes: List[Outcome] = field(default_factory=list)
    issues: List[ValidationIssue] = field(default_factory=list)

    @classmethod
    def from_outcomes(cls, outcomes: List[Outcome]) -> "ValidationResult":
        result = cls(outcomes=list(outcomes))
        for outcome in outcomes:
            if outcome.is_failure:
                result.add_issue(outcome)
        return result

    def add_issue(self, outcome: Outcome):
        """Record a failing outcome."""
        if outcome.status is OutcomeStatus.MISSING:
            message = "required variable is not set"
        else:
            message = outcome.error_message
        self.issues.append(ValidationIssue(
            name=outcome.name,
            source=outcome.source,
            status=outcome.status,
            message=message,
        ))

    @property
    def failure_count(self) -> int:
        return len(self.issues)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def missing(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.status is OutcomeStatus.MISSING]

    @property
    def invalid(self) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.status is OutcomeStatus.INVALID]

    def raise_for_failures(self):
        """Raise EnvironmentValidationError when any required variable failed."""
        if not self.is_valid:
            raise EnvironmentValidationError(self)

    def __bool__(self):
        return self.is_valid


def must_validate(registry, stream: Optional[TextIO] = None,
                  config: Optional[EnvGuardConfig] = None) -> ValidationResult:
    """
    Validate ``registry`` and exit the process if anything required failed.

    The full report is written to ``stream`` (stderr by default) either way.

    Raises:
        SystemExit: With ``config.exit_code`` when validation fails
    """
    if stream is None:
        stream = sys.stderr
    if config is None:
        config = EnvGuardConfig.from_env()

    logger = get_envguard_logger().bind(component="must_validate")

    result = registry.validate()
    render_report(result.outcomes, stream, show_values=config.show_values)

    if not result.is_valid:
        stream.write(
            f"\n{result.failure_count} required environment variable(s) missing or invalid\n"
        )
        logger.error(
            "Environment validation failed",
            failures=result.failure_count,
            missing=[issue.name for issue in result.missing],
            invalid=[issue.name for issue in result.invalid],
        )
        raise SystemExit(config.exit_code)

    logger.info("Environment validation passed", variables=len(result.outcomes))
    return result
