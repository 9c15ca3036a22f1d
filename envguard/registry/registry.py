"""
Environment variable registry.

Components declare the variables they need where they use them; the
registry merges every declaration for a name into one canonical
requirement, resolves each name exactly once, and answers startup
validation for everything declared so far.

Lifecycle:
    1. ``declare``/``check`` anywhere during initialization
    2. ``validate`` (or ``must_validate``) before serving
    3. ``freeze`` right before serving traffic
    4. After ``freeze``: re-declaring known names is allowed, new optional
       names are allowed with a warning, new required names raise
       ``LateRequirementError`` after dumping the full report
"""

import sys
import threading
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from readerwriterlock import rwlock

from envguard.core import Outcome, Requirement, RegistryState, merge_requirements
from envguard.core.exceptions import LateRequirementError
from envguard.logger import get_envguard_logger
from envguard.reporting import render_report
from envguard.validators import run_validator
from .environment import EnvironmentSource, ProcessEnvironment
from .validation import ValidationResult


class _PendingResolution:
    """Marker for a name whose first resolution is in progress."""

    def __init__(self):
        self.owner = threading.get_ident()
        self.done = threading.Event()


class EnvRegistry:
    """
    Thread-safe registry of environment variable requirements.

    The requirement table and the result cache share one fair reader-writer
    lock. A declaration merges under the write lock, then the first thread
    to claim a name resolves it with the lock released while concurrent
    declarations of that name wait for its Outcome. Each name therefore
    gets one environment read and one validator call, and validators may
    read the registry.

    The freeze flag is an Event and is checked without the main lock.
    """

    def __init__(self, environment: Optional[EnvironmentSource] = None,
                 diagnostic_stream: Optional[TextIO] = None,
                 reporter: Callable = render_report):
        self.environment = environment if environment is not None else ProcessEnvironment()
        self.reporter = reporter
        self._diagnostic_stream = diagnostic_stream
        self.logger = get_envguard_logger().bind(component="EnvRegistry")

        self._lock = rwlock.RWLockFair()
        self._requirements: Dict[str, Requirement] = {}
        self._outcomes: Dict[str, Outcome] = {}
        self._pending: Dict[str, _PendingResolution] = {}
        self._frozen = threading.Event()

        self.logger.debug("EnvRegistry initialized", environment=type(self.environment).__name__)

    @property
    def diagnostic_stream(self) -> TextIO:
        # Resolved on use so redirected stderr is honoured
        return self._diagnostic_stream if self._diagnostic_stream is not None else sys.stderr

    @property
    def state(self) -> RegistryState:
        return RegistryState.FROZEN if self._frozen.is_set() else RegistryState.OPEN

    def is_frozen(self) -> bool:
        return self._frozen.is_set()

    def declare(self, requirement: Requirement) -> Outcome:
        """
        Declare (or re-declare) a requirement and return its Outcome.

        The first declaration of a name reads and validates the variable;
        later declarations only merge metadata and return the cached
        Outcome unchanged.

        Raises:
            LateRequirementError: If the registry is frozen and a required
                variable is declared for a name never seen before
        """
        name = requirement.name

        if self._frozen.is_set():
            with self._lock.gen_rlock():
                known = name in self._requirements
            if not known:
                self._handle_late_declaration(requirement)

        with self._lock.gen_wlock():
            canonical = self._requirements.get(name)
            if canonical is None:
                canonical = requirement
            else:
                canonical = merge_requirements(canonical, requirement)
            self._requirements[name] = canonical

        return self._outcome_for(canonical)

    def _outcome_for(self, requirement: Requirement) -> Outcome:
        # One thread claims the name and resolves it outside the lock so
        # validators may read the registry; the others wait for its result.
        name = requirement.name
        while True:
            with self._lock.gen_wlock():
                outcome = self._outcomes.get(name)
                if outcome is not None:
                    return outcome
                pending = self._pending.get(name)
                if pending is None:
                    pending = _PendingResolution()
                    self._pending[name] = pending
                    canonical = self._requirements.setdefault(name, requirement)
                    break
            if pending.owner == threading.get_ident():
                raise RuntimeError(
                    f"Environment variable '{name}' declared again by its own validator"
                )
            pending.done.wait()

        try:
            outcome = self._resolve(canonical)
        except BaseException:
            with self._lock.gen_wlock():
                if self._pending.get(name) is pending:
                    del self._pending[name]
            pending.done.set()
            raise

        with self._lock.gen_wlock():
            if self._pending.get(name) is pending:
                del self._pending[name]
                self._outcomes[name] = outcome
        pending.done.set()
        return outcome

    def check(self, name: str, **fields) -> Outcome:
        """Keyword form of ``declare``: ``registry.check("PORT", default="8080")``."""
        return self.declare(Requirement(name=name, **fields))

    def value(self, name: str) -> Optional[Tuple[str, bool]]:
        """
        Cached ``(value, present)`` for ``name``, or None if the name was
        never resolved. Never declares or resolves anything.
        """
        with self._lock.gen_rlock():
            outcome = self._outcomes.get(name)
        if outcome is None:
            return None
        return outcome.value, outcome.present

    def requirement(self, name: str) -> Optional[Requirement]:
        """Current canonical requirement for ``name``, if declared."""
        with self._lock.gen_rlock():
            return self._requirements.get(name)

    def snapshot(self) -> List[Outcome]:
        """
        Outcomes for every declared name, sorted by name.

        Names without a cached Outcome are resolved with their canonical
        requirement. Missing or invalid values are reported on the
        Outcomes, never raised. Called from a validator, the name that
        validator is resolving is left out.
        """
        current = threading.get_ident()
        with self._lock.gen_rlock():
            outcomes = []
            unresolved = []
            for name, requirement in self._requirements.items():
                outcome = self._outcomes.get(name)
                if outcome is not None:
                    outcomes.append(outcome)
                    continue
                pending = self._pending.get(name)
                if pending is None or pending.owner != current:
                    unresolved.append(requirement)

        for requirement in unresolved:
            outcomes.append(self._outcome_for(requirement))

        return sorted(outcomes, key=lambda outcome: outcome.name)

    def validate(self) -> ValidationResult:
        """Classify every known variable; required missing/invalid entries are issues."""
        result = ValidationResult.from_outcomes(self.snapshot())
        self.logger.debug(
            "Environment validated",
            variables=len(result.outcomes),
            failures=result.failure_count,
        )
        return result

    def freeze(self):
        """
        Close the registry to new required declarations.

        One-way until ``reset``; calling it again only logs again.
        """
        self._frozen.set()
        self.logger.info("Registry frozen - new required registrations will raise")

    def reset(self):
        """
        Clear every requirement, cached Outcome and the freeze flag.

        For test isolation only: not safe while other threads are declaring.
        """
        with self._lock.gen_wlock():
            self._requirements.clear()
            self._outcomes.clear()
            self._pending.clear()
            self._frozen.clear()
        self.logger.debug("Registry reset")

    def __len__(self) -> int:
        with self._lock.gen_rlock():
            return len(self._requirements)

    def __contains__(self, name: str) -> bool:
        with self._lock.gen_rlock():
            return name in self._requirements

    def _resolve(self, requirement: Requirement) -> Outcome:
        # Runs without the lock; the caller owns the pending marker
        value = self.environment.lookup(requirement.name)
        if value is None and requirement.default != "":
            value = requirement.default
        present = value is not None

        error = None
        if present and requirement.validator is not None:
            error = run_validator(requirement.validator, value)

        outcome = Outcome(
            requirement=requirement,
            present=present,
            value=value if present else "",
            error=error,
        )
        self.logger.debug(
            "Environment variable resolved",
            name=requirement.name,
            source=requirement.source,
            present=present,
            status=outcome.status.value,
        )
        return outcome

    def _handle_late_declaration(self, requirement: Requirement):
        if requirement.optional:
            self.logger.warning(
                "Optional environment variable registered after freeze",
                name=requirement.name,
                source=requirement.source,
            )
            return

        self.logger.critical(
            "REQUIRED environment variable registered after freeze",
            name=requirement.name,
            source=requirement.source,
        )
        stream = self.diagnostic_stream
        stream.write("Complete environment state at time of failure:\n")
        self.reporter(self.snapshot(), stream)
        raise LateRequirementError(requirement.name, requirement.source)
