"""
Tests for freezing the registry.
"""

import pytest
from structlog.testing import capture_logs

from envguard.core import Requirement, RegistryState
from envguard.core.exceptions import LateRequirementError


class TestFreeze:

    def test_registry_starts_open(self, registry):
        assert registry.state is RegistryState.OPEN
        assert not registry.is_frozen()

    def test_freeze_is_idempotent_and_logs_each_time(self, registry):
        with capture_logs() as logs:
            registry.freeze()
            registry.freeze()

        assert registry.state is RegistryState.FROZEN
        frozen_events = [entry for entry in logs if entry["event"].startswith("Registry frozen")]
        assert len(frozen_events) == 2
        assert all(entry["log_level"] == "info" for entry in frozen_events)

    def test_new_required_declaration_raises(self, registry):
        registry.declare(Requirement(name="API_URL", source="client"))
        registry.freeze()

        with pytest.raises(LateRequirementError) as exc_info:
            registry.declare(Requirement(name="LATE_SECRET", source="billing"))

        assert exc_info.value.name == "LATE_SECRET"
        assert exc_info.value.source == "billing"
        assert "LATE_SECRET" not in registry

    def test_new_required_declaration_dumps_report(self, registry, diagnostics):
        registry.declare(Requirement(name="API_URL", source="client"))
        registry.freeze()

        with capture_logs() as logs:
            with pytest.raises(LateRequirementError):
                registry.declare(Requirement(name="LATE_SECRET", source="billing"))

        report = diagnostics.getvalue()
        assert "Complete environment state" in report
        assert "API_URL" in report
        assert any(entry["log_level"] == "critical" and entry["name"] == "LATE_SECRET" for entry in logs)

    def test_new_optional_declaration_warns(self, registry):
        registry.freeze()

        with capture_logs() as logs:
            outcome = registry.declare(Requirement(name="PORT", optional=True, default="8080"))

        assert outcome.present is True
        assert outcome.value == "8080"
        warnings = [entry for entry in logs if entry["log_level"] == "warning"]
        assert len(warnings) == 1
        assert warnings[0]["name"] == "PORT"

    def test_known_names_redeclared_after_freeze(self, registry):
        required = registry.declare(Requirement(name="API_URL"))
        optional = registry.declare(Requirement(name="PORT", optional=True, default="8080"))
        registry.freeze()

        with capture_logs() as logs:
            assert registry.declare(Requirement(name="API_URL")) is required
            assert registry.declare(Requirement(name="PORT")) is optional

        assert not [entry for entry in logs if entry["log_level"] in ("warning", "critical")]

    def test_late_optional_then_required_is_allowed(self, registry):
        registry.freeze()
        registry.declare(Requirement(name="PORT", optional=True))

        outcome = registry.declare(Requirement(name="PORT"))

        assert registry.requirement("PORT").optional is False
        assert outcome.optional is True

    def test_reset_reopens(self, registry):
        registry.freeze()
        registry.reset()

        outcome = registry.declare(Requirement(name="LATE_SECRET"))

        assert outcome.status.value == "missing"
