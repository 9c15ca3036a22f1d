"""
Tests for the envguard command line.
"""

import sys
import types

import pytest

from envguard import cli
from envguard.logger import get_envguard_logger
from envguard.validators import url


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep the CLI from reconfiguring the root logger during tests."""
    monkeypatch.setattr(cli, "init_logger", lambda config: get_envguard_logger())


@pytest.fixture
def declaring_module(monkeypatch):
    """Importable module exposing a declare_env hook."""
    module = types.ModuleType("envguard_test_settings")

    def declare_env(registry):
        registry.check("API_URL", source="client", description="API base URL", validator=url)
        registry.check("STRIPE_API_KEY", source="payments", sensitive=True)
        registry.check("PORT", source="server", optional=True, default="8080")

    module.declare_env = declare_env
    monkeypatch.setitem(sys.modules, module.__name__, module)
    return module.__name__


class TestCheckCommand:

    def test_valid_environment_exits_zero(self, registry, declaring_module, capsys):
        code = cli.main(["check", declaring_module], registry=registry)

        assert code == 0
        output = capsys.readouterr().out
        assert "API_URL" in output
        assert "PORT" in output

    def test_missing_required_exits_two(self, registry, environment, declaring_module, capsys):
        environment.unset("STRIPE_API_KEY")

        code = cli.main(["check", declaring_module], registry=registry)

        assert code == 2
        assert "1 required environment variable(s) missing or invalid" in capsys.readouterr().out

    def test_show_values_flag_masks_secrets(self, registry, declaring_module, capsys):
        cli.main(["check", declaring_module, "--show-values"], registry=registry)

        output = capsys.readouterr().out
        assert "sk_test_1234567890" not in output
        assert "••••7890" in output

    def test_module_without_hook(self, registry, monkeypatch, capsys):
        module = types.ModuleType("envguard_test_empty")
        monkeypatch.setitem(sys.modules, module.__name__, module)

        assert cli.main(["check", module.__name__], registry=registry) == 0


class TestReportCommand:

    def test_report_always_exits_zero(self, registry, environment, declaring_module, capsys):
        environment.unset("API_URL")

        code = cli.main(["report", declaring_module], registry=registry)

        assert code == 0
        assert "missing" in capsys.readouterr().out


class TestErrors:

    def test_unknown_module(self, registry, capsys):
        code = cli.main(["check", "envguard_no_such_module"], registry=registry)

        assert code == 1
        assert "cannot import module" in capsys.readouterr().err

    def test_bad_log_level_in_environment(self, registry, declaring_module, monkeypatch, capsys):
        monkeypatch.setenv("ENVGUARD_LOG_LEVEL", "verbose")

        assert cli.main(["check", declaring_module], registry=registry) == 1

    def test_unknown_command(self, registry):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["explode", "x"], registry=registry)

        assert exc_info.value.code == 2
