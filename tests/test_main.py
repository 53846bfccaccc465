"""Tests for the CLI entry point."""

from unittest.mock import patch

import pytest

from filehand import main as main_module
from filehand.exceptions import ConfigurationError


def test_main_exits_on_configuration_error():
    error = ConfigurationError("bad value", target="log_level")

    with (
        patch.object(main_module, "CLIRunner", side_effect=error),
        pytest.raises(SystemExit) as exc_info,
    ):
        main_module.main()

    assert exc_info.value.code == 1


def test_main_propagates_command_exit_code():
    class FailingRunner:
        async def run(self):
            raise SystemExit(1)

    with (
        patch.object(main_module, "CLIRunner", FailingRunner),
        pytest.raises(SystemExit) as exc_info,
    ):
        main_module.main()

    assert exc_info.value.code == 1


def test_main_runs_successfully():
    class OkRunner:
        async def run(self):
            return None

    with patch.object(main_module, "CLIRunner", OkRunner):
        main_module.main()
