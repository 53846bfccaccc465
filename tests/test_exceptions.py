"""Tests for exception classes."""

import pytest

from filehand.exceptions import CommandError, ConfigurationError, FileHandError


class TestConfigurationError:
    """Test ConfigurationError class."""

    def test_basic_initialization(self):
        error = ConfigurationError("bad value")
        assert error.message == "bad value"
        assert error.target is None
        assert str(error) == "Invalid configuration: bad value"

    def test_initialization_with_target(self):
        error = ConfigurationError("bad value", target="log_level")
        assert str(error) == "Invalid configuration for 'log_level': bad value"

    def test_inheritance(self):
        assert isinstance(ConfigurationError("x"), FileHandError)


class TestCommandError:
    """Test CommandError class."""

    def test_raise_and_catch(self):
        with pytest.raises(CommandError) as exc_info:
            raise CommandError("unknown command", target="frobnicate")

        assert exc_info.value.target == "frobnicate"
        assert str(exc_info.value) == (
            "Command failed for 'frobnicate': unknown command"
        )

    def test_distinct_from_configuration_error(self):
        assert not isinstance(CommandError("x"), ConfigurationError)


def test_base_error_prefix():
    assert str(FileHandError("boom")) == "Operation failed: boom"
