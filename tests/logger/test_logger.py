"""Tests for the logging package."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest
from pytest import MonkeyPatch

from filehand.exceptions import ConfigurationError
from filehand.logger import (
    HybridConsoleFormatter,
    get_logger,
    get_state,
    restore_console_level,
    set_console_level_temporarily,
)
from filehand.logger.config import load_log_settings, update_logger_from_config
from filehand.logger.formatters import ColoredConsoleFormatter
from filehand.logger.handlers import _create_file_handler


def _record(level: int, msg: str = "hello %s", args=("world",)):
    return logging.LogRecord(
        name="filehand.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )


class TestFormatters:
    """Test console formatters."""

    def test_hybrid_info_is_bare_message(self):
        formatter = HybridConsoleFormatter("%(levelname)s - %(message)s")

        assert formatter.format(_record(logging.INFO)) == "hello world"

    def test_hybrid_error_is_structured_and_colored(self):
        formatter = HybridConsoleFormatter("%(levelname)s - %(message)s")

        output = formatter.format(_record(logging.ERROR))

        assert output == "\033[31mERROR\033[0m - hello world"

    def test_colored_formatter_restores_levelname(self):
        formatter = ColoredConsoleFormatter("%(levelname)s")
        record = _record(logging.WARNING)

        formatter.format(record)

        assert record.levelname == "WARNING"


class TestLoadLogSettings:
    """Test bootstrap log settings."""

    def test_with_env_var(self, monkeypatch: MonkeyPatch):
        monkeypatch.setenv("FILEHAND_LOG_DIR", "/tmp/filehand-test-logs")

        console_level, file_level, log_path = load_log_settings()

        assert console_level == "INFO"
        assert file_level == "INFO"
        assert log_path == Path("/tmp/filehand-test-logs") / "filehand.log"

    def test_without_env_var(self, monkeypatch: MonkeyPatch):
        monkeypatch.delenv("FILEHAND_LOG_DIR", raising=False)

        _, _, log_path = load_log_settings()

        assert log_path == (
            Path.home() / ".config" / "filehand" / "logs" / "filehand.log"
        )

    def test_tilde_is_expanded(self, monkeypatch: MonkeyPatch):
        monkeypatch.setenv("FILEHAND_LOG_DIR", "~/custom-logs")

        _, _, log_path = load_log_settings()

        assert log_path == Path.home() / "custom-logs" / "filehand.log"


class TestFileHandler:
    """Test rotating file handler creation."""

    def test_creates_log_directory(self, tmp_path: Path):
        log_file = tmp_path / "nested" / "filehand.log"

        handler = _create_file_handler(log_file, "DEBUG", "filehand")
        try:
            assert log_file.parent.is_dir()
            assert handler.level == logging.DEBUG
        finally:
            handler.close()

    def test_unwritable_location_raises(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            _create_file_handler(blocker / "filehand.log", "INFO", "filehand")


class TestHandlerLevels:
    """Test level updates applied to the listener's handlers."""

    @pytest.fixture
    def fake_state(self, tmp_path: Path):
        console = logging.StreamHandler()
        console.setLevel(logging.INFO)
        file_handler = RotatingFileHandler(
            tmp_path / "x.log", encoding="utf-8"
        )
        file_handler.setLevel(logging.INFO)
        state = SimpleNamespace(
            queue_listener=SimpleNamespace(
                handlers=(console, file_handler)
            ),
            config_applied=False,
            saved_console_level=None,
        )
        yield state, console, file_handler
        file_handler.close()

    def test_update_from_config(self, fake_state, global_config):
        state, console, file_handler = fake_state
        global_config["console_log_level"] = "ERROR"
        global_config["log_level"] = "DEBUG"

        update_logger_from_config(state, global_config)

        assert console.level == logging.ERROR
        assert file_handler.level == logging.DEBUG
        assert state.config_applied

    def test_verbose_toggle_only_touches_console(self, fake_state):
        state, console, file_handler = fake_state

        with patch("filehand.logger.logger.get_state", return_value=state):
            set_console_level_temporarily("DEBUG")
            assert console.level == logging.DEBUG
            assert file_handler.level == logging.INFO

            restore_console_level()
            assert console.level == logging.INFO
            assert state.saved_console_level is None


def test_get_logger_returns_child_of_root():
    logger = get_logger("filehand.some.module")

    assert logger.name == "filehand.some.module"
    assert get_state().root_initialized
    assert logging.getLogger("filehand").handlers
