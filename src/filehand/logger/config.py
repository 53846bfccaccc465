"""Configuration loading and updating for the logging system."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from filehand.config.paths import Paths
from filehand.constants import DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL

if TYPE_CHECKING:
    from filehand.domain.types import GlobalConfig
    from filehand.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str, Path]:
    """Load bootstrap console level, file level, and file path.

    Levels are the built-in defaults; update_logger_from_config() applies
    the values from settings.conf once it has been loaded.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, Paths.log_file()


def update_logger_from_config(
    state: "_LoggerState", config: "GlobalConfig"
) -> None:
    """Update logger handler levels from global config.

    Only updates handler levels, never adds/removes handlers. Level names
    are validated by ConfigManager before they get here.

    Args:
        state: Logger state object (from logger.state module)
        config: Loaded global configuration

    """
    console_level = getattr(logging, config["console_log_level"])
    file_level = getattr(logging, config["log_level"])

    if state.queue_listener is not None:
        for handler in state.queue_listener.handlers:
            if isinstance(handler, RotatingFileHandler):
                handler.setLevel(file_level)
            elif isinstance(handler, logging.StreamHandler):
                handler.setLevel(console_level)

    state.config_applied = True
