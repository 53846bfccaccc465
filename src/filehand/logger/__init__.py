"""Logging utilities for filehand.

This package provides:
- Colored console output (bare message for INFO, structured otherwise)
- File rotation using the standard RotatingFileHandler
- QueueHandler/QueueListener so callers never block on handler I/O
- Configuration-based log levels

Architecture:
    Application → QueueHandler → Queue → QueueListener Thread
                                              ↓
                                    Console + File Handlers

Usage:
    >>> from filehand.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Created %s", path)  # Use %-style formatting

Environment Variables:
    FILEHAND_LOG_DIR: Override the log directory (used by the test suite).

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Handlers are ONLY attached to the root 'filehand' logger
    4. Never use f-strings in log calls
"""

from filehand.logger.config import (
    update_logger_from_config as _update_config,
)
from filehand.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from filehand.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    restore_console_level,
    set_console_level_temporarily,
    setup_logging,
)
from filehand.logger.state import _state, get_state

__all__ = [
    "ColoredConsoleFormatter",
    "HybridConsoleFormatter",
    "_state",  # For testing only
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "restore_console_level",
    "set_console_level_temporarily",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(config) -> None:
    """Update logger handler levels from a loaded GlobalConfig."""
    _update_config(get_state(), config)
