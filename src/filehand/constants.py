"""Centralized constants module for filehand.

This module serves as the single source of truth for shared constants.
Constants are grouped by category and use typing.Final annotations.

Usage:
    from filehand.constants import CONFIG_VERSION
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"

CONFIG_FILE_NAME: Final[str] = "settings.conf"

# Default config directory name under the user's home directory
CONFIG_DIR_NAME: Final[str] = ".config"

# Application-specific subdirectory under the config directory
DEFAULT_CONFIG_SUBDIR: Final[str] = "filehand"

# Environment overrides (used by tests to isolate from the real home dir)
ENV_CONFIG_DIR: Final[str] = "FILEHAND_CONFIG_DIR"
ENV_LOG_DIR: Final[str] = "FILEHAND_LOG_DIR"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_ENCODING: Final[str] = "utf-8"

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_DEMO: Final[str] = "demo"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_ENCODING: Final[str] = "encoding"

KEY_SAMPLE_FILE: Final[str] = "sample_file"
KEY_DEMO_DIRECTORY: Final[str] = "directory"
KEY_COPY_NAME: Final[str] = "copy_name"
KEY_SEARCH_EXTENSION: Final[str] = "search_extension"

# =============================================================================
# Demo Constants
# =============================================================================

DEMO_BANNER: Final[str] = (
    "FILE HANDLING UTILITY\n"
    "Demonstrates common file operations: create, read, append, "
    "stat, list, search, copy, move and delete."
)
DEFAULT_SAMPLE_FILE: Final[str] = "Sample.txt"
DEFAULT_DEMO_DIRECTORY: Final[str] = "test_directory"
DEFAULT_COPY_NAME: Final[str] = "example_copy.txt"
DEFAULT_SEARCH_EXTENSION: Final[str] = ".txt"
DEMO_INITIAL_CONTENT: Final[str] = "Hi! This is the filehand demo file.\n"
DEMO_APPENDED_CONTENT: Final[str] = (
    "It was appended to after creation.\n"
)

# =============================================================================
# Logging Constants
# =============================================================================

ROOT_LOGGER_NAME: Final[str] = "filehand"
LOG_FILE_NAME: Final[str] = "filehand.log"

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# ANSI color codes for console log levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
