"""Path constants and utilities for filehand configuration."""

import os
from pathlib import Path

from filehand.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    ENV_CONFIG_DIR,
    ENV_LOG_DIR,
    LOG_FILE_NAME,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_DIR = HOME_DIR / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR
    LOGS_DIR = CONFIG_DIR / "logs"

    @classmethod
    def config_dir(cls) -> Path:
        """Return the active configuration directory.

        FILEHAND_CONFIG_DIR takes precedence over ~/.config/filehand.
        """
        env_dir = os.getenv(ENV_CONFIG_DIR)
        if env_dir:
            return cls.expand_path(env_dir)
        return cls.CONFIG_DIR

    @classmethod
    def log_file(cls) -> Path:
        """Return the log file path.

        FILEHAND_LOG_DIR takes precedence over ~/.config/filehand/logs.
        """
        env_dir = os.getenv(ENV_LOG_DIR)
        logs_dir = Path(env_dir).expanduser() if env_dir else cls.LOGS_DIR
        return logs_dir / LOG_FILE_NAME

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand and resolve path with ~ and relative path support.

        Args:
            path_str: Path string to expand (e.g., "~/my-path" or "./relative")

        Returns:
            Expanded and resolved Path object

        """
        return Path(path_str).expanduser().resolve(strict=False)
