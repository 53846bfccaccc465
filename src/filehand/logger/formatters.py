"""Console formatters.

INFO records are the status lines of the file operations and are printed
bare; every other level gets the structured format with a coloured level.
"""

import copy
import logging

from filehand.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Formatter that wraps the level name in ANSI colour codes."""

    def format(self, record: logging.LogRecord) -> str:
        color = LOG_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        # the record is shared with the file handler
        colored = copy.copy(record)
        colored.levelname = f"{color}{record.levelname}{LOG_COLORS['RESET']}"
        return super().format(colored)


class HybridConsoleFormatter(ColoredConsoleFormatter):
    """Bare message for INFO, coloured structured output otherwise.

    Example Output:
        INFO:     "File created successfully: Sample.txt"
        ERROR:    "12:30:45 - filehand.core.file_ops - ERROR - Error ..."

    """

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return record.getMessage()
        return super().format(record)
