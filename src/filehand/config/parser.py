"""INI parser utilities for filehand configuration.

Helpers for reading settings.conf with inline comments and for writing it
back with user-facing documentation.
"""

import configparser
from datetime import UTC, datetime

from filehand.constants import (
    CONFIG_VERSION,
    ISO_DATETIME_FORMAT,
    KEY_CONFIG_VERSION,
    SECTION_DEFAULT,
    SECTION_DEMO,
)


def _strip_inline_comment(value: str) -> str:
    """Strip inline comments (anything after '  #') from a value."""
    if "  #" in value:
        return value.split("  #")[0].strip()
    return value


def new_config_parser() -> configparser.ConfigParser:
    """Create the ConfigParser flavour used for settings.conf."""
    return configparser.ConfigParser(
        inline_comment_prefixes=("#", ";"),
        interpolation=None,
    )


class ConfigCommentManager:
    """Manages configuration file comments for user-friendly documentation."""

    @staticmethod
    def get_file_header() -> str:
        """Generate file header comment with description and timestamp."""
        timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
        return f"""# filehand configuration
# You can modify these values to customize the behavior of filehand.
#
# Last updated: {timestamp}
# Configuration version: {CONFIG_VERSION}

"""

    @staticmethod
    def get_section_comments() -> dict[str, str]:
        """Get comments for each configuration section."""
        return {
            SECTION_DEFAULT: """# ========================================
# MAIN CONFIGURATION
# ========================================
# config_version: Version of configuration format (DO NOT EDIT)
# log_level: Detail level for log files (DEBUG, INFO, WARNING, ERROR)
# console_log_level: Console output detail level (DEBUG, INFO, etc.)
# encoding: Text encoding used to read and write file content

""",
            SECTION_DEMO: """
# ========================================
# DEMO
# ========================================
# Names used by `filehand demo` inside its working directory.
#
# sample_file: File created, appended to, read and deleted
# directory: Directory the sample file is copied into
# copy_name: Name of the copy inside the demo directory
# search_extension: Suffix used for the search step

""",
        }

    @staticmethod
    def get_key_comments() -> dict[str, dict[str, str]]:
        """Get inline comments for specific configuration keys."""
        return {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: "# DO NOT MODIFY - Config format version",
            },
            SECTION_DEMO: {},
        }
