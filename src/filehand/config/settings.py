"""Global configuration manager for INI settings."""

import codecs
import configparser
from pathlib import Path

from filehand.config.parser import (
    ConfigCommentManager,
    _strip_inline_comment,
    new_config_parser,
)
from filehand.config.paths import Paths
from filehand.constants import (
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_COPY_NAME,
    DEFAULT_DEMO_DIRECTORY,
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SAMPLE_FILE,
    DEFAULT_SEARCH_EXTENSION,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_COPY_NAME,
    KEY_DEMO_DIRECTORY,
    KEY_ENCODING,
    KEY_LOG_LEVEL,
    KEY_SAMPLE_FILE,
    KEY_SEARCH_EXTENSION,
    SECTION_DEFAULT,
    SECTION_DEMO,
    VALID_LOG_LEVELS,
)
from filehand.domain.types import DemoConfig, GlobalConfig
from filehand.exceptions import ConfigurationError

# Type alias for raw INI config dictionary
RawConfigDict = dict[str, str | dict[str, str]]


class ConfigManager:
    """Loads, validates and saves settings.conf."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.config_dir())

        """
        self.config_dir = config_dir or Paths.config_dir()
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_global_config(self) -> RawConfigDict:
        """Get default global configuration values."""
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            KEY_ENCODING: DEFAULT_ENCODING,
            SECTION_DEMO: {
                KEY_SAMPLE_FILE: DEFAULT_SAMPLE_FILE,
                KEY_DEMO_DIRECTORY: DEFAULT_DEMO_DIRECTORY,
                KEY_COPY_NAME: DEFAULT_COPY_NAME,
                KEY_SEARCH_EXTENSION: DEFAULT_SEARCH_EXTENSION,
            },
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser populated from the defaults dictionary."""
        config = new_config_parser()

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))

        return config

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration from the INI file.

        The file is created with defaults when it does not exist yet.
        User values override defaults key by key.

        Returns:
            Validated global configuration

        Raises:
            ConfigurationError: If the file cannot be parsed or a value is
                invalid

        """
        defaults = self.get_default_global_config()
        config = self._create_config_from_defaults(defaults)

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                raise ConfigurationError(
                    str(e), target=str(self.settings_file)
                ) from e
        else:
            self.save_global_config(self._convert_to_global_config(config))

        return self._convert_to_global_config(config)

    def save_global_config(self, config: GlobalConfig) -> None:
        """Save global configuration to INI file with comments.

        Args:
            config: Global configuration to save

        """
        comment_manager = ConfigCommentManager()
        section_comments = comment_manager.get_section_comments()
        key_comments = comment_manager.get_key_comments()

        default_data = {
            KEY_CONFIG_VERSION: config["config_version"],
            KEY_LOG_LEVEL: config["log_level"],
            KEY_CONSOLE_LOG_LEVEL: config["console_log_level"],
            KEY_ENCODING: config["encoding"],
        }
        demo_data = dict(config["demo"])

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(comment_manager.get_file_header())

            for section, data in (
                (SECTION_DEFAULT, default_data),
                (SECTION_DEMO, demo_data),
            ):
                f.write(section_comments[section])
                f.write(f"[{section}]\n")
                for key, value in data.items():
                    inline_comment = key_comments[section].get(key, "")
                    if inline_comment:
                        f.write(f"{key} = {value}  {inline_comment}\n")
                    else:
                        f.write(f"{key} = {value}\n")

    def _convert_to_global_config(
        self, config: configparser.ConfigParser
    ) -> GlobalConfig:
        """Convert a ConfigParser into a validated GlobalConfig."""

        def scalar(key: str) -> str:
            return _strip_inline_comment(config.get(SECTION_DEFAULT, key))

        def demo_value(key: str) -> str:
            return _strip_inline_comment(config.get(SECTION_DEMO, key))

        demo = DemoConfig(
            sample_file=demo_value(KEY_SAMPLE_FILE),
            directory=demo_value(KEY_DEMO_DIRECTORY),
            copy_name=demo_value(KEY_COPY_NAME),
            search_extension=demo_value(KEY_SEARCH_EXTENSION),
        )

        result = GlobalConfig(
            config_version=scalar(KEY_CONFIG_VERSION),
            log_level=scalar(KEY_LOG_LEVEL).upper(),
            console_log_level=scalar(KEY_CONSOLE_LOG_LEVEL).upper(),
            encoding=scalar(KEY_ENCODING),
            demo=demo,
        )
        self.validate(result)
        return result

    @staticmethod
    def validate(config: GlobalConfig) -> None:
        """Validate configuration values.

        Raises:
            ConfigurationError: On an unknown log level or encoding, or an
                empty demo name

        """
        for key in (KEY_LOG_LEVEL, KEY_CONSOLE_LOG_LEVEL):
            if config[key] not in VALID_LOG_LEVELS:
                msg = (
                    f"'{config[key]}' is not one of "
                    f"{', '.join(VALID_LOG_LEVELS)}"
                )
                raise ConfigurationError(msg, target=key)

        try:
            codecs.lookup(config["encoding"])
        except LookupError as e:
            msg = f"unknown encoding '{config['encoding']}'"
            raise ConfigurationError(msg, target=KEY_ENCODING) from e

        for key, value in config["demo"].items():
            if not value.strip():
                raise ConfigurationError("value must not be empty", target=key)
