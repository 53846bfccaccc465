"""Base command handler for filehand CLI commands."""

from abc import ABC, abstractmethod
from argparse import Namespace

import orjson

from filehand.config import ConfigManager
from filehand.domain.types import GlobalConfig


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    CLIRunner acts as the composition root and injects the config manager
    and the already loaded global configuration.
    """

    def __init__(
        self,
        config_manager: ConfigManager,
        global_config: GlobalConfig | None = None,
    ) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            config_manager: Configuration management instance
            global_config: Loaded configuration (loaded when omitted)

        """
        self.config_manager = config_manager
        self.global_config = (
            global_config or config_manager.load_global_config()
        )

    @property
    def encoding(self) -> str:
        """Text encoding configured for file content."""
        return self.global_config["encoding"]

    @abstractmethod
    async def execute(self, args: Namespace) -> bool:
        """Execute the command with the given arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            True if the operation succeeded

        """

    @staticmethod
    def _print_json(data: object) -> None:
        """Print data as indented JSON."""
        print(orjson.dumps(data, option=orjson.OPT_INDENT_2).decode())
