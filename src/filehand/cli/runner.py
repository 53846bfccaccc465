"""CLI runner for filehand.

Routes parsed arguments to the matching command handler.
"""

import sys
from argparse import Namespace
from collections.abc import Sequence

from filehand import __version__
from filehand.config import ConfigManager
from filehand.exceptions import CommandError
from filehand.logger import (
    get_logger,
    restore_console_level,
    set_console_level_temporarily,
    update_logger_from_config,
)

from .commands import (
    AppendHandler,
    BaseCommandHandler,
    CopyHandler,
    CreateHandler,
    DeleteHandler,
    DemoHandler,
    InfoHandler,
    ListHandler,
    MkdirHandler,
    MoveHandler,
    ReadHandler,
    SearchHandler,
)
from .parser import CLIParser

logger = get_logger(__name__)

HANDLER_TYPES: dict[str, type[BaseCommandHandler]] = {
    "create": CreateHandler,
    "read": ReadHandler,
    "append": AppendHandler,
    "delete": DeleteHandler,
    "info": InfoHandler,
    "mkdir": MkdirHandler,
    "list": ListHandler,
    "search": SearchHandler,
    "copy": CopyHandler,
    "move": MoveHandler,
    "demo": DemoHandler,
}


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, config_manager: ConfigManager | None = None) -> None:
        """Load configuration, apply log levels and build handlers.

        Args:
            config_manager: Injected config manager (created when omitted)

        Raises:
            ConfigurationError: If settings.conf holds invalid values

        """
        self.config_manager = config_manager or ConfigManager()
        self.global_config = self.config_manager.load_global_config()
        update_logger_from_config(self.global_config)

        self.command_handlers: dict[str, BaseCommandHandler] = {
            name: handler_type(self.config_manager, self.global_config)
            for name, handler_type in HANDLER_TYPES.items()
        }

    async def run(self, argv: Sequence[str] | None = None) -> None:
        """Parse arguments and run the selected command.

        Exits with status 1 when no command is given, the command is
        unknown or the operation reports failure.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        """
        args = CLIParser(self.global_config).parse_args(argv)

        if getattr(args, "version", False):
            print(__version__)
            return

        if not args.command:
            print("No command specified. Use --help.")
            sys.exit(1)

        try:
            success = await self._execute_command(args)
        except CommandError as e:
            logger.error("%s", e)
            sys.exit(1)

        if not success:
            sys.exit(1)

    async def _execute_command(self, args: Namespace) -> bool:
        """Execute the command with the appropriate handler.

        Raises:
            CommandError: If no handler is registered for the command

        """
        handler = self.command_handlers.get(args.command)
        if handler is None:
            msg = "unknown command"
            raise CommandError(msg, target=args.command)

        verbose = getattr(args, "verbose", False)
        if verbose:
            set_console_level_temporarily("DEBUG")

        try:
            logger.debug("Running command: %s", args.command)
            return await handler.execute(args)
        finally:
            if verbose:
                restore_console_level()
