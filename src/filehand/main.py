"""Main CLI entry point for filehand."""

import sys

import uvloop

from filehand.cli import CLIRunner
from filehand.exceptions import FileHandError
from filehand.logger import flush_all_handlers, get_logger

logger = get_logger(__name__)


async def async_main() -> None:
    """Build the CLI runner and execute the requested command."""
    logger.debug("CLI started")
    runner = CLIRunner()
    await runner.run()
    logger.debug("CLI completed successfully")


def main() -> None:
    """Run the CLI application on the uvloop event loop.

    Exits with status 1 on configuration errors, unexpected errors and
    user cancellation.
    """
    try:
        uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        sys.exit(1)
    except FileHandError as e:
        logger.error("%s", e)
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)
    finally:
        flush_all_handlers()


if __name__ == "__main__":
    main()
