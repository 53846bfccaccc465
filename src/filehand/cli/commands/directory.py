"""Handlers for directory commands: mkdir, list, search."""

from argparse import Namespace
from pathlib import Path

from filehand.core import file_ops
from filehand.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class MkdirHandler(BaseCommandHandler):
    """Create a directory tree."""

    async def execute(self, args: Namespace) -> bool:
        return file_ops.create_directory(args.path)


class ListHandler(BaseCommandHandler):
    """List directory entries."""

    async def execute(self, args: Namespace) -> bool:
        entries = file_ops.list_directory(args.path)
        if entries is None:
            return False

        if args.json:
            self._print_json(entries)
        else:
            for entry in entries:
                print(entry)
        return True


class SearchHandler(BaseCommandHandler):
    """Recursively search for files by suffix and name fragment.

    An empty result is still a successful search.
    """

    async def execute(self, args: Namespace) -> bool:
        if not Path(args.directory).is_dir():
            logger.error("Search directory not found: %s", args.directory)
            return False

        matches = file_ops.search_files(
            args.directory, args.extension, args.contains
        )
        if args.json:
            self._print_json(matches)
        else:
            for match in matches:
                print(match)
        logger.debug("%d match(es) in %s", len(matches), args.directory)
        return True
