"""Handlers for copy and move."""

from argparse import Namespace

from filehand.core import file_ops

from .base import BaseCommandHandler


class CopyHandler(BaseCommandHandler):
    """Copy a file."""

    async def execute(self, args: Namespace) -> bool:
        return file_ops.copy_file(args.src, args.dest)


class MoveHandler(BaseCommandHandler):
    """Move or rename a file."""

    async def execute(self, args: Namespace) -> bool:
        return file_ops.move_file(args.src, args.dest)
