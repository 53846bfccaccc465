"""Handlers for single-file commands: create, read, append, delete, info."""

from argparse import Namespace

from filehand.core import file_ops
from filehand.core.demo import format_file_info
from filehand.logger import get_logger

from .base import BaseCommandHandler

logger = get_logger(__name__)


class CreateHandler(BaseCommandHandler):
    """Create a new file."""

    async def execute(self, args: Namespace) -> bool:
        return file_ops.create_file(
            args.path, args.content, encoding=self.encoding
        )


class ReadHandler(BaseCommandHandler):
    """Print a file's content to stdout."""

    async def execute(self, args: Namespace) -> bool:
        content = file_ops.read_file(args.path, encoding=self.encoding)
        if content is None:
            return False
        print(content, end="")
        return True


class AppendHandler(BaseCommandHandler):
    """Append content to an existing file."""

    async def execute(self, args: Namespace) -> bool:
        content = args.content + "\n" if args.newline else args.content
        return file_ops.append_to_file(
            args.path, content, encoding=self.encoding
        )


class DeleteHandler(BaseCommandHandler):
    """Delete a file or empty directory."""

    async def execute(self, args: Namespace) -> bool:
        return file_ops.delete_file(args.path)


class InfoHandler(BaseCommandHandler):
    """Show file information as text lines or JSON."""

    async def execute(self, args: Namespace) -> bool:
        info = file_ops.get_file_info(args.path)
        if info is None:
            logger.error("No such file or directory: %s", args.path)
            return False

        if args.json:
            self._print_json(info)
        else:
            for line in format_file_info(info):
                print(line)
        return True
