"""CLI argument parser for filehand.

Defines one subcommand per file operation plus the demo driver.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from filehand.domain.types import GlobalConfig


class CLIParser:
    """Command-line argument parser for filehand."""

    def __init__(self, global_config: GlobalConfig) -> None:
        """Initialize the CLI parser with global configuration.

        Args:
            global_config: Loaded global configuration, used for defaults.

        """
        self.global_config = global_config

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser."""
        return argparse.ArgumentParser(
            prog="filehand",
            description="filehand - common file operations from the shell",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s create notes.txt --content "first line"
  %(prog)s append notes.txt "second line"
  %(prog)s read notes.txt
  %(prog)s info notes.txt --json
  %(prog)s mkdir archive/2024
  %(prog)s copy notes.txt archive/2024/notes.txt
  %(prog)s list archive/2024
  %(prog)s search . --ext .txt --contains note
  %(prog)s move notes.txt old-notes.txt
  %(prog)s delete old-notes.txt

  # Run every operation in sequence inside a scratch directory
  %(prog)s demo --workdir /tmp/filehand-demo
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        """Add the --version flag to the main parser."""
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show filehand version and exit",
        )

    @staticmethod
    def _add_verbose(subparser: argparse.ArgumentParser) -> None:
        subparser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging on the console",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        """Add all subcommands to the parser."""
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        self._add_create_command(subparsers)
        self._add_read_command(subparsers)
        self._add_append_command(subparsers)
        self._add_delete_command(subparsers)
        self._add_info_command(subparsers)
        self._add_mkdir_command(subparsers)
        self._add_list_command(subparsers)
        self._add_search_command(subparsers)
        self._add_copy_command(subparsers)
        self._add_move_command(subparsers)
        self._add_demo_command(subparsers)

    def _add_create_command(self, subparsers) -> None:
        create_parser = subparsers.add_parser(
            "create", help="Create a new file (fails if it exists)"
        )
        create_parser.add_argument("path", help="File to create")
        create_parser.add_argument(
            "--content",
            default=None,
            help="Initial content to write into the file",
        )
        self._add_verbose(create_parser)

    def _add_read_command(self, subparsers) -> None:
        read_parser = subparsers.add_parser(
            "read", help="Print the content of a file"
        )
        read_parser.add_argument("path", help="File to read")
        self._add_verbose(read_parser)

    def _add_append_command(self, subparsers) -> None:
        append_parser = subparsers.add_parser(
            "append", help="Append content to an existing file"
        )
        append_parser.add_argument("path", help="File to append to")
        append_parser.add_argument("content", help="Content to append")
        append_parser.add_argument(
            "--newline",
            action="store_true",
            help="Terminate the appended content with a newline",
        )
        self._add_verbose(append_parser)

    def _add_delete_command(self, subparsers) -> None:
        delete_parser = subparsers.add_parser(
            "delete", help="Delete a file or an empty directory"
        )
        delete_parser.add_argument("path", help="Path to delete")
        self._add_verbose(delete_parser)

    def _add_info_command(self, subparsers) -> None:
        info_parser = subparsers.add_parser(
            "info", help="Show size, timestamps and type of a path"
        )
        info_parser.add_argument("path", help="Path to inspect")
        info_parser.add_argument(
            "--json", action="store_true", help="Print as JSON"
        )
        self._add_verbose(info_parser)

    def _add_mkdir_command(self, subparsers) -> None:
        mkdir_parser = subparsers.add_parser(
            "mkdir", help="Create a directory including missing parents"
        )
        mkdir_parser.add_argument("path", help="Directory to create")
        self._add_verbose(mkdir_parser)

    def _add_list_command(self, subparsers) -> None:
        list_parser = subparsers.add_parser(
            "list", help="List the entries of a directory"
        )
        list_parser.add_argument(
            "path", nargs="?", default=".", help="Directory to list"
        )
        list_parser.add_argument(
            "--json", action="store_true", help="Print as JSON"
        )
        self._add_verbose(list_parser)

    def _add_search_command(self, subparsers) -> None:
        search_parser = subparsers.add_parser(
            "search",
            help="Recursively search for files",
            epilog="""
Examples:
  %(prog)s . --ext .txt          # every file whose path ends with .txt
  %(prog)s src --contains test   # file names containing 'test'
            """,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        search_parser.add_argument(
            "directory", nargs="?", default=".", help="Directory to search"
        )
        search_parser.add_argument(
            "--ext",
            dest="extension",
            default=None,
            help="Suffix the file path must end with (e.g. .txt)",
        )
        search_parser.add_argument(
            "--contains",
            default=None,
            help="Text the file name must contain",
        )
        search_parser.add_argument(
            "--json", action="store_true", help="Print as JSON"
        )
        self._add_verbose(search_parser)

    def _add_copy_command(self, subparsers) -> None:
        copy_parser = subparsers.add_parser(
            "copy", help="Copy a file, replacing the destination"
        )
        copy_parser.add_argument("src", help="Source file")
        copy_parser.add_argument("dest", help="Destination file")
        self._add_verbose(copy_parser)

    def _add_move_command(self, subparsers) -> None:
        move_parser = subparsers.add_parser(
            "move", help="Move or rename a file, replacing the destination"
        )
        move_parser.add_argument("src", help="Source file")
        move_parser.add_argument("dest", help="Destination file")
        self._add_verbose(move_parser)

    def _add_demo_command(self, subparsers) -> None:
        demo_parser = subparsers.add_parser(
            "demo", help="Run every file operation in sequence"
        )
        demo_parser.add_argument(
            "--workdir",
            default=".",
            help="Directory to run the demo in (default: current directory)",
        )
        demo_parser.add_argument(
            "--search-ext",
            default=self.global_config["demo"]["search_extension"],
            help="Suffix used for the search step",
        )
        self._add_verbose(demo_parser)
