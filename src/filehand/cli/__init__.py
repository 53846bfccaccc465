"""Command-line interface for filehand."""

from filehand.cli.parser import CLIParser
from filehand.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
