"""Command handlers for the filehand CLI."""

from .base import BaseCommandHandler
from .demo import DemoHandler
from .directory import ListHandler, MkdirHandler, SearchHandler
from .files import (
    AppendHandler,
    CreateHandler,
    DeleteHandler,
    InfoHandler,
    ReadHandler,
)
from .transfer import CopyHandler, MoveHandler

__all__ = [
    "AppendHandler",
    "BaseCommandHandler",
    "CopyHandler",
    "CreateHandler",
    "DeleteHandler",
    "DemoHandler",
    "InfoHandler",
    "ListHandler",
    "MkdirHandler",
    "MoveHandler",
    "ReadHandler",
    "SearchHandler",
]
