"""Core filesystem operations and the demo driver."""

from filehand.core.demo import run_demo
from filehand.core.file_ops import (
    append_to_file,
    copy_file,
    create_directory,
    create_file,
    delete_file,
    get_file_info,
    list_directory,
    move_file,
    read_file,
    remove_tree,
    search_files,
)

__all__ = [
    "append_to_file",
    "copy_file",
    "create_directory",
    "create_file",
    "delete_file",
    "get_file_info",
    "list_directory",
    "move_file",
    "read_file",
    "remove_tree",
    "run_demo",
    "search_files",
]
