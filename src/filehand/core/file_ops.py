"""Flat filesystem operations.

Each function wraps one filesystem primitive: it logs a status line,
catches OSError and reports the outcome through its return value instead
of raising. Mutating operations return a bool; queries return their value
or None (an empty list for search_files).
"""

import errno
import os
import shutil
from datetime import datetime
from pathlib import Path

from filehand.constants import DEFAULT_ENCODING
from filehand.domain.types import FileInfo
from filehand.logger import get_logger

logger = get_logger(__name__)

StrPath = str | os.PathLike[str]


def create_file(
    file_path: StrPath,
    content: str | None = None,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> bool:
    """Create a new file, optionally writing initial content.

    The file is created exclusively: an existing path is reported and left
    untouched.

    Args:
        file_path: Path of the file to create
        content: Optional content to write (skipped when None or empty)
        encoding: Text encoding for content

    Returns:
        True if the file was created, False otherwise

    """
    path = Path(file_path)
    try:
        data = content.encode(encoding) if content else b""
        with path.open("xb") as f:
            f.write(data)
    except FileExistsError:
        logger.info("File already exists: %s", file_path)
        return False
    except (OSError, UnicodeError) as e:
        logger.error("Error creating file: %s", e)
        return False

    logger.info("File created successfully: %s", file_path)
    return True


def read_file(
    file_path: StrPath, *, encoding: str = DEFAULT_ENCODING
) -> str | None:
    """Read the whole content of a file.

    Line endings are returned as stored on disk.

    Returns:
        File content, or None if the file could not be read

    """
    try:
        return Path(file_path).read_bytes().decode(encoding)
    except (OSError, UnicodeError) as e:
        logger.error("Error reading file: %s", e)
        return None


def append_to_file(
    file_path: StrPath, content: str, *, encoding: str = DEFAULT_ENCODING
) -> bool:
    """Append content to an existing file.

    The file must already exist; it is never created here.

    Returns:
        True if the content was appended, False otherwise

    """
    try:
        data = content.encode(encoding)
        # no O_CREAT: a missing file is an error
        fd = os.open(file_path, os.O_WRONLY | os.O_APPEND)
        with open(fd, "ab") as f:
            f.write(data)
    except (OSError, UnicodeError) as e:
        logger.error("Error appending to file: %s", e)
        return False

    logger.info("Content appended to: %s", file_path)
    return True


def delete_file(file_path: StrPath) -> bool:
    """Delete a file, symlink or empty directory if it exists.

    Returns:
        True if something was deleted, False if the path did not exist or
        could not be deleted (e.g. a non-empty directory)

    """
    path = Path(file_path)
    try:
        if path.is_dir() and not path.is_symlink():
            path.rmdir()
        else:
            path.unlink()
    except FileNotFoundError:
        logger.info("File not found: %s", file_path)
        return False
    except OSError as e:
        logger.error("Error deleting file: %s", e)
        return False

    logger.info("File deleted: %s", file_path)
    return True


def _creation_time(stat_result: os.stat_result) -> float:
    # st_birthtime is only available on some platforms
    birthtime = getattr(stat_result, "st_birthtime", None)
    if birthtime is not None:
        return birthtime
    return stat_result.st_ctime


def get_file_info(file_path: StrPath) -> FileInfo | None:
    """Collect basic attributes of a file or directory.

    A missing path returns None without logging.

    Returns:
        FileInfo with absolute path, size, timestamps and type flags, or
        None if the path does not exist or cannot be inspected

    """
    path = Path(file_path)
    if not path.exists():
        return None

    try:
        stat_result = path.stat()
    except OSError as e:
        logger.error("Error getting file info: %s", e)
        return None

    return FileInfo(
        path=str(path.absolute()),
        size=stat_result.st_size,
        last_modified=datetime.fromtimestamp(stat_result.st_mtime),
        creation_time=datetime.fromtimestamp(_creation_time(stat_result)),
        is_directory=path.is_dir(),
        is_regular_file=path.is_file(),
    )


def create_directory(dir_path: StrPath) -> bool:
    """Create a directory and any missing parents.

    An already existing directory counts as success.

    Returns:
        True if the directory exists afterwards, False otherwise

    """
    try:
        Path(dir_path).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Error creating directory: %s", e)
        return False

    logger.info("Directory created: %s", dir_path)
    return True


def list_directory(dir_path: StrPath) -> list[str] | None:
    """List the entry names of a directory (non-recursive).

    Returns:
        Sorted entry names, or None if the directory cannot be listed

    """
    try:
        return sorted(os.listdir(dir_path))
    except OSError as e:
        logger.error("Error listing directory: %s", e)
        return None


def search_files(
    directory: StrPath,
    extension: str | None = None,
    contains: str | None = None,
) -> list[str]:
    """Recursively search for regular files matching the given filters.

    Args:
        directory: Directory to search in
        extension: Suffix the full path must end with (None matches all).
            Matched literally, so ".txt" and "txt" differ.
        contains: Substring the file name must contain (None matches all)

    Returns:
        Matching paths joined onto ``directory``; empty on error

    """
    root = os.fspath(directory)
    if not os.path.isdir(root):
        logger.error("Error searching files: not a directory: %s", root)
        return []

    errors: list[OSError] = []
    matches: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=errors.append):
        dirnames.sort()
        for name in sorted(filenames):
            candidate = os.path.join(dirpath, name)
            if not os.path.isfile(candidate):
                continue
            if extension is not None and not candidate.endswith(extension):
                continue
            if contains is not None and contains not in name:
                continue
            matches.append(candidate)

    if errors:
        logger.error("Error searching files: %s", errors[0])
        return []

    logger.debug("Search in %s matched %d file(s)", root, len(matches))
    return matches


def copy_file(src: StrPath, dest: StrPath) -> bool:
    """Copy a file's content, replacing an existing destination file.

    Returns:
        True if the copy succeeded, False otherwise

    """
    try:
        shutil.copyfile(src, dest)
    except OSError as e:
        logger.error("Error copying file: %s", e)
        return False

    logger.info("File copied from %s to %s", src, dest)
    return True


def move_file(src: StrPath, dest: StrPath) -> bool:
    """Move or rename a file, replacing an existing destination file.

    Falls back to copy-and-delete when source and destination live on
    different filesystems.

    Returns:
        True if the move succeeded, False otherwise

    """
    source = Path(src)
    destination = Path(dest)
    try:
        try:
            source.replace(destination)
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise
            logger.debug(
                "Cross-device move, copying instead: %s -> %s", src, dest
            )
            shutil.copy2(source, destination)
            source.unlink()
    except OSError as e:
        logger.error("Error moving file: %s", e)
        return False

    logger.info("File moved from %s to %s", src, dest)
    return True


def remove_tree(dir_path: StrPath) -> bool:
    """Delete a directory together with everything below it.

    Returns:
        True if the tree was removed, False if it did not exist or could
        not be removed completely

    """
    path = Path(dir_path)
    if not path.exists() and not path.is_symlink():
        logger.info("Directory not found: %s", dir_path)
        return False

    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as e:
        logger.error("Error removing directory: %s", e)
        return False

    logger.info("Directory removed: %s", dir_path)
    return True
