"""Top-level package for filehand."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("filehand")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
