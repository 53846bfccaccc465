"""Exception classes for filehand."""


class FileHandError(Exception):
    """Base exception for filehand."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the setting, path or command involved.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ConfigurationError(FileHandError):
    """Raised when a settings value is invalid."""

    error_prefix = "Invalid configuration"


class CommandError(FileHandError):
    """Raised when a CLI command cannot be dispatched."""

    error_prefix = "Command failed"
