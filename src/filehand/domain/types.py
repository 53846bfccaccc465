"""Domain types for filehand.

Pure data containers shared by the operations, the demo driver, the
configuration layer and the CLI. No IO happens here.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TypedDict


class FileInfo(TypedDict):
    """Basic attributes of a filesystem entry, in display order."""

    path: str
    size: int
    last_modified: datetime
    creation_time: datetime
    is_directory: bool
    is_regular_file: bool


class DemoConfig(TypedDict):
    """Names used by the demo driver inside its working directory."""

    sample_file: str
    directory: str
    copy_name: str
    search_extension: str


class GlobalConfig(TypedDict):
    """Global configuration loaded from settings.conf."""

    config_version: str
    log_level: str
    console_log_level: str
    encoding: str
    demo: DemoConfig


@dataclass(frozen=True)
class DemoStep:
    """Outcome of one demo step.

    Attributes:
        name: Short step identifier (e.g. "create", "copy")
        success: Whether the underlying operation reported success
        mutating: Whether the step changes the filesystem

    """

    name: str
    success: bool
    mutating: bool = True


@dataclass
class DemoReport:
    """Ordered record of every step the demo driver ran."""

    steps: list[DemoStep] = field(default_factory=list)

    def record(
        self,
        name: str,
        success: bool,  # noqa: FBT001
        *,
        mutating: bool = True,
    ) -> bool:
        """Append a step and return its success flag."""
        self.steps.append(DemoStep(name, success, mutating))
        return success

    @property
    def success(self) -> bool:
        """True when every mutating step succeeded."""
        return all(step.success for step in self.steps if step.mutating)

    @property
    def failed_steps(self) -> list[str]:
        """Names of the steps that did not succeed."""
        return [step.name for step in self.steps if not step.success]
