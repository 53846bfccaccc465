"""Process-wide logger state shared by the logger modules."""

import queue
import threading
from dataclasses import dataclass, field
from logging.handlers import QueueListener


@dataclass
class _LoggerState:
    """Mutable state of the single root logger setup.

    saved_console_level holds the console level replaced by
    set_console_level_temporarily() until restore_console_level().
    """

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    config_applied: bool = False
    queue_listener: QueueListener | None = None
    log_queue: queue.Queue | None = None
    saved_console_level: int | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Return the logger state singleton."""
    return _state
