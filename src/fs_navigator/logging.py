"""Event log for file system activity.

The file system records what happened to it (directories created,
moves between directories, rejected commands) in a bounded, in-memory
ring buffer.  The shell's ``log`` command reads it back and
``log clear`` empties it.

Each event is stamped with the directory the user was standing in, so
a relative ``mkdir docs`` can later be told apart from the same command
run somewhere else.  Once the buffer is full the oldest events fall off
the front; a long-running session (the web UI) never grows without
bound.
"""

from collections import deque
from dataclasses import dataclass
from enum import IntEnum

DEFAULT_CAPACITY = 500
"""How many events a logger keeps before discarding the oldest."""


class LogLevel(IntEnum):
    """Severity of an event, ordered so ``>=`` means "at least as serious"."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """One recorded event.

    Attributes:
        level: How serious the event was.
        message: What happened (e.g. ``created directory /home``).
        source: Which component reported it (``fs`` for the tree).
        cwd: The current directory when it happened.

    """

    level: LogLevel
    message: str
    source: str
    cwd: str = "/"

    def __str__(self) -> str:
        """Format as ``[LEVEL] source (cwd): message``."""
        return f"[{self.level.name}] {self.source} ({self.cwd}): {self.message}"


class Logger:
    """Bounded event buffer, oldest entries dropped first."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """Create an empty logger.

        Args:
            capacity: Maximum number of entries kept.

        Raises:
            ValueError: If *capacity* is not positive.

        """
        if capacity <= 0:
            msg = f"Log capacity must be positive, got {capacity}"
            raise ValueError(msg)
        self._entries: deque[LogEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Return the maximum number of entries kept."""
        return self._entries.maxlen or 0

    @property
    def entries(self) -> list[LogEntry]:
        """Return the retained entries, oldest first."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str, cwd: str = "/") -> None:
        """Record an event, evicting the oldest one if the buffer is full."""
        self._entries.append(LogEntry(level=level, message=message, source=source, cwd=cwd))

    def at_least(self, min_level: LogLevel) -> list[LogEntry]:
        """Return the retained entries at *min_level* or above, oldest first."""
        return [e for e in self._entries if e.level >= min_level]

    def clear(self) -> None:
        """Forget every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of retained entries."""
        return len(self._entries)
