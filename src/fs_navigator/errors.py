"""Error taxonomy for file system operations.

Every failure the core can report falls into one of three kinds:

- **INVALID_NAME** — a name is empty or contains the separator.
- **ALREADY_EXISTS** — a create would collide with an existing entry.
- **INVALID_PATH** — a path does not lead to a directory.

Each kind has its own exception class.  They all derive from
``NavigatorError`` so a caller can catch the whole family at once, and
each also derives from the closest built-in exception so generic code
(``except FileExistsError``) still does the right thing.

A failed operation never changes the tree or the current directory.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """The category of a failed file system operation."""

    INVALID_NAME = "invalid_name"
    ALREADY_EXISTS = "already_exists"
    INVALID_PATH = "invalid_path"


class NavigatorError(Exception):
    """Base class for every error raised by the file system core."""

    kind: ErrorKind


class InvalidNameError(NavigatorError, ValueError):
    """Raise when a node name is empty or contains ``/``."""

    kind = ErrorKind.INVALID_NAME

    def __init__(self, name: str) -> None:
        """Record the rejected name.

        Args:
            name: The name that failed validation.

        """
        self.name = name
        super().__init__(f"Invalid name: {name!r}")


class AlreadyExistsError(NavigatorError, FileExistsError):
    """Raise when a directory already holds an entry with the given name."""

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, name: str) -> None:
        """Record the colliding name.

        Args:
            name: The name that is already taken.

        """
        self.name = name
        super().__init__(f"Already exists: {name}")


class InvalidPathError(NavigatorError, LookupError):
    """Raise when a path does not resolve to a directory."""

    kind = ErrorKind.INVALID_PATH

    def __init__(self, path: str) -> None:
        """Record the unresolvable path.

        Args:
            path: The path exactly as the caller supplied it.

        """
        self.path = path
        super().__init__(f"Invalid path: {path!r}")
