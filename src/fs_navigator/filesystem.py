"""The file system tree: a root directory plus a current-directory cursor.

``FileSystem`` owns the root node and remembers which directory the
user is "in".  Everything a caller can do goes through six operations:

- ``current_path()`` — where am I?  (``pwd``)
- ``list_dir()`` — what is here?  (``ls``)
- ``create_directory(name)`` / ``create_file(name)`` — add an entry to
  the current directory.  (``mkdir`` / ``touch``)
- ``change_directory(path)`` — move the cursor.  (``cd``)
- ``find(name)`` — search the whole tree by exact name.  (``find``)

Path resolution:
    A path is split on ``/`` and walked one segment at a time.  A
    leading ``/`` starts the walk at the root, anything else starts at
    the current directory.  Empty segments (from ``//`` or a trailing
    ``/``) are skipped, ``.`` stays put, and ``..`` climbs to the
    parent, stopping quietly at the root.  Every other segment must
    name a child *directory*.  Resolution is all-or-nothing: if any
    segment fails, the cursor does not move at all.

Failed operations raise a ``NavigatorError`` subclass and leave both
the tree and the cursor exactly as they were.
"""

from __future__ import annotations

from dataclasses import dataclass

from fs_navigator.errors import AlreadyExistsError, InvalidNameError, InvalidPathError
from fs_navigator.logging import Logger, LogLevel
from fs_navigator.node import SEPARATOR, Node, NodeKind, is_valid_name

CURRENT_DIR = "."
PARENT_DIR = ".."

_LOG_SOURCE = "fs"


@dataclass(frozen=True)
class DirEntry:
    """One line of a directory listing."""

    name: str
    kind: NodeKind

    @property
    def is_dir(self) -> bool:
        """Return True if the entry is a directory."""
        return self.kind is NodeKind.DIRECTORY

    def display(self) -> str:
        """Return the name as ``ls`` shows it (directories end in ``/``)."""
        return self.name + SEPARATOR if self.is_dir else self.name


def split_path(path: str) -> list[str]:
    """Split *path* into its non-empty segments.

    Examples::

        "/home/user"  → ["home", "user"]
        "a//b/"       → ["a", "b"]
        "/"           → []

    """
    return [segment for segment in path.split(SEPARATOR) if segment]


class FileSystem:
    """An in-memory directory tree with a current directory.

    Each instance is completely independent; there is no shared or
    module-level tree.
    """

    def __init__(self, *, logger: Logger | None = None) -> None:
        """Create a file system holding only an empty root directory.

        Args:
            logger: Optional event log.  When given, every create,
                directory change, rejected operation, and search is
                recorded in it.

        """
        self._root = Node.make_root()
        self._cwd = self._root
        self._logger = logger

    @property
    def root(self) -> Node:
        """Return the root directory."""
        return self._root

    @property
    def cwd(self) -> Node:
        """Return the current directory node."""
        return self._cwd

    @property
    def logger(self) -> Logger | None:
        """Return the attached event log, if any."""
        return self._logger

    # -- Paths ----------------------------------------------------------------

    def path_of(self, node: Node) -> str:
        """Return the absolute path of *node*.

        Walks parent links up to the root and joins the names on the
        way back down.  The root itself is ``/``; nothing else ever
        ends with a separator.
        """
        names = [n.name for n in node.ancestors() if n.parent is not None]
        if not names:
            return SEPARATOR
        return SEPARATOR + SEPARATOR.join(reversed(names))

    def current_path(self) -> str:
        """Return the absolute path of the current directory."""
        return self.path_of(self._cwd)

    def resolve(self, path: str) -> Node:
        """Return the directory *path* leads to, without moving the cursor.

        Args:
            path: An absolute or relative path.

        Raises:
            InvalidPathError: If a segment is missing or names a file.

        """
        if path == SEPARATOR:
            return self._root

        node = self._root if path.startswith(SEPARATOR) else self._cwd
        for segment in split_path(path):
            if segment == CURRENT_DIR:
                continue
            if segment == PARENT_DIR:
                parent = node.parent
                if parent is not None:
                    node = parent
                continue
            child = node.child(segment)
            if child is None or child.kind is not NodeKind.DIRECTORY:
                raise InvalidPathError(path)
            node = child
        return node

    # -- Queries --------------------------------------------------------------

    def list_dir(self) -> list[DirEntry]:
        """Return the current directory's entries in ascending name order."""
        return [DirEntry(name=child.name, kind=child.kind) for child in self._cwd.sorted_children()]

    def find(self, name: str) -> list[str]:
        """Search the whole tree for entries called exactly *name*.

        The walk always starts at the root, whatever the current
        directory.  Nodes are visited depth-first in pre-order with
        children in ascending name order, so shallower and
        alphabetically earlier matches come first.  The root takes part
        under its own name, ``/``.

        Args:
            name: The exact, case-sensitive name to look for.

        Returns:
            Absolute paths of every match, in visiting order.  An empty
            list means nothing matched.

        """
        matches: list[str] = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.name == name:
                matches.append(self.path_of(node))
            if node.kind is NodeKind.DIRECTORY:
                stack.extend(reversed(node.sorted_children()))

        self._log(LogLevel.DEBUG, f"find {name!r}: {len(matches)} match(es)")
        return matches

    # -- Mutations ------------------------------------------------------------

    def create_directory(self, name: str) -> None:
        """Create an empty directory in the current directory.

        Args:
            name: A single path segment (no ``/``).

        Raises:
            InvalidNameError: If *name* is empty or contains ``/``.
            AlreadyExistsError: If the current directory already has an
                entry called *name*.

        """
        self._create(name, NodeKind.DIRECTORY)

    def create_file(self, name: str) -> None:
        """Create an empty file in the current directory.

        Args:
            name: A single path segment (no ``/``).

        Raises:
            InvalidNameError: If *name* is empty or contains ``/``.
            AlreadyExistsError: If the current directory already has an
                entry called *name*.

        """
        self._create(name, NodeKind.FILE)

    def _create(self, name: str, kind: NodeKind) -> None:
        """Validate *name* and link a new node into the current directory."""
        if not is_valid_name(name):
            self._log(LogLevel.WARNING, f"rejected {kind} name {name!r}")
            raise InvalidNameError(name)
        if self._cwd.child(name) is not None:
            self._log(LogLevel.WARNING, f"rejected {kind} {name!r}: already exists")
            raise AlreadyExistsError(name)

        node = Node(name=name, kind=kind)
        self._cwd.add_child(node)
        self._log(LogLevel.INFO, f"created {kind} {self.path_of(node)}")

    def change_directory(self, path: str) -> None:
        """Move the current directory to *path*.

        ``/`` always succeeds and returns to the root.  Going above the
        root with ``..`` is not an error; the cursor simply stays there.

        Args:
            path: An absolute or relative path to a directory.

        Raises:
            InvalidPathError: If any segment is missing or names a file.
                The current directory is left unchanged.

        """
        try:
            target = self.resolve(path)
        except InvalidPathError:
            self._log(LogLevel.WARNING, f"invalid path {path!r}")
            raise
        self._cwd = target
        self._log(LogLevel.INFO, f"changed directory to {self.current_path()}")

    def _log(self, level: LogLevel, message: str) -> None:
        """Record an event if a logger is attached."""
        if self._logger is not None:
            self._logger.log(level, message, source=_LOG_SOURCE, cwd=self.current_path())
