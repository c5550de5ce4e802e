"""fs-navigator: an in-memory file system you can walk around in.

The package models a directory tree entirely in memory:

- **Node** (``fs_navigator.node``) — one file or directory.
- **FileSystem** (``fs_navigator.filesystem``) — owns the root, tracks
  the current directory, and resolves paths.
- **Shell** / **REPL** — a tiny command language (``ls``, ``cd``,
  ``mkdir``, ``touch``, ``pwd``, ``find``) layered on top.

Nothing is ever written to disk; every session starts fresh.
"""

from fs_navigator.errors import (
    AlreadyExistsError,
    ErrorKind,
    InvalidNameError,
    InvalidPathError,
    NavigatorError,
)
from fs_navigator.filesystem import DirEntry, FileSystem
from fs_navigator.node import Node, NodeKind

__all__ = [
    "AlreadyExistsError",
    "DirEntry",
    "ErrorKind",
    "FileSystem",
    "InvalidNameError",
    "InvalidPathError",
    "NavigatorError",
    "Node",
    "NodeKind",
]

__version__ = "0.1.0"
