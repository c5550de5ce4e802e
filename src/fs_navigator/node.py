"""Nodes, the entries that make up the file system tree.

A node is either a **file** or a **directory**:

- A directory owns its children outright through a ``dict`` that maps
  each child's name to the child node.  Dropping a directory from its
  parent releases the whole subtree with it.
- A file is always a leaf.  Its ``children`` view is empty and
  read-only, and trying to attach anything to it is a structural error.

Every node also remembers its parent, but only through a weak
reference.  The parent link exists for walking *up* the tree (building
``/a/b`` paths, resolving ``..``); ownership only ever flows down.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from fs_navigator.errors import AlreadyExistsError, InvalidNameError

SEPARATOR = "/"
"""Path separator; also the conventional name of the root directory."""

ROOT_NAME = SEPARATOR

_NO_CHILDREN: Mapping[str, Node] = MappingProxyType({})


class NodeKind(StrEnum):
    """The kind of entry a node represents."""

    FILE = "file"
    DIRECTORY = "directory"


def is_valid_name(name: str) -> bool:
    """Return True if *name* can be used as a single path segment."""
    return bool(name) and SEPARATOR not in name


def validate_name(name: str) -> None:
    """Check that *name* is a usable entry name.

    Raises:
        InvalidNameError: If *name* is empty or contains ``/``.

    """
    if not is_valid_name(name):
        raise InvalidNameError(name)


@dataclass(eq=False)
class Node:
    """One entry in the tree.

    Nodes compare by identity: two directories that happen to share a
    name and contents are still different places in the tree.
    """

    name: str
    kind: NodeKind
    _children: dict[str, Node] | None = field(default=None, init=False, repr=False)
    _parent_ref: weakref.ReferenceType[Node] | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the name and give directories an empty child table."""
        validate_name(self.name)
        if self.kind is NodeKind.DIRECTORY:
            self._children = {}

    @classmethod
    def make_root(cls) -> Node:
        """Create a parentless directory named ``/``.

        The root is the only node allowed to carry the separator as its
        name, so it is assembled here without going through
        ``__init__``'s name check.
        """
        root = object.__new__(cls)
        root.name = ROOT_NAME
        root.kind = NodeKind.DIRECTORY
        root._children = {}
        root._parent_ref = None
        return root

    @property
    def is_dir(self) -> bool:
        """Return True if this node is a directory."""
        return self.kind is NodeKind.DIRECTORY

    @property
    def parent(self) -> Node | None:
        """Return the containing directory, or None for the root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_root(self) -> bool:
        """Return True if this node has no parent."""
        return self._parent_ref is None

    @property
    def children(self) -> Mapping[str, Node]:
        """Return a read-only view of the children (empty for files)."""
        if self._children is None:
            return _NO_CHILDREN
        return MappingProxyType(self._children)

    def child(self, name: str) -> Node | None:
        """Return the child called *name*, or None if there is none."""
        if self._children is None:
            return None
        return self._children.get(name)

    def sorted_children(self) -> list[Node]:
        """Return the children in ascending name order."""
        if self._children is None:
            return []
        return [self._children[name] for name in sorted(self._children)]

    def add_child(self, node: Node) -> None:
        """Attach *node* as a child of this directory.

        This is the only place a parent link is ever set, and it is set
        in the same step that hands ownership of *node* to this
        directory.

        Args:
            node: A detached node (no parent yet).

        Raises:
            NotADirectoryError: If this node is a file.
            InvalidNameError: If *node* is a root (named ``/``).
            AlreadyExistsError: If the name is already taken here.
            ValueError: If *node* already belongs to a directory.

        """
        if self._children is None:
            msg = f"Not a directory: {self.name}"
            raise NotADirectoryError(msg)
        validate_name(node.name)
        if node.name in self._children:
            raise AlreadyExistsError(node.name)
        if node._parent_ref is not None:
            msg = f"Node already has a parent: {node.name}"
            raise ValueError(msg)
        node._parent_ref = weakref.ref(self)
        self._children[node.name] = node

    def ancestors(self) -> Iterator[Node]:
        """Yield this node, then each parent up to and including the root."""
        node: Node | None = self
        while node is not None:
            yield node
            node = node.parent
