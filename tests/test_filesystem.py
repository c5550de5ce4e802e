"""Tests for the file system tree.

The file system owns a root directory and a current-directory cursor.
Entries are created in the current directory, paths are resolved
segment by segment, and ``find`` searches the whole tree from the root.
"""

import pytest

from fs_navigator.errors import (
    AlreadyExistsError,
    ErrorKind,
    InvalidNameError,
    InvalidPathError,
    NavigatorError,
)
from fs_navigator.filesystem import DirEntry, FileSystem, split_path
from fs_navigator.logging import Logger, LogLevel
from fs_navigator.node import NodeKind

ROOT_PATH = "/"


def _sample_fs() -> FileSystem:
    """Build ``/home/user`` and ``/home/readme.txt``, cursor at root."""
    fs = FileSystem()
    fs.create_directory("home")
    fs.change_directory("home")
    fs.create_directory("user")
    fs.create_file("readme.txt")
    fs.change_directory("/")
    return fs


class TestFileSystemCreation:
    """Verify the initial state of a fresh file system."""

    def test_starts_at_root(self) -> None:
        """A new file system's current directory is the root."""
        fs = FileSystem()
        assert fs.current_path() == ROOT_PATH
        assert fs.cwd is fs.root

    def test_root_is_empty(self) -> None:
        """A fresh root directory has no entries."""
        fs = FileSystem()
        assert fs.list_dir() == []

    def test_instances_are_independent(self) -> None:
        """Two file systems never share state."""
        first = FileSystem()
        second = FileSystem()
        first.create_directory("only-here")
        assert second.list_dir() == []


class TestSplitPath:
    """Verify path segmentation."""

    def test_absolute_path(self) -> None:
        """Leading separators produce no empty segment."""
        assert split_path("/home/user") == ["home", "user"]

    def test_repeated_and_trailing_separators(self) -> None:
        """Empty segments are discarded."""
        assert split_path("a//b/") == ["a", "b"]

    def test_root_has_no_segments(self) -> None:
        """The root path is made of nothing but separators."""
        assert split_path("/") == []


class TestCurrentPath:
    """Verify absolute path construction."""

    def test_nested_path_has_no_trailing_separator(self) -> None:
        """Non-root paths look like ``/a/b``."""
        fs = FileSystem()
        fs.create_directory("a")
        fs.change_directory("a")
        fs.create_directory("b")
        fs.change_directory("b")
        assert fs.current_path() == "/a/b"

    def test_path_of_file(self) -> None:
        """path_of works for files as well as directories."""
        fs = _sample_fs()
        readme = fs.resolve("/home").child("readme.txt")
        assert readme is not None
        assert fs.path_of(readme) == "/home/readme.txt"


class TestListDir:
    """Verify directory listings."""

    def test_entries_sorted_with_kinds(self) -> None:
        """Listings are sorted by name and carry each entry's kind."""
        fs = FileSystem()
        fs.create_file("zeta.txt")
        fs.create_directory("alpha")
        fs.create_file("Beta")
        assert fs.list_dir() == [
            DirEntry(name="Beta", kind=NodeKind.FILE),
            DirEntry(name="alpha", kind=NodeKind.DIRECTORY),
            DirEntry(name="zeta.txt", kind=NodeKind.FILE),
        ]

    def test_display_suffix(self) -> None:
        """Directories render with a trailing ``/``; files do not."""
        assert DirEntry(name="docs", kind=NodeKind.DIRECTORY).display() == "docs/"
        assert DirEntry(name="a.txt", kind=NodeKind.FILE).display() == "a.txt"

    def test_lists_current_directory_only(self) -> None:
        """Only direct children of the cursor are listed."""
        fs = _sample_fs()
        assert [e.name for e in fs.list_dir()] == ["home"]
        fs.change_directory("home")
        assert [e.name for e in fs.list_dir()] == ["readme.txt", "user"]


class TestCreate:
    """Verify creating files and directories."""

    def test_create_directory(self) -> None:
        """A created directory appears in the listing as a directory."""
        fs = FileSystem()
        fs.create_directory("docs")
        assert fs.list_dir() == [DirEntry(name="docs", kind=NodeKind.DIRECTORY)]

    def test_create_file(self) -> None:
        """A created file appears in the listing as a file."""
        fs = FileSystem()
        fs.create_file("notes.txt")
        assert fs.list_dir() == [DirEntry(name="notes.txt", kind=NodeKind.FILE)]

    def test_created_node_parent_is_cursor(self) -> None:
        """New entries hang off the current directory."""
        fs = _sample_fs()
        fs.change_directory("/home/user")
        fs.create_file("todo.txt")
        todo = fs.cwd.child("todo.txt")
        assert todo is not None
        assert todo.parent is fs.cwd

    def test_duplicate_directory_rejected(self) -> None:
        """A second directory with the same name is refused."""
        fs = FileSystem()
        fs.create_directory("x")
        with pytest.raises(AlreadyExistsError, match="x") as excinfo:
            fs.create_directory("x")
        assert excinfo.value.kind is ErrorKind.ALREADY_EXISTS
        assert [e.name for e in fs.list_dir()] == ["x"]

    def test_file_and_directory_share_namespace(self) -> None:
        """A file cannot take a name a directory already has."""
        fs = FileSystem()
        fs.create_directory("x")
        with pytest.raises(AlreadyExistsError):
            fs.create_file("x")
        assert fs.list_dir() == [DirEntry(name="x", kind=NodeKind.DIRECTORY)]

    def test_separator_in_name_rejected(self) -> None:
        """Names are single segments; no intermediate directories are made."""
        fs = FileSystem()
        with pytest.raises(InvalidNameError) as excinfo:
            fs.create_directory("a/b")
        assert excinfo.value.kind is ErrorKind.INVALID_NAME
        assert fs.list_dir() == []

    def test_empty_name_rejected(self) -> None:
        """An empty name is refused for files too."""
        fs = FileSystem()
        with pytest.raises(InvalidNameError):
            fs.create_file("")
        assert fs.list_dir() == []

    def test_errors_share_a_base_class(self) -> None:
        """Every core error can be caught as NavigatorError."""
        fs = FileSystem()
        with pytest.raises(NavigatorError):
            fs.change_directory("nowhere")


class TestChangeDirectory:
    """Verify path resolution and cursor movement."""

    def test_relative_path(self) -> None:
        """A relative path starts from the current directory."""
        fs = _sample_fs()
        fs.change_directory("home")
        fs.change_directory("user")
        assert fs.current_path() == "/home/user"

    def test_absolute_path(self) -> None:
        """An absolute path starts from the root regardless of the cursor."""
        fs = _sample_fs()
        fs.change_directory("home/user")
        fs.change_directory("/home")
        assert fs.current_path() == "/home"

    def test_slash_returns_to_root(self) -> None:
        """``/`` always leads to the root."""
        fs = _sample_fs()
        fs.change_directory("/home/user")
        fs.change_directory("/")
        assert fs.cwd is fs.root

    def test_dot_segments(self) -> None:
        """``.`` stays put and ``..`` climbs one level."""
        fs = _sample_fs()
        fs.change_directory("/home/./user/..")
        assert fs.current_path() == "/home"

    def test_parent_of_root_is_root(self) -> None:
        """Climbing above the root is a silent no-op."""
        fs = FileSystem()
        fs.change_directory("..")
        assert fs.current_path() == ROOT_PATH
        fs.change_directory("../../..")
        assert fs.current_path() == ROOT_PATH

    def test_clamped_parent_then_descend(self) -> None:
        """After clamping at the root, later segments still resolve."""
        fs = _sample_fs()
        fs.change_directory("../../home")
        assert fs.current_path() == "/home"

    def test_extra_separators_are_ignored(self) -> None:
        """Repeated and trailing separators do not matter."""
        fs = _sample_fs()
        fs.change_directory("//home///user/")
        assert fs.current_path() == "/home/user"

    def test_empty_path_stays_put(self) -> None:
        """A path with no segments resolves to the current directory."""
        fs = _sample_fs()
        fs.change_directory("home")
        fs.change_directory("")
        assert fs.current_path() == "/home"

    def test_missing_segment_fails(self) -> None:
        """A path through a missing directory is invalid."""
        fs = _sample_fs()
        with pytest.raises(InvalidPathError) as excinfo:
            fs.change_directory("/home/nobody")
        assert excinfo.value.kind is ErrorKind.INVALID_PATH
        assert excinfo.value.path == "/home/nobody"

    def test_file_segment_fails(self) -> None:
        """A file can never be entered."""
        fs = FileSystem()
        fs.create_file("a.txt")
        with pytest.raises(InvalidPathError):
            fs.change_directory("a.txt")
        assert fs.current_path() == ROOT_PATH

    def test_failure_is_all_or_nothing(self) -> None:
        """A failing path leaves the cursor where it was."""
        fs = _sample_fs()
        fs.change_directory("home")
        with pytest.raises(InvalidPathError):
            fs.change_directory("user/missing")
        assert fs.current_path() == "/home"

    def test_path_through_file_fails(self) -> None:
        """Segments after a file are never reached."""
        fs = _sample_fs()
        with pytest.raises(InvalidPathError):
            fs.change_directory("/home/readme.txt/..")
        assert fs.current_path() == ROOT_PATH

    def test_resolve_does_not_move(self) -> None:
        """resolve() finds the target without moving the cursor."""
        fs = _sample_fs()
        target = fs.resolve("/home/user")
        assert fs.path_of(target) == "/home/user"
        assert fs.current_path() == ROOT_PATH


class TestFind:
    """Verify whole-tree search."""

    def test_find_directory(self) -> None:
        """A unique name yields exactly its path."""
        fs = _sample_fs()
        assert fs.find("user") == ["/home/user"]

    def test_find_missing(self) -> None:
        """No match is an empty list, not an error."""
        fs = _sample_fs()
        assert fs.find("missing") == []

    def test_find_starts_at_root(self) -> None:
        """The search ignores the current directory."""
        fs = _sample_fs()
        fs.change_directory("/home/user")
        assert fs.find("readme.txt") == ["/home/readme.txt"]

    def test_find_is_exact_and_case_sensitive(self) -> None:
        """Substrings and other cases do not match."""
        fs = _sample_fs()
        assert fs.find("use") == []
        assert fs.find("User") == []

    def test_find_preorder(self) -> None:
        """Matches come back in pre-order with sorted children."""
        fs = FileSystem()
        fs.create_directory("b")
        fs.create_directory("a")
        fs.create_file("x")
        fs.change_directory("a")
        fs.create_directory("x")
        fs.change_directory("x")
        fs.create_file("x")
        fs.change_directory("/b")
        fs.create_file("x")
        assert fs.find("x") == ["/a/x", "/a/x/x", "/b/x", "/x"]

    def test_find_root(self) -> None:
        """The root takes part in the search under the name ``/``."""
        fs = _sample_fs()
        assert fs.find("/") == [ROOT_PATH]


class TestEventLogging:
    """Verify that an attached logger records tree events."""

    def test_create_is_logged(self) -> None:
        """Successful creates produce INFO entries."""
        logger = Logger()
        fs = FileSystem(logger=logger)
        fs.create_directory("home")
        assert any(
            e.level is LogLevel.INFO and "/home" in e.message for e in logger.entries
        )

    def test_rejections_are_warnings(self) -> None:
        """Rejected operations produce WARNING entries."""
        logger = Logger()
        fs = FileSystem(logger=logger)
        fs.create_directory("x")
        with pytest.raises(AlreadyExistsError):
            fs.create_directory("x")
        with pytest.raises(InvalidPathError):
            fs.change_directory("nope")
        warnings = logger.at_least(LogLevel.WARNING)
        expected_warnings = 2
        assert len(warnings) == expected_warnings

    def test_entries_record_cwd(self) -> None:
        """Each entry remembers the current directory at the time."""
        logger = Logger()
        fs = FileSystem(logger=logger)
        fs.create_directory("home")
        fs.change_directory("home")
        fs.create_file("a.txt")
        assert logger.entries[-1].cwd == "/home"

    def test_no_logger_is_fine(self) -> None:
        """Without a logger, operations still work."""
        fs = FileSystem()
        fs.create_directory("home")
        assert fs.logger is None


class TestScenarios:
    """End-to-end sequences of core operations."""

    def test_create_and_enter_home(self) -> None:
        """mkdir home; cd home; pwd → /home."""
        fs = FileSystem()
        fs.create_directory("home")
        fs.change_directory("home")
        assert fs.current_path() == "/home"

    def test_round_trip_through_root(self) -> None:
        """/a/b reached via the root is the same node as reached directly."""
        fs = FileSystem()
        fs.create_directory("a")
        fs.change_directory("a")
        fs.create_directory("b")
        fs.change_directory("/")
        fs.change_directory("/a/b")
        direct = fs.cwd
        fs.change_directory("/")
        fs.change_directory("/a/b")
        assert fs.cwd is direct

    def test_cd_current_path_is_idempotent(self) -> None:
        """Changing to the current path never moves the cursor."""
        fs = _sample_fs()
        fs.change_directory("/home/user")
        before = fs.cwd
        fs.change_directory(fs.current_path())
        assert fs.cwd is before
