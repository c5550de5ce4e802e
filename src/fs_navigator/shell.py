"""The shell: turns command lines into file system operations.

The shell reads one command line, splits it on whitespace, and hands
the first word to a handler.  Each handler calls exactly one
``FileSystem`` operation with at most one argument (any further words
are ignored) and renders the result as text.

Design choices:
    - **Returns strings, not prints.**  This keeps the shell fully
      testable and separates concerns (the caller decides how to
      display output).
    - **Command dispatch via a dict.**  Adding a new command means
      writing a method and adding one dict entry.
    - **Errors become text.**  The core raises ``NavigatorError``
      subclasses; the shell catches them and prints a friendly
      ``Error: ...`` line, so a typo never ends the session.
"""

from collections.abc import Callable

from fs_navigator.config import NavigatorConfig
from fs_navigator.errors import AlreadyExistsError, InvalidNameError, InvalidPathError
from fs_navigator.filesystem import FileSystem
from fs_navigator.node import NodeKind

# Type alias for a command handler: takes the optional argument, returns output.
type _Handler = Callable[[str | None], str]

HELP_TEXT = """File System Navigator Commands:
  ls          - List contents of the current directory
  mkdir <name>- Create a new directory
  touch <name>- Create a new empty file
  cd <path>   - Change directory (e.g., 'cd /', 'cd ..', 'cd my_folder')
  pwd         - Print the current working directory path
  find <name> - Search for a file or directory from the root
  log [clear] - Show recent file system events (or clear them)
  help        - Show this help message
  exit        - Exit the navigator
"""


class Shell:
    """Command interpreter bound to one file system."""

    EXIT_SENTINEL = "__EXIT__"

    def __init__(self, *, filesystem: FileSystem, config: NavigatorConfig | None = None) -> None:
        """Create a shell that operates on *filesystem*.

        Args:
            filesystem: The tree every command acts on.
            config: Session settings; defaults are used if omitted.

        """
        self._fs = filesystem
        self._config = config or NavigatorConfig()
        self._exited = False

        # Command dispatch table: maps command names to handler methods.
        self._commands: dict[str, _Handler] = {
            "ls": self._cmd_ls,
            "pwd": self._cmd_pwd,
            "mkdir": self._cmd_mkdir,
            "touch": self._cmd_touch,
            "cd": self._cmd_cd,
            "find": self._cmd_find,
            "log": self._cmd_log,
            "help": self._cmd_help,
            "exit": self._cmd_exit,
        }

    @property
    def filesystem(self) -> FileSystem:
        """Return the file system this shell drives."""
        return self._fs

    @property
    def exited(self) -> bool:
        """Return True once ``exit`` has been run."""
        return self._exited

    @property
    def commands(self) -> list[str]:
        """Return the names of all commands, sorted."""
        return sorted(self._commands)

    def execute(self, command: str) -> str:
        """Parse and execute one command line.

        Args:
            command: The raw line (e.g. ``"cd /home/user"``).

        Returns:
            The command output, an error message, an empty string for
            silent success, or ``EXIT_SENTINEL`` for ``exit``.

        """
        words = command.split()
        if not words:
            return ""

        name = words[0]
        argument = words[1] if len(words) > 1 else None
        handler = self._commands.get(name)
        if handler is None:
            return f"Unknown command: '{name}'. Type 'help' for a list of commands."
        return handler(argument)

    # -- Navigation -----------------------------------------------------------

    def _cmd_ls(self, _argument: str | None) -> str:
        """List the current directory, one entry per line."""
        return "\n".join(entry.display() for entry in self._fs.list_dir())

    def _cmd_pwd(self, _argument: str | None) -> str:
        """Print the current directory path."""
        return self._fs.current_path()

    def _cmd_cd(self, argument: str | None) -> str:
        """Change the current directory."""
        if argument is None:
            return "Usage: cd <path>"
        try:
            self._fs.change_directory(argument)
        except InvalidPathError:
            return f"Error: Invalid path '{argument}'."
        return ""

    def _cmd_find(self, argument: str | None) -> str:
        """Search the tree from the root."""
        if argument is None:
            return "Usage: find <name>"
        matches = self._fs.find(argument)
        if not matches:
            return f"No file or directory named '{argument}' found."
        return "\n".join(matches)

    # -- Creation -------------------------------------------------------------

    def _cmd_mkdir(self, argument: str | None) -> str:
        """Create a directory."""
        if argument is None:
            return "Usage: mkdir <name>"
        return self._create(argument, NodeKind.DIRECTORY)

    def _cmd_touch(self, argument: str | None) -> str:
        """Create an empty file."""
        if argument is None:
            return "Usage: touch <name>"
        return self._create(argument, NodeKind.FILE)

    def _create(self, name: str, kind: NodeKind) -> str:
        """Create *name* in the current directory and render any error."""
        try:
            if kind is NodeKind.DIRECTORY:
                self._fs.create_directory(name)
            else:
                self._fs.create_file(name)
        except InvalidNameError:
            label = "Directory" if kind is NodeKind.DIRECTORY else "File"
            return f"Error: {label} name cannot contain '/'."
        except AlreadyExistsError:
            return f"Error: '{name}' already exists."
        return ""

    # -- Session --------------------------------------------------------------

    def _cmd_log(self, argument: str | None) -> str:
        """Show recorded file system events, or forget them with ``log clear``."""
        if argument not in (None, "clear"):
            return "Usage: log [clear]"
        logger = self._fs.logger
        if logger is None:
            return "No log entries."
        if argument == "clear":
            logger.clear()
            return "Log cleared."
        entries = logger.at_least(self._config.min_log_level)
        return "\n".join(str(e) for e in entries) if entries else "No log entries."

    def _cmd_help(self, _argument: str | None) -> str:
        """Show the command summary."""
        return HELP_TEXT

    def _cmd_exit(self, _argument: str | None) -> str:
        """Signal the caller to end the session."""
        self._exited = True
        return self.EXIT_SENTINEL
