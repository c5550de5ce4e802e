"""Interactive REPL (Read-Eval-Print Loop) for the navigator.

The REPL is the terminal interface.  It builds a file system, creates
a shell, and enters the classic loop:

    1. **Read** — display a prompt and read user input.
    2. **Eval** — pass the command to ``shell.execute()``.
    3. **Print** — display the result.
    4. **Loop** — repeat until the shell returns the exit sentinel.

This module keeps the I/O loop separate from the shell logic.  The
shell is fully testable (returns strings, no I/O); the REPL is the
thin I/O wrapper that connects it to ``stdin``/``stdout``.

The helper functions (``build_filesystem``, ``build_prompt``,
``format_banner``) are pure and testable.  The ``run()`` function is
the I/O entrypoint, and ``main()`` wraps it for the ``fs-navigator``
command.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from fs_navigator.config import NavigatorConfig, load_config
from fs_navigator.demo import seed_demo
from fs_navigator.filesystem import FileSystem
from fs_navigator.logging import Logger
from fs_navigator.shell import HELP_TEXT, Shell

WELCOME = "Welcome to the File System Navigator!"
GOODBYE = "Exiting File System Navigator."


def build_filesystem(config: NavigatorConfig) -> FileSystem:
    """Create a logged file system, seeded with the demo tree if configured."""
    fs = FileSystem(logger=Logger(capacity=config.log_capacity))
    if config.seed_demo:
        seed_demo(fs)
    return fs


def format_banner() -> str:
    """Return the welcome text followed by the command summary."""
    return f"{WELCOME}\n{HELP_TEXT}"


def build_prompt(fs: FileSystem, config: NavigatorConfig) -> str:
    """Build the prompt string showing the current directory.

    Returns:
        A prompt like ``fs/> `` or ``fs/home/user> ``.

    """
    return f"{config.prompt_prefix}{fs.current_path()}> "


def run(config_path: Path | None = None) -> None:
    """Run the interactive navigator.

    This is the main entrypoint.  It handles:
    - Loading the configuration and seeding the demo tree.
    - The read-eval-print loop.
    - Graceful handling of Ctrl+C and Ctrl+D.
    """
    config = load_config(config_path)
    fs = build_filesystem(config)
    shell = Shell(filesystem=fs, config=config)

    print(format_banner())  # noqa: T201

    try:
        while True:
            try:
                command = input(build_prompt(fs, config))
            except EOFError:
                # Ctrl+D — graceful exit
                print()  # noqa: T201
                break

            result = shell.execute(command)
            if result == Shell.EXIT_SENTINEL:
                break
            if result:
                print(result)  # noqa: T201

    except KeyboardInterrupt:
        # Ctrl+C — graceful exit
        print("\nInterrupted.")  # noqa: T201

    finally:
        print(GOODBYE)  # noqa: T201


def main(argv: list[str] | None = None) -> None:
    """Parse command-line options and start the navigator.

    Usage::

        fs-navigator [--config PATH]
    """
    parser = argparse.ArgumentParser(
        prog="fs-navigator",
        description="Explore an in-memory file system from the terminal.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="PATH",
        help="JSON settings file (prompt prefix, demo tree, log level and capacity).",
    )
    args = parser.parse_args(argv)
    run(args.config)
