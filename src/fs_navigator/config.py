"""Session configuration for the navigator.

Settings come from an optional JSON file; anything the file leaves out
falls back to the defaults below.  A typical file looks like::

    {
        "prompt_prefix": "fs",
        "seed_demo": true,
        "min_log_level": "info",
        "log_capacity": 500
    }

- **prompt_prefix** — text shown before the current path in the prompt.
- **seed_demo** — whether to start with the sample ``/home`` tree.
- **min_log_level** — lowest severity the ``log`` command displays.
- **log_capacity** — how many events are kept before the oldest are dropped.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fs_navigator.logging import DEFAULT_CAPACITY, LogLevel

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(RuntimeError):
    """Raise when a configuration file cannot be used.

    Examples: unreadable file, malformed JSON, unknown log level.
    """


@dataclass(frozen=True)
class NavigatorConfig:
    """Settings for one navigator session."""

    prompt_prefix: str = "fs"
    seed_demo: bool = True
    min_log_level: LogLevel = LogLevel.INFO
    log_capacity: int = DEFAULT_CAPACITY

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NavigatorConfig:
        """Build a config from parsed JSON, filling gaps with defaults.

        Raises:
            ConfigError: If a value has the wrong type, ``min_log_level``
                is not a known level name, or ``log_capacity`` is not a
                positive integer.

        """
        defaults = cls()

        seed_demo = data.get("seed_demo", defaults.seed_demo)
        if not isinstance(seed_demo, bool):
            msg = f"seed_demo must be true or false, got {seed_demo!r}"
            raise ConfigError(msg)

        level_name = str(data.get("min_log_level", defaults.min_log_level.name))
        try:
            level = LogLevel[level_name.upper()]
        except KeyError as e:
            msg = f"Unknown log level: {level_name}"
            raise ConfigError(msg) from e

        # bool is an int subclass, so reject it explicitly.
        capacity = data.get("log_capacity", defaults.log_capacity)
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            msg = f"log_capacity must be a positive integer, got {capacity!r}"
            raise ConfigError(msg)

        return cls(
            prompt_prefix=str(data.get("prompt_prefix", defaults.prompt_prefix)),
            seed_demo=seed_demo,
            min_log_level=level,
            log_capacity=capacity,
        )


def load_config(path: Path | None = None) -> NavigatorConfig:
    """Load settings from a JSON file, or return the defaults.

    Args:
        path: Path to a JSON config file.  If None, defaults are used.

    Raises:
        ConfigError: If the file cannot be read or parsed.

    """
    if path is None:
        return NavigatorConfig()

    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        msg = f"Cannot load config: {e}"
        raise ConfigError(msg) from e

    if not isinstance(data, dict):
        msg = f"Config must be a JSON object: {path}"
        raise ConfigError(msg)
    return NavigatorConfig.from_dict(data)  # pyright: ignore[reportUnknownArgumentType]
