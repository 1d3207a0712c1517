"""
Environment variable helpers for typeparse.

Thin wrappers that look a variable up, fall back to a string default
when it is absent or empty, and feed the result to the engine:

    port = get(int, "PORT", "8080")
    timeouts = get(list[timedelta] | None, "TIMEOUTS", "")
    debug, err = try_get(bool, "DEBUG", "false")

Defaults are raw strings, parsed exactly like the variable would be.
"""

from __future__ import annotations

import os
from typing import Any

from typeparse.config import ParseConfig, new_config
from typeparse.engine import must_parse_with, try_parse_with


def get_string(key: str, *defaults: str) -> str:
    """Value of *key*, or the first default if it is unset or empty."""
    value = os.environ.get(key, "")
    if value == "" and defaults:
        value = defaults[0]
    return value


def get(
    target: Any, key: str, *defaults: str, config: ParseConfig | None = None
) -> Any:
    """Parse environment variable *key* into *target*, raising on failure."""
    return must_parse_with(config or new_config(), target, get_string(key, *defaults))


def try_get(
    target: Any, key: str, *defaults: str, config: ParseConfig | None = None
) -> tuple[Any, Exception | None]:
    """Parse environment variable *key* into *target*; returns ``(value, error)``."""
    return try_parse_with(config or new_config(), target, get_string(key, *defaults))
