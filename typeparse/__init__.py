"""
typeparse: convert strings into typed Python values.

Public API surface:

- ``must_parse(target, text, *options)`` -- **recommended entry point**.
  Converts *text* into *target* (``int``, ``list[bool]``,
  ``datetime | None``, a pydantic model, ...) and raises on failure.

- ``try_parse(target, text, *options)`` -- same conversion, returns
  ``(value, error)`` instead of raising.

- ``must_parse_with`` / ``try_parse_with`` -- take a ``ParseConfig``
  built once with ``new_config(...)`` and reused across calls.

- Options: ``with_time_layout``, ``with_separator``,
  ``with_record_format``. Package defaults: ``configure_defaults``,
  ``reset_defaults``. Config files: ``load_config``, ``save_config``.

- ``StringUnmarshaler``: implement ``unmarshal_string`` on a class to
  take over its conversion entirely.

Environment variables and pandas columns are handled by the
``typeparse.env`` and ``typeparse.frame`` modules.

Examples::

    must_parse(int, "123")                          # 123
    must_parse(list[bool], "t,t,t,f,,")             # [True, True, True, False, False, False]
    must_parse(tuple[int, int, int], "1,2,3")       # (1, 2, 3)
    must_parse(timedelta, "1h30m")                  # timedelta(seconds=5400)
    must_parse(date, "2021-01-01", with_time_layout("%Y-%m-%d"))
"""

from __future__ import annotations

from typeparse.config import (
    ParseConfig,
    configure_defaults,
    load_config,
    new_config,
    reset_defaults,
    save_config,
    with_record_format,
    with_separator,
    with_time_layout,
)
from typeparse.engine import must_parse, must_parse_with, try_parse, try_parse_with
from typeparse.exceptions import (
    ConfigValidationError,
    ParsingError,
    RecordDecodeError,
    ShapeMismatchError,
    TypeParseError,
    UnsupportedTypeError,
)
from typeparse.hooks import StringUnmarshaler

__all__ = [
    "ConfigValidationError",
    "ParseConfig",
    "ParsingError",
    "RecordDecodeError",
    "ShapeMismatchError",
    "StringUnmarshaler",
    "TypeParseError",
    "UnsupportedTypeError",
    "configure_defaults",
    "load_config",
    "must_parse",
    "must_parse_with",
    "new_config",
    "reset_defaults",
    "save_config",
    "try_parse",
    "try_parse_with",
    "with_record_format",
    "with_separator",
    "with_time_layout",
]
