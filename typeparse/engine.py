"""
Public conversion entry points for typeparse.

Two families, each with a per-call and a pre-built-config variant:

- ``try_parse`` / ``try_parse_with`` return ``(value, error)``. On
  failure the value is the target's zero value and ``error`` is the
  exception that stopped the conversion; on success ``error`` is None.
- ``must_parse`` / ``must_parse_with`` return the value and raise the
  error instead.

Empty input is not an error for the leaf, optional and sequence
categories: the zero value comes back (``0``, ``""``, ``None``, ``[]``,
...) with no error. Records and fixed-length tuples are stricter, and a
custom hook decides for itself.
"""

from __future__ import annotations

import logging
from typing import Any

from typeparse.config import Option, ParseConfig, new_config
from typeparse.resolve import resolve

logger = logging.getLogger(__name__)


def try_parse_with(
    config: ParseConfig, target: Any, text: str
) -> tuple[Any, Exception | None]:
    """Convert *text* into *target* with a pre-built config.

    Args:
        config: Options reused across many calls.
        target: The type to produce, e.g. ``int``, ``list[float]``,
            ``datetime | None``.
        text: The complete input string.

    Returns:
        ``(value, None)`` on success, ``(zero value, error)`` on failure.
        Errors raised by a type's ``unmarshal_string`` hook are returned
        unchanged.
    """
    converter = None
    try:
        converter = resolve(target)
        return converter.convert(text, config).value, None
    except Exception as e:
        logger.debug("Conversion of %r into %r failed: %s", text, target, e)
        return (converter.zero() if converter is not None else None), e


def try_parse(
    target: Any, text: str, *options: Option
) -> tuple[Any, Exception | None]:
    """Convert *text* into *target*; see ``try_parse_with``.

    Example::

        n, err = try_parse(int, "123")
        t, err = try_parse(datetime, "2021-01-01", with_time_layout("%Y-%m-%d"))
    """
    return try_parse_with(new_config(*options), target, text)


def must_parse_with(config: ParseConfig, target: Any, text: str) -> Any:
    """Convert *text* into *target* with a pre-built config, raising on failure.

    Raises:
        TypeParseError: For unsupported types, bad literals, shape
            mismatches and record decode failures.
        Exception: Whatever a type's ``unmarshal_string`` hook raises.
    """
    return resolve(target).convert(text, config).value


def must_parse(target: Any, text: str, *options: Option) -> Any:
    """Convert *text* into *target*, raising on failure.

    Example::

        flags = must_parse(list[bool], "t,t,t,f,,")
        # [True, True, True, False, False, False]
    """
    return must_parse_with(new_config(*options), target, text)
