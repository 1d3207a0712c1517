"""
Custom exception hierarchy for typeparse.

Why a custom hierarchy:
- Callers can catch specific failures (e.g., ShapeMismatchError vs
  ParsingError) without string-matching messages.
- The value-shaped errors also derive from ``ValueError`` so code that
  already guards ``int(...)``-style conversions keeps working.

Errors raised by a type's own ``unmarshal_string`` hook are NOT wrapped;
they reach the caller exactly as the hook raised them.
"""

from __future__ import annotations

from typing import Any


def describe_type(target: Any) -> str:
    """Readable name for a target type, used in error messages."""
    if isinstance(target, type):
        return target.__qualname__
    return repr(target)


class TypeParseError(Exception):
    """Base exception for all typeparse errors."""


class UnsupportedTypeError(TypeParseError):
    """Raised when the target type matches no known leaf or container shape."""

    def __init__(self, target: Any, reason: str | None = None) -> None:
        self.target = target
        self.reason = reason
        message = f"unsupported type: {describe_type(target)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ParsingError(TypeParseError, ValueError):
    """Raised when a leaf literal does not conform to its grammar.

    Attributes:
        target: The leaf type that was requested.
        text: The offending input.
        reason: Short description of what went wrong.
    """

    def __init__(self, target: Any, text: str, reason: str) -> None:
        self.target = target
        self.text = text
        self.reason = reason
        super().__init__(
            f"cannot parse {text!r} as {describe_type(target)}: {reason}"
        )


class ShapeMismatchError(TypeParseError, ValueError):
    """Raised when a fixed-length tuple gets the wrong number of parts."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"cannot set array: expected {expected} parts, got {actual}"
        )


class RecordDecodeError(TypeParseError, ValueError):
    """Raised when a structured record cannot be decoded from its text."""


class ConfigValidationError(TypeParseError):
    """Raised when a typeparse config file cannot be used.

    For example, an empty YAML file or a document that is not a mapping.
    """
