"""
Custom parsing hook for typeparse.

Any class can take over its own conversion by defining a classmethod
``unmarshal_string`` that accepts the raw text and returns an instance:

    class Upper(str):
        @classmethod
        def unmarshal_string(cls, text: str) -> "Upper":
            return cls(text.upper())

The engine checks for the hook before any built-in category, so it wins
even for ``str``/``int`` subclasses. The hook sees the raw text, empty
strings included, and whatever it raises is passed to the caller as is.
"""

from __future__ import annotations

import inspect
from typing import Any, Protocol, runtime_checkable

from typeparse.config import ParseConfig
from typeparse.converters.base import Converter, Outcome, default_instance
from typeparse.exceptions import UnsupportedTypeError


@runtime_checkable
class StringUnmarshaler(Protocol):
    """Classes that know how to build themselves from a string."""

    @classmethod
    def unmarshal_string(cls, text: str) -> Any:
        ...


def has_hook(target: Any) -> bool:
    """Return True if *target* is a class implementing ``unmarshal_string``."""
    return isinstance(target, type) and issubclass(target, StringUnmarshaler)


class HookConverter(Converter):
    """Delegates the whole conversion to the target's ``unmarshal_string``."""

    def zero(self) -> Any:
        return default_instance(self.target)

    def convert(self, text: str, config: ParseConfig) -> Outcome:
        hook = inspect.getattr_static(self.target, "unmarshal_string")
        if not isinstance(hook, (classmethod, staticmethod)):
            raise UnsupportedTypeError(
                self.target,
                "unmarshal_string must be a classmethod returning an instance",
            )
        return Outcome(self.target.unmarshal_string(text), True)
