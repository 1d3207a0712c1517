"""
Base converter ABC for typeparse.

Every target category is handled by a ``Converter`` subclass. The
contract is:
1. ``convert(text, config)`` returns an ``Outcome``: the produced value
   plus whether anything was actually set.
2. A not-set outcome always carries ``zero()``, the untouched default of
   the target type, so containers can place it without special cases.
3. Failures are raised, never returned; containers let them propagate.

Why an ABC:
- Resolution builds a tree of converters once per target type; the tree
  is then reused for every call with that type.
- New categories are added as new subclasses without touching existing
  ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Any

from typeparse.config import ParseConfig
from typeparse.exceptions import UnsupportedTypeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """Result of one conversion step.

    Attributes:
        value: The produced value (the target's zero value when not set).
        is_set: False when the input was empty and nothing was assigned.
    """
    value: Any
    is_set: bool


class Converter(ABC):
    """Converts text into one target type."""

    def __init__(self, target: Any) -> None:
        self.target = target

    @abstractmethod
    def zero(self) -> Any:
        """Value of the target type before anything is assigned."""

    @abstractmethod
    def convert(self, text: str, config: ParseConfig) -> Outcome:
        """Convert *text* into the target type.

        Raises:
            TypeParseError: (or a hook's own exception) on failure.
        """

    def unset(self) -> Outcome:
        return Outcome(self.zero(), False)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.target!r})"


def split_parts(text: str, separator: str) -> list[str]:
    """Split *text* on *separator*; an empty separator yields single characters."""
    if separator == "":
        return list(text)
    return text.split(separator)


def default_instance(target: type) -> Any:
    """No-argument instance of *target*, or None if it needs arguments."""
    try:
        return target()
    except Exception as e:
        # Required constructor arguments, or a constructor that refuses to run
        logger.debug("No default instance of %r: %s", target, e)
        return None


class UnsupportedConverter(Converter):
    """Stand-in for types outside every category.

    Resolution never fails; the error is raised when a value actually
    reaches this type, so an empty list of an unsupported element type
    still converts cleanly.
    """

    def zero(self) -> Any:
        return None

    def convert(self, text: str, config: ParseConfig) -> Outcome:
        raise UnsupportedTypeError(self.target)
