"""
Primitive leaf converters for typeparse.

Handles the number, boolean and string leaves. Every leaf shares the
same empty-input contract: ``""`` produces the type's zero value and a
not-set outcome, never an error.

Grammar accepted per leaf:
  signed ints     [+-]?[0-9]+          (no whitespace, no underscores)
  unsigned ints   [0-9]+
  floats          decimal / exponent literals, 0x hex floats with a p exponent,
                  inf / infinity / nan in any case, optional sign
  booleans        1 t T TRUE true True / 0 f F FALSE false False

Sized numpy targets (``numpy.int8`` ... ``numpy.uint64``) are range
checked against ``numpy.iinfo``; ``int`` and its subclasses are unbounded like
Python itself. A finite float literal that overflows to infinity is rejected
rather than silently stored as ``inf``.
"""

from __future__ import annotations

import math
import re
from typing import Any

import numpy as np

from typeparse.config import ParseConfig
from typeparse.converters.base import Converter, Outcome
from typeparse.exceptions import ParsingError

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")
# ASCII digits only; float() also accepts other Unicode digits
_DECIMAL_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
# The binary exponent is mandatory in a hex literal
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_INFINITY_LITERALS = {"inf", "infinity"}

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class IntegerConverter(Converter):
    """Base-10 integers, signed or unsigned depending on the pattern.

    ``bounds`` is ``(min, max)`` for sized numpy types, ``None`` for ``int``.
    """

    pattern = _SIGNED_RE

    def __init__(self, target: Any) -> None:
        super().__init__(target)
        self.bounds: tuple[int, int] | None = None
        if issubclass(target, np.integer):
            info = np.iinfo(target)
            self.bounds = (int(info.min), int(info.max))

    def zero(self) -> Any:
        return self.target(0)

    def convert(self, text: str, config: ParseConfig) -> Outcome:
        if text == "":
            return self.unset()
        if not self.pattern.fullmatch(text):
            raise ParsingError(self.target, text, "invalid syntax")
        try:
            value = int(text)
        except ValueError as e:
            # Past the interpreter's int string conversion limit
            raise ParsingError(self.target, text, "value out of range") from e
        if self.bounds is not None and not self.bounds[0] <= value <= self.bounds[1]:
            raise ParsingError(
                self.target,
                text,
                f"value out of range [{self.bounds[0]}, {self.bounds[1]}]",
            )
        return Outcome(self.target(value), True)


class UnsignedConverter(IntegerConverter):
    """Unsigned base-10 integers (numpy unsigned types); no sign allowed."""

    pattern = _UNSIGNED_RE


class FloatConverter(Converter):
    """Decimal floating point (``float`` and numpy float types)."""

    def zero(self) -> Any:
        return self.target(0.0)

    def convert(self, text: str, config: ParseConfig) -> Outcome:
        if text == "":
            return self.unset()
        is_hex = _HEX_FLOAT_RE.fullmatch(text) is not None
        if not is_hex and not _DECIMAL_FLOAT_RE.fullmatch(text):
            raise ParsingError(self.target, text, "invalid syntax")
        try:
            value = float.fromhex(text) if is_hex else float(text)
        except OverflowError as e:
            raise ParsingError(self.target, text, "value out of range") from e
        result = self.target(value)
        if math.isinf(result) and text.lstrip("+-").lower() not in _INFINITY_LITERALS:
            raise ParsingError(self.target, text, "value out of range")
        return Outcome(result, True)


class BoolConverter(Converter):
    """Conventional boolean literals (``bool`` and ``numpy.bool_``)."""

    def zero(self) -> Any:
        return self.target(False)

    def convert(self, text: str, config: ParseConfig) -> Outcome:
        if text == "":
            return self.unset()
        if text in _TRUE_LITERALS:
            return Outcome(self.target(True), True)
        if text in _FALSE_LITERALS:
            return Outcome(self.target(False), True)
        raise ParsingError(self.target, text, "invalid syntax")


class StringConverter(Converter):
    """``str`` and its subclasses. Empty text is reported as not set."""

    def zero(self) -> Any:
        return self.target("")

    def convert(self, text: str, config: ParseConfig) -> Outcome:
        if text == "":
            return self.unset()
        return Outcome(self.target(text), True)
