"""
Container converters for typeparse: optionals, sequences, fixed arrays.

Containers never parse text themselves. They derive sub-inputs (the
whole text for an optional, separator-delimited parts for sequences
and arrays) and hand each one to the element converter with the same
``ParseConfig``.

Empty-input rules:
- Optional: an unset inner value leaves the optional at ``None``.
- Sequence: ``""`` is not set. Otherwise every part is converted and the
  sequence counts as set only if at least one element was set, so
  ``",,"`` builds three zero elements yet reports not set. Inside an
  optional that collapses to ``None``.
- Fixed array: the part count must match exactly and the array is always
  reported as set, even if every slot stayed at its zero value.

The first element error aborts the whole container; nothing partial is
returned.
"""

from __future__ import annotations

from typing import Any, Callable

from typeparse.config import ParseConfig
from typeparse.converters.base import Converter, Outcome, split_parts
from typeparse.exceptions import ShapeMismatchError


class OptionalConverter(Converter):
    """``T | None``: converts into a fresh ``T`` and keeps it only if set."""

    def __init__(self, target: Any, inner: Converter) -> None:
        super().__init__(target)
        self.inner = inner

    def zero(self) -> None:
        return None

    def convert(self, text: str, config: ParseConfig) -> Outcome:
        outcome = self.inner.convert(text, config)
        if outcome.is_set:
            return outcome
        return self.unset()


class SequenceConverter(Converter):
    """Variable-length ``list[T]`` / ``tuple[T, ...]``.

    ``factory`` builds the concrete container (``list`` or ``tuple``)
    from the converted elements.
    """

    def __init__(
        self,
        target: Any,
        element: Converter,
        factory: Callable[[list[Any]], Any] = list,
    ) -> None:
        super().__init__(target)
        self.element = element
        self.factory = factory

    def zero(self) -> Any:
        return self.factory([])

    def convert(self, text: str, config: ParseConfig) -> Outcome:
        if text == "":
            return self.unset()

        values: list[Any] = []
        any_set = False
        for part in split_parts(text, config.separator):
            outcome = self.element.convert(part, config)
            values.append(outcome.value)
            any_set = any_set or outcome.is_set
        return Outcome(self.factory(values), any_set)


class ArrayConverter(Converter):
    """Fixed-length ``tuple[T1, T2, ...]``; one converter per slot."""

    def __init__(self, target: Any, slots: list[Converter]) -> None:
        super().__init__(target)
        self.slots = slots

    def zero(self) -> tuple[Any, ...]:
        return tuple(slot.zero() for slot in self.slots)

    def convert(self, text: str, config: ParseConfig) -> Outcome:
        parts = split_parts(text, config.separator)
        if len(parts) != len(self.slots):
            raise ShapeMismatchError(len(self.slots), len(parts))

        values = tuple(
            slot.convert(part, config).value
            for slot, part in zip(self.slots, parts)
        )
        return Outcome(values, True)
