"""
Converters sub-package for typeparse.

One converter class per target category:
  - base.py: Converter ABC, Outcome, shared helpers, UnsupportedConverter.
  - primitives.py: signed/unsigned integers, floats, booleans, strings.
  - temporal.py: durations, datetimes, dates.
  - records.py: structured records decoded through pydantic.
  - containers.py: optionals, sequences, fixed-length tuples.

The hook converter lives next to the hook protocol in ``typeparse.hooks``.
Converters are wired together by ``typeparse.resolve``.
"""

from typeparse.converters.base import Converter, Outcome, UnsupportedConverter
from typeparse.converters.containers import (
    ArrayConverter,
    OptionalConverter,
    SequenceConverter,
)
from typeparse.converters.primitives import (
    BoolConverter,
    FloatConverter,
    IntegerConverter,
    StringConverter,
    UnsignedConverter,
)
from typeparse.converters.records import RecordConverter
from typeparse.converters.temporal import (
    DateConverter,
    DateTimeConverter,
    DurationConverter,
)

__all__ = [
    "ArrayConverter",
    "BoolConverter",
    "Converter",
    "DateConverter",
    "DateTimeConverter",
    "DurationConverter",
    "FloatConverter",
    "IntegerConverter",
    "OptionalConverter",
    "Outcome",
    "RecordConverter",
    "SequenceConverter",
    "StringConverter",
    "UnsignedConverter",
    "UnsupportedConverter",
]
