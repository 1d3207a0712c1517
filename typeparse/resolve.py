"""
Target type resolution for typeparse.

Maps a target type to the converter tree that handles it. Resolution
runs once per hashable target type (results are cached), so repeated
conversions into ``list[int | None]`` only pay for the dispatch once.

Category order, first match wins:
  1. custom hook (``unmarshal_string``)
  2. optional (``T | None`` / ``Optional[T]``)
  3. signed integers, with ``timedelta`` routed to the duration grammar
  4. unsigned integers (numpy unsigned types)
  5. floats
  6. booleans
  7. strings
  8. records: ``datetime`` / ``date`` use the time layout, everything
     else structured is decoded through pydantic
  9. variable-length sequences (``list[T]``, ``tuple[T, ...]``)
 10. fixed-length arrays (``tuple[T1, T2, ...]``)
 11. anything else: unsupported (raised when a value reaches it)

``Annotated[T, ...]`` resolves as ``T``. Self-referential types are not
detected; resolving one recurses until Python's recursion limit.
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import enum
import functools
import logging
import types
from typing import Annotated, Any, Union, get_args, get_origin

import numpy as np
from pydantic import BaseModel
from typing_extensions import is_typeddict

from typeparse.converters import (
    ArrayConverter,
    BoolConverter,
    Converter,
    DateConverter,
    DateTimeConverter,
    DurationConverter,
    FloatConverter,
    IntegerConverter,
    OptionalConverter,
    RecordConverter,
    SequenceConverter,
    StringConverter,
    UnsignedConverter,
    UnsupportedConverter,
)
from typeparse.hooks import HookConverter, has_hook

logger = logging.getLogger(__name__)

_NONE_TYPE = type(None)


def resolve(target: Any) -> Converter:
    """Return the converter for *target*, cached when the type is hashable."""
    try:
        hash(target)
    except TypeError:
        # e.g. Annotated metadata that is a list or dict
        return _build(target)
    return _resolve_cached(target)


@functools.lru_cache(maxsize=None)
def _resolve_cached(target: Any) -> Converter:
    return _build(target)


def _is_class(target: Any, *bases: type) -> bool:
    return isinstance(target, type) and issubclass(target, bases)


def _is_signed(target: Any) -> bool:
    if _is_class(target, np.signedinteger):
        return True
    return _is_class(target, int) and not _is_class(target, bool, enum.Enum)


def _is_float(target: Any) -> bool:
    return _is_class(target, float, np.floating) and not _is_class(target, enum.Enum)


def _is_string(target: Any) -> bool:
    return _is_class(target, str) and not _is_class(target, enum.Enum)


def _is_record(target: Any) -> bool:
    if get_origin(target) is dict:
        return True
    if not isinstance(target, type):
        return False
    return (
        issubclass(target, BaseModel)
        or dataclasses.is_dataclass(target)
        or is_typeddict(target)
        or target is dict
    )


def _build(target: Any) -> Converter:
    origin = get_origin(target)
    args = get_args(target)

    if origin is Annotated:
        return resolve(args[0])

    if has_hook(target):
        converter: Converter = HookConverter(target)
    elif origin is Union or origin is types.UnionType:
        members = [arg for arg in args if arg is not _NONE_TYPE]
        if len(members) == 1 and len(args) == 2:
            converter = OptionalConverter(target, resolve(members[0]))
        else:
            converter = UnsupportedConverter(target)
    elif target is dt.timedelta:
        converter = DurationConverter(target)
    elif _is_signed(target):
        converter = IntegerConverter(target)
    elif _is_class(target, np.unsignedinteger):
        converter = UnsignedConverter(target)
    elif _is_float(target):
        converter = FloatConverter(target)
    elif target is bool or target is np.bool_:
        converter = BoolConverter(target)
    elif _is_string(target):
        converter = StringConverter(target)
    elif target is dt.datetime:
        converter = DateTimeConverter(target)
    elif target is dt.date:
        converter = DateConverter(target)
    elif _is_record(target):
        converter = RecordConverter(target)
    elif origin is list and len(args) == 1:
        converter = SequenceConverter(target, resolve(args[0]), list)
    elif origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        converter = SequenceConverter(target, resolve(args[0]), tuple)
    elif origin is tuple:
        converter = ArrayConverter(target, [resolve(arg) for arg in args])
    else:
        converter = UnsupportedConverter(target)

    logger.debug("Resolved %r -> %s", target, type(converter).__name__)
    return converter
