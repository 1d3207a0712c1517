"""
Duration and timestamp leaf converters for typeparse.

Durations (``datetime.timedelta``) use the compact unit grammar common in
config files and environment variables:

    "300ms", "-1.5h", "2h45m", "1h0m0.5s", "0"

i.e. an optional sign followed by one or more ``<decimal><unit>`` pairs
with units ``ns``, ``us`` (also ``µs`` / ``μs``), ``ms``, ``s``, ``m``,
``h``. A bare ``0`` is the only unit-less form. Arithmetic is exact in
nanoseconds and limited to the signed 64-bit nanosecond range; the
result is truncated toward zero to timedelta's microsecond resolution.

Timestamps (``datetime.datetime`` / ``datetime.date``) are parsed with
``strptime`` against ``ParseConfig.time_layout``. A layout without a zone
directive yields a UTC datetime rather than a naive one. Fractional seconds
are accepted after ``%S`` even when the layout has no ``%f``.
"""

from __future__ import annotations

import datetime as dt
import re
from fractions import Fraction
from typing import Any

from typeparse.config import ParseConfig
from typeparse.converters.base import Converter, Outcome
from typeparse.exceptions import ParsingError

_NANOSECOND = 1
_MICROSECOND = 1_000 * _NANOSECOND
_MILLISECOND = 1_000 * _MICROSECOND
_SECOND = 1_000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE

DURATION_UNITS: dict[str, int] = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    "µs": _MICROSECOND,  # micro sign
    "μs": _MICROSECOND,  # greek mu
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}

_MAX_NANOSECONDS = (1 << 63) - 1

# One "<decimal><unit>" component; the unit runs until the next digit or dot
_COMPONENT_RE = re.compile(
    r"(?P<int>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>[^0-9.]*)"
)

# Fraction digits past microseconds, which strptime's %f cannot hold
_EXTRA_FRACTION_RE = re.compile(r"(\.[0-9]{6})[0-9]{1,3}(?![0-9])")

ZERO_TIME = dt.datetime(1, 1, 1, tzinfo=dt.timezone.utc)
ZERO_DATE = dt.date(1, 1, 1)


def parse_duration(text: str) -> dt.timedelta:
    """Parse a duration literal such as ``"1h30m"`` into a timedelta.

    Raises:
        ParsingError: On bad syntax, a missing or unknown unit, or a value
            beyond the 64-bit nanosecond range.
    """
    s = text
    negative = False
    if s[:1] in ("+", "-"):
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return dt.timedelta(0)
    if s == "":
        raise ParsingError(dt.timedelta, text, "invalid duration")

    # The negative range reaches one nanosecond further
    limit = _MAX_NANOSECONDS + 1 if negative else _MAX_NANOSECONDS
    total = Fraction(0)
    pos = 0
    while pos < len(s):
        m = _COMPONENT_RE.match(s, pos)
        int_part = m.group("int")
        frac_part = m.group("frac") or ""
        if not int_part and not frac_part:
            raise ParsingError(dt.timedelta, text, "invalid duration")
        unit = m.group("unit")
        if not unit:
            raise ParsingError(dt.timedelta, text, "missing unit in duration")
        if unit not in DURATION_UNITS:
            raise ParsingError(dt.timedelta, text, f"unknown unit {unit!r} in duration")

        amount = Fraction(int(int_part or "0"))
        if frac_part:
            amount += Fraction(int(frac_part), 10 ** len(frac_part))
        total += amount * DURATION_UNITS[unit]
        if total > limit:
            raise ParsingError(dt.timedelta, text, "invalid duration")
        pos = m.end()

    microseconds = int(total) // _MICROSECOND
    if negative:
        microseconds = -microseconds
    return dt.timedelta(microseconds=microseconds)


def parse_time(text: str, layout: str, target: Any) -> dt.datetime:
    """Parse *text* with a strptime *layout*.

    A layout whose seconds field has no ``%f`` still accepts a fractional
    part after the seconds, e.g. ``"2021-01-01T00:00:00.5Z"`` with the
    default layout. Up to nine fraction digits are read; anything past
    microseconds is truncated.

    Raises:
        ParsingError: If the text does not match the layout.
    """
    candidates = [(text, layout)]
    if "%S" in layout and "%f" not in layout:
        candidates.append(
            (_EXTRA_FRACTION_RE.sub(r"\1", text), layout.replace("%S", "%S.%f", 1))
        )
    first_error: ValueError | None = None
    for candidate_text, candidate_layout in candidates:
        try:
            return dt.datetime.strptime(candidate_text, candidate_layout)
        except ValueError as e:
            first_error = first_error or e
    raise ParsingError(target, text, str(first_error)) from first_error


class DurationConverter(Converter):
    """``datetime.timedelta`` targets."""

    def zero(self) -> dt.timedelta:
        return dt.timedelta(0)

    def convert(self, text: str, config: ParseConfig) -> Outcome:
        if text == "":
            return self.unset()
        return Outcome(parse_duration(text), True)


class DateTimeConverter(Converter):
    """``datetime.datetime`` targets, parsed with the configured layout."""

    def zero(self) -> dt.datetime:
        return ZERO_TIME

    def convert(self, text: str, config: ParseConfig) -> Outcome:
        if text == "":
            return self.unset()
        value = parse_time(text, config.time_layout, self.target)
        if value.tzinfo is None:
            value = value.replace(tzinfo=dt.timezone.utc)
        return Outcome(value, True)


class DateConverter(Converter):
    """``datetime.date`` targets: the date part of the configured layout."""

    def zero(self) -> dt.date:
        return ZERO_DATE

    def convert(self, text: str, config: ParseConfig) -> Outcome:
        if text == "":
            return self.unset()
        value = parse_time(text, config.time_layout, self.target)
        return Outcome(value.date(), True)
