"""
Comparable value variants for table sorting.

Every cell value is classified once, before sorting, into one of a closed set
of variants. The comparator then only has to look at pairs of variants instead
of inspecting arbitrary runtime types on every comparison.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Union

from okazje.utils.time_helpers import firestore_datetime, parse_iso_datetime, to_datetime


@dataclass(frozen=True)
class Absent:
    """Missing value (None or a field the record does not have)."""


@dataclass(frozen=True)
class Number:
    value: Union[int, float]


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Instant:
    """A point in time; ``raw`` keeps the source string when parsed from text."""

    value: datetime
    raw: Optional[str] = None


@dataclass(frozen=True)
class Other:
    """Anything else (booleans, NaN, containers). Never ordered against others."""

    value: Any


ComparableValue = Union[Absent, Number, Text, Instant, Other]

ABSENT = Absent()


def classify(value: Any) -> ComparableValue:
    """
    Decide the variant of a raw cell value.

    Args:
        value: Raw value read from a record

    Returns:
        The matching ComparableValue variant
    """
    if value is None:
        return ABSENT
    if isinstance(value, bool):
        return Other(value)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return Other(value)
        return Number(value)
    if isinstance(value, str):
        parsed = parse_iso_datetime(value)
        if parsed is not None:
            return Instant(parsed, raw=value)
        return Text(value)
    if isinstance(value, (datetime, date)):
        return Instant(to_datetime(value))
    stamp = firestore_datetime(value)
    if stamp is not None:
        return Instant(stamp)
    return Other(value)


def _sign(delta: float) -> int:
    return (delta > 0) - (delta < 0)


def compare_values(a: ComparableValue, b: ComparableValue, collator, descending: bool = False) -> int:
    """
    Three-way comparison of two classified values.

    Absent values always sort last, whatever the direction. ``descending``
    negates every other non-equal result. Pairs with no defined order compare
    equal so a stable sort keeps their input order.

    Args:
        a: Left value
        b: Right value
        collator: Object with ``compare(str, str) -> int`` used for text
        descending: Invert the order of present values

    Returns:
        Negative, zero or positive like a classic ``cmp``
    """
    a_absent = isinstance(a, Absent)
    b_absent = isinstance(b, Absent)
    if a_absent or b_absent:
        return int(a_absent) - int(b_absent)

    result = 0
    if isinstance(a, Number) and isinstance(b, Number):
        result = (a.value > b.value) - (a.value < b.value)
    elif isinstance(a, Instant) and isinstance(b, Instant):
        result = _sign((a.value - b.value).total_seconds())
    elif _as_text(a) is not None and _as_text(b) is not None:
        # Two strings where only one parsed as a date are still two strings.
        result = collator.compare(_as_text(a), _as_text(b))

    return -result if descending else result


def _as_text(value: ComparableValue) -> Optional[str]:
    if isinstance(value, Text):
        return value.value
    if isinstance(value, Instant):
        return value.raw
    return None
