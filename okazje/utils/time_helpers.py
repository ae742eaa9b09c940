"""
Timestamp normalization helpers.

Catalog records come from a document store that encodes instants in several
shapes: Firestore timestamps (``{"seconds": ...}`` or the admin SDK's
``{"_seconds": ...}``), epoch numbers in seconds or milliseconds, datetime
objects and ISO-8601 strings.
"""
from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Any, Optional

# Epoch values below this are seconds, anything above is milliseconds.
_EPOCH_MS_THRESHOLD = 1e11

_ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_iso_datetime(value: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or date-time string.

    Naive values are taken as UTC so every parsed instant is comparable.

    Args:
        value: Candidate string

    Returns:
        Timezone-aware datetime, or None when the string is not an ISO date
    """
    text = value.strip()
    if not _ISO_DATE_PREFIX.match(text):
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _utc_from_seconds(seconds: float) -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def from_epoch(value: float) -> Optional[datetime]:
    """Convert an epoch number (seconds or milliseconds) to a UTC datetime; None when out of range."""
    seconds = value if value < _EPOCH_MS_THRESHOLD else value / 1000.0
    return _utc_from_seconds(seconds)


def firestore_datetime(value: Any) -> Optional[datetime]:
    """
    Extract a datetime from a Firestore timestamp in dict or object form.

    Args:
        value: Mapping with ``seconds``/``_seconds`` (and optional nanoseconds),
               or an object exposing ``to_datetime()`` / ``timestamp()``

    Returns:
        UTC datetime, or None when the value is not a Firestore timestamp
    """
    if isinstance(value, dict):
        seconds = value.get("seconds", value.get("_seconds"))
        if _is_number(seconds):
            nanos = value.get("nanoseconds", value.get("_nanoseconds")) or 0
            if not _is_number(nanos):
                return None
            return _utc_from_seconds(seconds + nanos / 1e9)
        return None
    to_datetime = getattr(value, "to_datetime", None)
    if callable(to_datetime):
        result = to_datetime()
        if isinstance(result, datetime):
            return result if result.tzinfo else result.replace(tzinfo=timezone.utc)
    return None


def to_datetime(value: Any) -> Optional[datetime]:
    """
    Normalize any supported timestamp shape to an aware UTC datetime.

    Returns None for None, booleans and values that do not look like a
    timestamp at all.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        try:
            return from_epoch(float(value))
        except OverflowError:
            return None
    if isinstance(value, str):
        return parse_iso_datetime(value)
    return firestore_datetime(value)


def to_iso(value: Any) -> Optional[str]:
    """Normalize a timestamp to an ISO-8601 UTC string (``...Z``), or None."""
    dt = to_datetime(value)
    if dt is None:
        return None
    try:
        dt = dt.astimezone(timezone.utc)
    except OverflowError:
        return None
    return dt.isoformat().replace("+00:00", "Z")
