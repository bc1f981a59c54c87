"""Calendar classification and conversion to a naive datetime.

``calendar_kind`` recognizes the four native shapes the dialects render
directly. Anything else goes through :func:`to_naive_datetime`, which
never raises: unusable input comes back as a :class:`FailedInput`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, date, datetime, time
from typing import Any

from chronofmt.domain.types import CalendarKind, FailedInput

logger = logging.getLogger(__name__)

INVALID_DATE = "invalid_date"


def calendar_kind(value: object) -> CalendarKind | None:
    """Return the native kind of *value*, or None for non-native input."""
    # datetime subclasses date, so it must be checked first.
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            return CalendarKind.NAIVE_DATETIME
        return CalendarKind.DATETIME
    if isinstance(value, date):
        return CalendarKind.DATE
    if isinstance(value, time):
        return CalendarKind.TIME
    return None


def _failed(value: object, reason: str = INVALID_DATE) -> FailedInput:
    return FailedInput(reason=reason, detail={"input": repr(value)})


def _to_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def _from_sequence(value: Sequence[Any]) -> datetime:
    # ((y, m, d), (h, mi, s)) pairs
    if len(value) == 2 and all(isinstance(part, (tuple, list)) for part in value):
        ymd, hms = value
        return datetime(*ymd, *hms)
    if len(value) in (3, 6, 7):
        return datetime(*value)
    raise ValueError(f"expected 3, 6 or 7 calendar fields, got {len(value)}")


def to_naive_datetime(value: object) -> datetime | FailedInput:
    """Convert a calendar-like value into a naive datetime.

    Accepted shapes:
      * native ``date``/``datetime`` (aware values are converted to UTC)
      * ISO 8601 strings
      * Unix timestamps (``int``/``float`` seconds, interpreted as UTC)
      * ``(y, m, d)``, ``(y, m, d, h, mi, s[, us])`` and
        ``((y, m, d), (h, mi, s))`` sequences
      * objects exposing a ``to_naive_datetime()`` method

    A ``time`` has no calendar date and is rejected.
    """
    if isinstance(value, FailedInput):
        return value

    converter = getattr(value, "to_naive_datetime", None)
    if callable(converter):
        try:
            converted = converter()
        except (TypeError, ValueError, OverflowError, OSError) as exc:
            logger.debug("Conversion hook of %r failed: %s", value, exc)
            return _failed(value)
        if isinstance(converted, FailedInput):
            return converted
        if isinstance(converted, datetime):
            return _to_naive(converted)
        return _failed(value)

    try:
        if isinstance(value, datetime):
            return _to_naive(value)
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        if isinstance(value, bool):
            return _failed(value)
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value, tz=UTC).replace(tzinfo=None)
        if isinstance(value, str):
            return _to_naive(datetime.fromisoformat(value.strip()))
        if isinstance(value, (tuple, list)):
            return _from_sequence(value)
    except (TypeError, ValueError, OverflowError, OSError) as exc:
        logger.debug("Cannot convert %r to a naive datetime: %s", value, exc)
        return _failed(value)

    return _failed(value)
