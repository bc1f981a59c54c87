"""Tests for calendar classification and naive-datetime conversion."""

from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta, timezone

import pytest

from chronofmt.domain.errors import ErrorCode
from chronofmt.domain.types import CalendarKind, FailedInput
from chronofmt.formatting.dispatcher import lformat
from chronofmt.formatting.normalize import calendar_kind, to_naive_datetime


class TestCalendarKind:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2024, 3, 5), CalendarKind.DATE),
            (time(9, 5), CalendarKind.TIME),
            (time(9, 5, tzinfo=UTC), CalendarKind.TIME),
            (datetime(2024, 3, 5, 9), CalendarKind.NAIVE_DATETIME),
            (datetime(2024, 3, 5, 9, tzinfo=UTC), CalendarKind.DATETIME),
        ],
    )
    def test_native_values(self, value: object, expected: CalendarKind) -> None:
        assert calendar_kind(value) is expected

    @pytest.mark.parametrize("value", ["2024-03-05", 1700000000, (2024, 3, 5), None, object()])
    def test_non_native_values(self, value: object) -> None:
        assert calendar_kind(value) is None


class _Stamp:
    def __init__(self, moment: object) -> None:
        self._moment = moment

    def to_naive_datetime(self) -> object:
        return self._moment


class _Raising:
    def to_naive_datetime(self) -> object:
        raise ValueError("month must be in 1..12")


class TestToNaiveDatetime:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2024-03-05T14:07:09", datetime(2024, 3, 5, 14, 7, 9)),
            ("2024-03-05T14:07:09+02:00", datetime(2024, 3, 5, 12, 7, 9)),
            ("  2024-03-05  ", datetime(2024, 3, 5)),
            (0, datetime(1970, 1, 1)),
            (86400.5, datetime(1970, 1, 2, 0, 0, 0, 500000)),
            ((2024, 3, 5), datetime(2024, 3, 5)),
            ([2024, 3, 5, 14, 7, 9], datetime(2024, 3, 5, 14, 7, 9)),
            ((2024, 3, 5, 14, 7, 9, 12), datetime(2024, 3, 5, 14, 7, 9, 12)),
            (((2024, 3, 5), (14, 7, 9)), datetime(2024, 3, 5, 14, 7, 9)),
            (date(2024, 3, 5), datetime(2024, 3, 5)),
            (
                datetime(2024, 3, 5, 14, 0, tzinfo=timezone(timedelta(hours=-5))),
                datetime(2024, 3, 5, 19, 0),
            ),
        ],
    )
    def test_converts(self, value: object, expected: datetime) -> None:
        assert to_naive_datetime(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            "not a date",
            (2024, 13, 1),
            (2024, 3),
            True,
            None,
            time(9, 5),
            float("inf"),
            {"year": 2024},
        ],
    )
    def test_unusable_input_returns_failed_input(self, value: object) -> None:
        result = to_naive_datetime(value)
        assert isinstance(result, FailedInput)
        assert result.reason == "invalid_date"
        assert result.detail == {"input": repr(value)}

    def test_failed_input_passes_through(self) -> None:
        failed = FailedInput(reason="boom")
        assert to_naive_datetime(failed) is failed

    def test_conversion_protocol(self) -> None:
        stamp = _Stamp(datetime(2024, 3, 5, 9, tzinfo=UTC))
        assert to_naive_datetime(stamp) == datetime(2024, 3, 5, 9)

    def test_conversion_protocol_failure(self) -> None:
        failed = FailedInput(reason="upstream")
        assert to_naive_datetime(_Stamp(failed)) is failed
        assert isinstance(to_naive_datetime(_Stamp("nope")), FailedInput)

    def test_raising_conversion_hook(self) -> None:
        result = to_naive_datetime(_Raising())
        assert isinstance(result, FailedInput)
        assert result.reason == "invalid_date"

    def test_raising_conversion_hook_through_lformat(self) -> None:
        result = lformat(_Raising(), "{YYYY}", "en")
        assert result.error is not None
        assert result.error.code is ErrorCode.INVALID_DATE
