"""Token catalog and renderer shared by the Default and Strftime dialects.

Both tokenizers map their own surface syntax onto the same canonical
token names (``year4``, ``mfull``, ``hour24``, ...); rendering is done
here once. Numeric tokens are padded with :func:`pad_char` up to
their full width; textual tokens are translated for the requested locale.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta

from chronofmt.domain.directives import Padding, TokenDirective, WidthSpec, pad_char, width_spec
from chronofmt.domain.errors import FormatError
from chronofmt.domain.types import CalendarKind
from chronofmt.i18n import translator

# Natural digit counts of numeric tokens; ``None`` max means unbounded.
NUMERIC_WIDTHS: dict[str, WidthSpec] = {
    "year4": width_spec(4, None),
    "year2": width_spec(range(2, 3)),
    "century": width_spec(range(2, 3)),
    "iso_year4": width_spec(4, None),
    "iso_year2": width_spec(range(2, 3)),
    "month": width_spec(range(1, 3)),
    "day": width_spec(range(1, 3)),
    "oday": width_spec(range(1, 4)),
    "iso_week": width_spec(range(1, 3)),
    "wday_mon": width_spec(range(1, 2)),
    "wday_sun": width_spec(range(1, 2)),
    "hour24": width_spec(range(1, 3)),
    "hour12": width_spec(range(1, 3)),
    "min": width_spec(range(1, 3)),
    "sec": width_spec(range(1, 3)),
    "sec_fractional": width_spec(6, 6),
    "sec_epoch": width_spec(1, None),
}

TEXT_TOKENS: frozenset[str] = frozenset(
    {
        "mshort",
        "mfull",
        "wdshort",
        "wdfull",
        "am",
        "AM",
        "zname",
        "zoffs",
        "zoffs_colon",
        "zoffs_sec",
        "iso_date",
        "iso_time",
        "iso_8601_extended",
        "iso_8601_basic",
    }
)

DATE_TOKENS: frozenset[str] = frozenset(
    {
        "year4",
        "year2",
        "century",
        "iso_year4",
        "iso_year2",
        "month",
        "mshort",
        "mfull",
        "day",
        "oday",
        "iso_week",
        "wday_mon",
        "wday_sun",
        "wdshort",
        "wdfull",
        "sec_epoch",
        "iso_date",
        "iso_8601_extended",
        "iso_8601_basic",
    }
)

ZONE_TOKENS: frozenset[str] = frozenset({"zname", "zoffs", "zoffs_colon", "zoffs_sec"})


def numeric_width(name: str, padding: Padding) -> WidthSpec:
    """Width bounds of numeric token *name* rendered with *padding*.

    Padded tokens fill to their natural digit count; unpadded tokens take
    as few digits as the value needs.
    """
    natural = NUMERIC_WIDTHS[name]
    if padding is Padding.NONE:
        return WidthSpec(min=1, max=natural.max)
    return natural


@dataclass(frozen=True)
class CalendarFields:
    """The components of a native calendar value that tokens read."""

    day: date | None
    hour: int
    minute: int
    second: int
    microsecond: int
    offset: timedelta | None
    zone_name: str | None

    @classmethod
    def of(cls, value: date | time | datetime, kind: CalendarKind) -> CalendarFields:
        if kind is CalendarKind.DATE:
            assert isinstance(value, date)
            return cls(value, 0, 0, 0, 0, None, None)
        if kind is CalendarKind.TIME:
            assert isinstance(value, time)
            return cls(
                None,
                value.hour,
                value.minute,
                value.second,
                value.microsecond,
                value.utcoffset(),
                value.tzname(),
            )
        assert isinstance(value, datetime)
        return cls(
            value.date(),
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            value.utcoffset(),
            value.tzname(),
        )

    def epoch_seconds(self) -> int:
        assert self.day is not None
        moment = datetime(
            self.day.year,
            self.day.month,
            self.day.day,
            self.hour,
            self.minute,
            self.second,
            tzinfo=UTC,
        )
        return int((moment - (self.offset or timedelta())).timestamp())


def _day(fields: CalendarFields) -> date:
    assert fields.day is not None
    return fields.day


_NUMERIC: dict[str, Callable[[CalendarFields], int]] = {
    "year4": lambda f: _day(f).year,
    "year2": lambda f: _day(f).year % 100,
    "century": lambda f: _day(f).year // 100,
    "iso_year4": lambda f: _day(f).isocalendar()[0],
    "iso_year2": lambda f: _day(f).isocalendar()[0] % 100,
    "month": lambda f: _day(f).month,
    "day": lambda f: _day(f).day,
    "oday": lambda f: _day(f).timetuple().tm_yday,
    "iso_week": lambda f: _day(f).isocalendar()[1],
    "wday_mon": lambda f: _day(f).isoweekday(),
    "wday_sun": lambda f: _day(f).isoweekday() % 7,
    "hour24": lambda f: f.hour,
    "hour12": lambda f: f.hour % 12 or 12,
    "min": lambda f: f.minute,
    "sec": lambda f: f.second,
    "sec_fractional": lambda f: f.microsecond,
    "sec_epoch": lambda f: f.epoch_seconds(),
}


def _pad(text: str, directive: TokenDirective) -> str:
    # Bounded tokens fill to their full width, unbounded ones to the minimum.
    width = directive.width.max if directive.width.max is not None else directive.width.min
    fill = pad_char(directive.padding)
    if fill and len(text) < width:
        return text.rjust(width, fill)
    return text


def _offset(offset: timedelta, *, sep: str = "", seconds: bool = False) -> str:
    total = int(offset.total_seconds())
    sign = "-" if total < 0 else "+"
    hours, rest = divmod(abs(total), 3600)
    minutes, secs = divmod(rest, 60)
    text = f"{sign}{hours:02d}{sep}{minutes:02d}"
    if seconds:
        text += f"{sep}{secs:02d}"
    return text


def _iso_date(day: date, sep: str = "-") -> str:
    return f"{day.year:04d}{sep}{day.month:02d}{sep}{day.day:02d}"


def _iso_time(fields: CalendarFields, sep: str = ":") -> str:
    text = f"{fields.hour:02d}{sep}{fields.minute:02d}{sep}{fields.second:02d}"
    if fields.microsecond:
        text += f".{fields.microsecond:06d}"
    return text


def _render_text(directive: TokenDirective, fields: CalendarFields, locale: str) -> str:
    name = directive.name
    if name in ("mshort", "mfull"):
        return translator.month_name(locale, _day(fields).month, abbreviated=name == "mshort")
    if name in ("wdshort", "wdfull"):
        return translator.weekday_name(locale, _day(fields).weekday(), abbreviated=name == "wdshort")
    if name == "am":
        return translator.period_name(locale, fields.hour).lower()
    if name == "AM":
        return translator.period_name(locale, fields.hour).upper()
    if name in ZONE_TOKENS:
        assert fields.offset is not None
        if name == "zname":
            return fields.zone_name or _offset(fields.offset, sep=":")
        if name == "zoffs":
            return _offset(fields.offset)
        return _offset(fields.offset, sep=":", seconds=name == "zoffs_sec")
    if name == "iso_date":
        return _iso_date(_day(fields))
    if name == "iso_time":
        return _iso_time(fields)

    # Composite ISO 8601 timestamps
    extended = name == "iso_8601_extended"
    text = _iso_date(_day(fields), "-" if extended else "")
    text += "T" + _iso_time(fields, ":" if extended else "")
    if fields.offset is not None:
        text += _offset(fields.offset, sep=":" if extended else "")
    return text


def render_token(
    directive: TokenDirective,
    value: date | time | datetime,
    kind: CalendarKind,
    locale: str,
) -> str:
    """Render *directive* for a native calendar *value*.

    Raises FormatError for unknown token names, date tokens applied to a
    time, and zone tokens applied to a value without a UTC offset.
    """
    name = directive.name
    if name not in _NUMERIC and name not in TEXT_TOKENS:
        raise FormatError(f"unsupported token {directive.raw!r}")

    fields = CalendarFields.of(value, kind)
    if name in DATE_TOKENS and fields.day is None:
        raise FormatError(f"{directive.raw!r} requires a date, but the value is a {kind.value}")
    if name in ZONE_TOKENS and fields.offset is None:
        raise FormatError(f"{directive.raw!r} requires a timezone, but the value is a {kind.value}")

    if name in _NUMERIC:
        return _pad(str(_NUMERIC[name](fields)), directive)
    return _pad(_render_text(directive, fields, locale), directive)
