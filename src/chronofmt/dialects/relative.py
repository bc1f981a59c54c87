"""Relative dialect: ``{relative}`` renders the distance from now.

``{relative}`` becomes a translated phrase such as ``"3 days ago"`` or
``"in 2 hours"``; everything else in the format string is literal text,
with ``{{`` and ``}}`` standing for literal braces.
Dates are compared with today's date, times with today's date at that
time, naive datetimes with the current UTC wall clock.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import UTC, date, datetime, time
from typing import TYPE_CHECKING, ClassVar

from chronofmt.domain.directives import LiteralDirective, TokenDirective
from chronofmt.domain.errors import FormatError
from chronofmt.domain.types import CalendarKind
from chronofmt.formatting.contract import TokenizingFormatter
from chronofmt.i18n.translator import relative_phrase

if TYPE_CHECKING:
    from datetime import timedelta

_DIRECTIVE = re.compile(r"\{\{|\}\}|\{([^{}]*)\}")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RelativeFormatter(TokenizingFormatter):
    """The relative-time formatting dialect.

    Args:
        clock: Returns the current moment as an aware datetime. Injected
            in tests to pin "now".
    """

    name: ClassVar[str] = "relative"

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock

    def parse(self, format_string: str) -> list[LiteralDirective | TokenDirective]:
        directives: list[LiteralDirective | TokenDirective] = []
        literal: list[str] = []
        literal_raw: list[str] = []

        def flush() -> None:
            raw = "".join(literal_raw)
            if raw:
                directives.append(LiteralDirective(value="".join(literal), raw=raw))
            literal.clear()
            literal_raw.clear()

        position = 0
        for match in _DIRECTIVE.finditer(format_string):
            text = format_string[position : match.start()]
            literal.append(text)
            literal_raw.append(text)
            position = match.end()
            raw = match.group(0)
            if raw in ("{{", "}}"):
                literal.append(raw[0])
                literal_raw.append(raw)
                continue
            if match.group(1) != "relative":
                raise FormatError(f"unsupported directive {raw!r} at position {match.start()}")
            flush()
            directives.append(TokenDirective(name="relative", raw=raw))
        rest = format_string[position:]
        literal.append(rest)
        literal_raw.append(rest)
        flush()
        return directives

    def _delta(self, value: date | time | datetime, kind: CalendarKind) -> timedelta:
        now = self._clock()
        if kind is CalendarKind.DATETIME:
            assert isinstance(value, datetime)
            return value - now
        if kind is CalendarKind.NAIVE_DATETIME:
            assert isinstance(value, datetime)
            return value - now.astimezone(UTC).replace(tzinfo=None)
        if kind is CalendarKind.DATE:
            assert isinstance(value, date)
            return datetime.combine(value, time()) - datetime.combine(now.date(), time())
        assert isinstance(value, time)
        if value.utcoffset() is not None:
            return datetime.combine(now.date(), value) - now
        return datetime.combine(now.date(), value) - now.replace(tzinfo=None)

    def render_token(
        self,
        directive: TokenDirective,
        value: date | time | datetime,
        kind: CalendarKind,
        locale: str,
    ) -> str:
        if directive.name != "relative":
            raise FormatError(f"unsupported directive {directive.raw!r}")
        return relative_phrase(locale, self._delta(value, kind))
