"""Formatter ABC: the contract every formatting dialect implements.

A dialect parses its own format-string grammar (``tokenize``) and renders
native calendar values with an explicit locale (``lformat``). The
current-locale and raising variants are derived here once, so dialects
never duplicate them.

Custom dialects may subclass :class:`Formatter` or simply expose callable
``tokenize`` and ``lformat`` attributes; the dispatcher accepts both.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime, time
from typing import TYPE_CHECKING, ClassVar

from chronofmt.domain.directives import LiteralDirective, TokenDirective
from chronofmt.domain.errors import ErrorCode, FormatError
from chronofmt.formatting.normalize import calendar_kind
from chronofmt.formatting.result import FormatResult, unwrap_or_raise
from chronofmt.formatting.tokens import render_token
from chronofmt.i18n.translator import current_locale

if TYPE_CHECKING:
    from chronofmt.domain.types import CalendarKind

CalendarValue = date | time | datetime


class Formatter(ABC):
    """Abstract base class for formatting dialects."""

    name: ClassVar[str] = "custom"

    @abstractmethod
    def tokenize(self, format_string: str) -> FormatResult:
        """Parse *format_string* into ``FormatResult.directives``.

        Pure: no locale or calendar value is involved.
        """
        ...

    @abstractmethod
    def lformat(self, value: CalendarValue, format_string: str, locale: str) -> FormatResult:
        """Render *value* with *format_string* using *locale* translations."""
        ...

    def format(self, value: CalendarValue, format_string: str) -> FormatResult:
        """Render *value* with the current default locale."""
        return self.lformat(value, format_string, current_locale())

    def format_or_raise(self, value: CalendarValue, format_string: str) -> str:
        """Like :meth:`format`, returning the text or raising on failure."""
        return unwrap_or_raise(self.format(value, format_string))

    def lformat_or_raise(self, value: CalendarValue, format_string: str, locale: str) -> str:
        """Like :meth:`lformat`, returning the text or raising on failure."""
        return unwrap_or_raise(self.lformat(value, format_string, locale))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} dialect={self.name!r}>"


class TokenizingFormatter(Formatter):
    """Base for dialects that render a directive sequence token by token.

    Subclasses implement :meth:`parse` (raising :class:`FormatError` on bad
    input); token rendering defaults to the shared catalog in
    :mod:`chronofmt.formatting.tokens`. Raised ``FormatError``s are turned
    into failure results here.
    """

    @abstractmethod
    def parse(self, format_string: str) -> list[LiteralDirective | TokenDirective]:
        """Split *format_string* into directives or raise FormatError."""
        ...

    def render_token(
        self,
        directive: TokenDirective,
        value: CalendarValue,
        kind: CalendarKind,
        locale: str,
    ) -> str:
        """Render one token directive or raise FormatError."""
        return render_token(directive, value, kind, locale)

    def tokenize(self, format_string: str) -> FormatResult:
        if not isinstance(format_string, str):
            return FormatResult.failure(
                "tokenize",
                ErrorCode.FORMAT,
                f"format string must be text, got {type(format_string).__name__}",
            )
        try:
            directives = self.parse(format_string)
        except FormatError as exc:
            return FormatResult.failure("tokenize", exc.code, exc.message, dialect=self.name)
        return FormatResult.success("tokenize", directives=tuple(directives), meta={"dialect": self.name})

    def lformat(self, value: CalendarValue, format_string: str, locale: str) -> FormatResult:
        kind = calendar_kind(value)
        if kind is None:
            return FormatResult.failure("lformat", ErrorCode.INVALID_DATE, "invalid_date", input=repr(value))

        tokenized = self.tokenize(format_string)
        if not tokenized.ok:
            return tokenized.model_copy(update={"op": "lformat"})

        parts: list[str] = []
        try:
            for directive in tokenized.directives:
                if isinstance(directive, LiteralDirective):
                    parts.append(directive.value)
                else:
                    parts.append(self.render_token(directive, value, kind, locale))
        except FormatError as exc:
            return FormatResult.failure("lformat", exc.code, exc.message, dialect=self.name)

        return FormatResult.success(
            "lformat",
            text="".join(parts),
            meta={"dialect": self.name, "locale": locale},
        )
