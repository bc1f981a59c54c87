"""Strftime dialect: ``%``-directives as in C's ``strftime(3)``.

Syntax: ``%[flag][width]conversion``. Flags: ``-`` no padding, ``0`` zero
padding, ``_`` space padding. A width sets the minimum field width. ``%%``
is a literal percent sign.
"""

from __future__ import annotations

from typing import ClassVar

from chronofmt.domain.directives import LiteralDirective, Padding, TokenDirective, WidthSpec
from chronofmt.domain.errors import FormatError
from chronofmt.formatting.contract import TokenizingFormatter
from chronofmt.formatting.tokens import NUMERIC_WIDTHS, numeric_width

# conversion -> (canonical token name, default padding)
CONVERSIONS: dict[str, tuple[str, Padding]] = {
    "Y": ("year4", Padding.ZEROES),
    "y": ("year2", Padding.ZEROES),
    "C": ("century", Padding.ZEROES),
    "G": ("iso_year4", Padding.ZEROES),
    "g": ("iso_year2", Padding.ZEROES),
    "m": ("month", Padding.ZEROES),
    "B": ("mfull", Padding.NONE),
    "b": ("mshort", Padding.NONE),
    "h": ("mshort", Padding.NONE),
    "d": ("day", Padding.ZEROES),
    "e": ("day", Padding.SPACES),
    "j": ("oday", Padding.ZEROES),
    "H": ("hour24", Padding.ZEROES),
    "k": ("hour24", Padding.SPACES),
    "I": ("hour12", Padding.ZEROES),
    "l": ("hour12", Padding.SPACES),
    "M": ("min", Padding.ZEROES),
    "S": ("sec", Padding.ZEROES),
    "f": ("sec_fractional", Padding.ZEROES),
    "s": ("sec_epoch", Padding.NONE),
    "p": ("AM", Padding.NONE),
    "P": ("am", Padding.NONE),
    "a": ("wdshort", Padding.NONE),
    "A": ("wdfull", Padding.NONE),
    "u": ("wday_mon", Padding.NONE),
    "w": ("wday_sun", Padding.NONE),
    "V": ("iso_week", Padding.ZEROES),
    "Z": ("zname", Padding.NONE),
    "z": ("zoffs", Padding.NONE),
    "F": ("iso_date", Padding.NONE),
    "T": ("iso_time", Padding.NONE),
}

_FLAGS: dict[str, Padding] = {"-": Padding.NONE, "0": Padding.ZEROES, "_": Padding.SPACES}


def _directive(name: str, raw: str, padding: Padding, width: int | None) -> TokenDirective:
    if width is not None:
        return TokenDirective(name=name, raw=raw, padding=padding, width=WidthSpec(min=width, max=None))
    if name in NUMERIC_WIDTHS:
        return TokenDirective(name=name, raw=raw, padding=padding, width=numeric_width(name, padding))
    return TokenDirective(name=name, raw=raw, padding=padding, width=WidthSpec())


class StrftimeFormatter(TokenizingFormatter):
    """The ``%``-directive formatting dialect."""

    name: ClassVar[str] = "strftime"

    def parse(self, format_string: str) -> list[LiteralDirective | TokenDirective]:
        directives: list[LiteralDirective | TokenDirective] = []
        literal: list[str] = []
        literal_raw: list[str] = []

        def flush() -> None:
            if literal_raw:
                directives.append(LiteralDirective(value="".join(literal), raw="".join(literal_raw)))
                literal.clear()
                literal_raw.clear()

        i = 0
        length = len(format_string)
        while i < length:
            if format_string[i] != "%":
                literal.append(format_string[i])
                literal_raw.append(format_string[i])
                i += 1
                continue

            start = i
            i += 1
            if i < length and format_string[i] == "%":
                literal.append("%")
                literal_raw.append("%%")
                i += 1
                continue

            flag: Padding | None = None
            if i < length and format_string[i] in _FLAGS:
                flag = _FLAGS[format_string[i]]
                i += 1
            digits_start = i
            while i < length and format_string[i].isdigit():
                i += 1
            width = int(format_string[digits_start:i]) if i > digits_start else None

            if i >= length:
                raise FormatError(f"incomplete directive {format_string[start:]!r} at end of format string")
            conversion = format_string[i]
            i += 1
            raw = format_string[start:i]
            if conversion not in CONVERSIONS:
                raise FormatError(f"unsupported directive {raw!r} at position {start}")

            name, default_padding = CONVERSIONS[conversion]
            if flag is not None:
                padding = flag
            elif width is not None and default_padding is Padding.NONE:
                padding = Padding.SPACES
            else:
                padding = default_padding
            flush()
            directives.append(_directive(name, raw, padding, width))

        flush()
        return directives
