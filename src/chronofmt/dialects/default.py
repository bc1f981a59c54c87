"""Default dialect: brace-delimited tokens such as ``{YYYY}-{0M}-{0D}``.

Numeric tokens accept a padding prefix: ``{0M}`` pads with zeroes and
``{_M}`` with spaces, both to the token's natural width. Unprefixed year
tokens are zero padded; other unprefixed numerics are not padded.
``{{`` and ``}}`` are literal braces.
"""

from __future__ import annotations

from typing import ClassVar

from chronofmt.domain.directives import LiteralDirective, Padding, TokenDirective, WidthSpec
from chronofmt.domain.errors import FormatError
from chronofmt.formatting.contract import TokenizingFormatter
from chronofmt.formatting.tokens import NUMERIC_WIDTHS, numeric_width

# token text -> canonical token name
TOKENS: dict[str, str] = {
    "YYYY": "year4",
    "YY": "year2",
    "C": "century",
    "WYYYY": "iso_year4",
    "WYY": "iso_year2",
    "M": "month",
    "Mshort": "mshort",
    "Mfull": "mfull",
    "D": "day",
    "Dord": "oday",
    "Wiso": "iso_week",
    "WDmon": "wday_mon",
    "WDsun": "wday_sun",
    "WDshort": "wdshort",
    "WDfull": "wdfull",
    "h24": "hour24",
    "h12": "hour12",
    "m": "min",
    "s": "sec",
    "ss": "sec_fractional",
    "s-epoch": "sec_epoch",
    "am": "am",
    "AM": "AM",
    "Zname": "zname",
    "Z": "zoffs",
    "Z:": "zoffs_colon",
    "Z::": "zoffs_sec",
    "ISO:Extended": "iso_8601_extended",
    "ISO:Basic": "iso_8601_basic",
    "ISOdate": "iso_date",
    "ISOtime": "iso_time",
}

_ZERO_PADDED: frozenset[str] = frozenset(
    {"year4", "year2", "century", "iso_year4", "iso_year2", "sec_fractional"}
)

_PAD_PREFIXES: dict[str, Padding] = {"0": Padding.ZEROES, "_": Padding.SPACES}


def _token(body: str, raw: str, position: int) -> TokenDirective:
    name = TOKENS.get(body)
    padding: Padding | None = None
    if name is None and body[:1] in _PAD_PREFIXES:
        name = TOKENS.get(body[1:])
        padding = _PAD_PREFIXES[body[0]]
        if name is not None and name not in NUMERIC_WIDTHS:
            raise FormatError(f"padding prefix is not allowed on {raw!r} at position {position}")
    if name is None:
        raise FormatError(f"unsupported directive {raw!r} at position {position}")

    if name not in NUMERIC_WIDTHS:
        return TokenDirective(name=name, raw=raw, padding=Padding.NONE, width=WidthSpec())
    if padding is None:
        padding = Padding.ZEROES if name in _ZERO_PADDED else Padding.NONE
    return TokenDirective(name=name, raw=raw, padding=padding, width=numeric_width(name, padding))


class DefaultFormatter(TokenizingFormatter):
    """The default ``{token}`` formatting dialect."""

    name: ClassVar[str] = "default"

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
            char = format_string[i]
            pair = format_string[i : i + 2]
            if pair in ("{{", "}}"):
                literal.append(char)
                literal_raw.append(pair)
                i += 2
                continue
            if char == "}":
                raise FormatError(f"unexpected '}}' at position {i}")
            if char != "{":
                literal.append(char)
                literal_raw.append(char)
                i += 1
                continue

            end = format_string.find("}", i + 1)
            if end == -1:
                raise FormatError(f"unclosed directive starting at position {i}")
            raw = format_string[i : end + 1]
            flush()
            directives.append(_token(format_string[i + 1 : end], raw, i))
            i = end + 1

        flush()
        return directives
