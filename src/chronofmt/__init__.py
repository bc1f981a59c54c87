"""chronofmt public API.

Keep this surface small: users should mostly interact with the dispatcher
functions re-exported here.
"""

from __future__ import annotations

__version__ = "0.4.0"

from chronofmt.domain.directives import (
    LiteralDirective,
    Padding,
    TokenDirective,
    WidthSpec,
    pad_char,
    width_spec,
)
from chronofmt.domain.errors import ChronofmtError, FormatError, InvalidDateError
from chronofmt.domain.types import DialectName, FailedInput
from chronofmt.formatting.contract import Formatter, TokenizingFormatter
from chronofmt.formatting.dispatcher import (
    format,
    format_or_raise,
    lformat,
    lformat_or_raise,
    resolve_dialect,
    tokenize,
    validate,
)
from chronofmt.formatting.result import FormatFailure, FormatResult, unwrap_or_raise
from chronofmt.i18n.translator import current_locale, use_locale

__all__ = [
    "ChronofmtError",
    "DialectName",
    "FailedInput",
    "FormatError",
    "FormatFailure",
    "FormatResult",
    "Formatter",
    "InvalidDateError",
    "LiteralDirective",
    "Padding",
    "TokenDirective",
    "TokenizingFormatter",
    "WidthSpec",
    "__version__",
    "current_locale",
    "format",
    "format_or_raise",
    "lformat",
    "lformat_or_raise",
    "pad_char",
    "resolve_dialect",
    "tokenize",
    "unwrap_or_raise",
    "use_locale",
    "validate",
    "width_spec",
]
