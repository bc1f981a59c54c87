"""Error codes and the exceptions raised by the ``*_or_raise`` entry points.

Result-returning calls never raise these; they report an :class:`ErrorCode`
inside a ``FormatResult`` instead.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Kinds of failure a formatting operation can report."""

    INVALID_DATE = "invalid_date"
    FORMAT = "format"
    NO_DIRECTIVES = "no_directives"
    UNRESOLVED_DIALECT = "unresolved_dialect"


class ChronofmtError(Exception):
    """Base error."""


class InvalidDateError(ChronofmtError, ValueError):
    """Raised when the value to format is not a usable calendar value."""

    code = ErrorCode.INVALID_DATE


class FormatError(ChronofmtError):
    """Raised when a format string cannot be tokenized or rendered."""

    def __init__(self, message: str, *, code: ErrorCode = ErrorCode.FORMAT) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
