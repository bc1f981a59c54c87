"""FormatResult and FormatFailure: the contract of every non-raising call.

INVARIANT: Result-returning operations never raise for formatting
failures; they return ``FormatResult(ok=False, error=...)``. The raising
variants are derived from them through :func:`unwrap_or_raise` only.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chronofmt.domain.directives import Directive
from chronofmt.domain.errors import ErrorCode, FormatError, InvalidDateError


class FormatFailure(BaseModel):
    """Structured error payload within a FormatResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class FormatResult(BaseModel):
    """Tagged outcome of a tokenize, format or validate call.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"lformat"``).
        text: Rendered text for successful format calls.
        directives: Parsed directives for successful tokenize calls.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (dialect, locale, counts).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    text: str | None = None
    directives: tuple[Directive, ...] = ()
    error: FormatFailure | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls,
        op: str,
        *,
        text: str | None = None,
        directives: tuple[Any, ...] = (),
        meta: dict[str, Any] | None = None,
    ) -> FormatResult:
        return cls(ok=True, op=op, text=text, directives=directives, meta=meta)

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        **detail: Any,
    ) -> FormatResult:
        return cls(ok=False, op=op, error=FormatFailure(code=code, message=message, detail=detail))


def unwrap_or_raise(result: FormatResult) -> str:
    """Return the rendered text of *result* or raise its failure.

    ``invalid_date`` becomes :class:`InvalidDateError` with the message
    ``"invalid_date"``; every other code becomes :class:`FormatError`
    carrying the failure message unchanged.
    """
    if result.ok:
        return result.text if result.text is not None else ""
    error = result.error
    if error is None:
        raise FormatError(f"{result.op} failed without an error payload")
    if error.code == ErrorCode.INVALID_DATE:
        raise InvalidDateError(ErrorCode.INVALID_DATE.value)
    raise FormatError(str(error.message), code=error.code)
