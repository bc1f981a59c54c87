"""Dispatcher: routes formatting calls to a dialect.

Every entry point runs the same steps, in order:

1. A :class:`FailedInput` short-circuits before anything else.
2. The dialect identifier is resolved (never fails; see
   :func:`resolve_dialect`).
3. Non-native calendar input is converted to a naive datetime.
4. A missing locale is replaced by the current default locale.
5. The dialect's ``lformat`` is called and its result returned untouched.

The ``*_or_raise`` variants are the same calls passed through
:func:`unwrap_or_raise`.

INVARIANT: result-returning entry points never raise for formatting
failures, and never re-wrap an error produced by a lower layer.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from chronofmt.dialects.registry import RESERVED_NAMES, builtin_dialect, lookup_dialect
from chronofmt.domain.directives import count_tokens
from chronofmt.domain.errors import ErrorCode, FormatError
from chronofmt.domain.types import DialectName, FailedInput
from chronofmt.formatting.normalize import calendar_kind, to_naive_datetime
from chronofmt.formatting.result import FormatFailure, FormatResult, unwrap_or_raise
from chronofmt.i18n.translator import current_locale

logger = logging.getLogger(__name__)

NO_DIRECTIVES_MESSAGE = "There were no formatting directives in the provided string."


@dataclass(frozen=True)
class ResolvedDialect:
    """A dialect identifier mapped to its implementation handle.

    For custom dialects the handle is whatever the caller passed: a
    Formatter instance or class, a duck-typed object, or a registry name.
    It is only checked when used.
    """

    name: str
    handle: Any
    builtin: bool = False


def resolve_dialect(dialect: Any = None) -> ResolvedDialect:
    """Map a dialect identifier to a :class:`ResolvedDialect`.

    ``None`` selects the default dialect; ``"strftime"`` and ``"relative"``
    (and ``"default"``) select the built-ins. Anything else becomes a
    custom handle.
    """
    if dialect is None:
        return ResolvedDialect(DialectName.DEFAULT.value, builtin_dialect(DialectName.DEFAULT), True)
    if isinstance(dialect, str) and dialect in RESERVED_NAMES:
        name = DialectName(dialect)
        return ResolvedDialect(name.value, builtin_dialect(name), True)
    if isinstance(dialect, str):
        return ResolvedDialect(dialect, dialect)
    if inspect.isclass(dialect):
        return ResolvedDialect(dialect.__name__, dialect)
    return ResolvedDialect(getattr(dialect, "name", None) or type(dialect).__name__, dialect)


def _implements_contract(handle: Any) -> bool:
    return callable(getattr(handle, "tokenize", None)) and callable(getattr(handle, "lformat", None))


def _materialize(resolved: ResolvedDialect, op: str) -> Any | FormatResult:
    """Return a usable implementation, or an ``unresolved_dialect`` failure."""
    handle = resolved.handle
    if isinstance(handle, str):
        handle = lookup_dialect(handle)
        if handle is None:
            return FormatResult.failure(
                op,
                ErrorCode.UNRESOLVED_DIALECT,
                f"no dialect named {resolved.name!r} is registered",
                dialect=resolved.name,
            )
    elif inspect.isclass(handle) and _implements_contract(handle):
        try:
            handle = handle()
        except Exception as exc:
            logger.warning("Failed to instantiate dialect %s", resolved.name, exc_info=True)
            return FormatResult.failure(
                op,
                ErrorCode.UNRESOLVED_DIALECT,
                f"dialect {resolved.name!r} cannot be instantiated: {exc}",
                dialect=resolved.name,
            )
    if not _implements_contract(handle) or inspect.isclass(handle):
        return FormatResult.failure(
            op,
            ErrorCode.UNRESOLVED_DIALECT,
            f"{resolved.name!r} does not implement the formatter contract",
            dialect=resolved.name,
        )
    return handle


def _contract_violation(op: str, resolved: ResolvedDialect, returned: object) -> FormatResult:
    return FormatResult.failure(
        op,
        ErrorCode.UNRESOLVED_DIALECT,
        f"dialect {resolved.name!r} returned {type(returned).__name__}, expected FormatResult",
        dialect=resolved.name,
    )


def _invoke(op: str, resolved: ResolvedDialect, call: Callable[[], Any]) -> FormatResult:
    """Run a dialect call, turning anything it raises into a failure result.

    A ``TypeError`` means the handle does not accept the contract's
    arguments, so it is reported as ``unresolved_dialect``.
    """
    try:
        result = call()
    except FormatError as exc:
        return FormatResult.failure(op, exc.code, exc.message, dialect=resolved.name)
    except TypeError as exc:
        return FormatResult.failure(
            op,
            ErrorCode.UNRESOLVED_DIALECT,
            f"dialect {resolved.name!r} does not implement the formatter contract: {exc}",
            dialect=resolved.name,
        )
    except Exception as exc:
        logger.warning("Dialect %s failed during %s", resolved.name, op, exc_info=True)
        return FormatResult.failure(op, ErrorCode.FORMAT, str(exc), dialect=resolved.name)
    if not isinstance(result, FormatResult):
        return _contract_violation(op, resolved, result)
    return result


def _failed_input(op: str, failed: FailedInput) -> FormatResult:
    error = FormatFailure(code=ErrorCode.INVALID_DATE, message=failed.reason, detail=dict(failed.detail))
    return FormatResult(ok=False, op=op, error=error)


def lformat(
    value: Any,
    format_string: str,
    locale: str | None = None,
    dialect: Any = None,
) -> FormatResult:
    """Render *value* with *format_string*, using *locale* translations.

    A missing or empty *locale* falls back to :func:`current_locale`.
    If *dialect* is not provided, the default ``{token}`` dialect is used.
    """
    if isinstance(value, FailedInput):
        return _failed_input("lformat", value)

    resolved = resolve_dialect(dialect)

    if calendar_kind(value) is None:
        converted = to_naive_datetime(value)
        if isinstance(converted, FailedInput):
            return _failed_input("lformat", converted)
        value = converted

    if not isinstance(format_string, str):
        return FormatResult.failure(
            "lformat",
            ErrorCode.FORMAT,
            f"format string must be text, got {type(format_string).__name__}",
        )

    locale = locale or current_locale()

    implementation = _materialize(resolved, "lformat")
    if isinstance(implementation, FormatResult):
        return implementation

    logger.debug("Formatting with dialect=%s locale=%s", resolved.name, locale)
    return _invoke("lformat", resolved, lambda: implementation.lformat(value, format_string, locale))


def format(value: Any, format_string: str, dialect: Any = None) -> FormatResult:  # noqa: A001
    """Render *value* with *format_string* in the current default locale."""
    return lformat(value, format_string, current_locale(), dialect)


def lformat_or_raise(
    value: Any,
    format_string: str,
    locale: str | None = None,
    dialect: Any = None,
) -> str:
    """Like :func:`lformat`, but return the text or raise.

    Raises:
        InvalidDateError: *value* is a failed input or not a calendar value.
        FormatError: the dialect could not tokenize or render.
    """
    return unwrap_or_raise(lformat(value, format_string, locale, dialect))


def format_or_raise(value: Any, format_string: str, dialect: Any = None) -> str:
    """Like :func:`format`, but return the text or raise."""
    return lformat_or_raise(value, format_string, current_locale(), dialect)


def tokenize(format_string: str, dialect: Any = None) -> FormatResult:
    """Parse *format_string* with *dialect* without rendering anything."""
    resolved = resolve_dialect(dialect)
    implementation = _materialize(resolved, "tokenize")
    if isinstance(implementation, FormatResult):
        return implementation
    return _invoke("tokenize", resolved, lambda: implementation.tokenize(format_string))


def validate(format_string: str, dialect: Any = None) -> FormatResult:
    """Check that *format_string* parses and contains at least one token.

    Tokenizer errors are returned unchanged. A string made only of literal
    text is rejected with ``no_directives``.
    """
    tokenized = tokenize(format_string, dialect)
    if not tokenized.ok:
        return tokenized

    directives = tokenized.directives
    tokens = count_tokens(directives)
    if not directives or tokens == 0:
        return FormatResult.failure("validate", ErrorCode.NO_DIRECTIVES, NO_DIRECTIVES_MESSAGE)
    return FormatResult.success(
        "validate",
        meta={"directives": len(directives), "tokens": tokens},
    )
