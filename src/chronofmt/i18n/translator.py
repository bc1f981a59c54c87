"""Locale resolution and Babel-backed translations.

The default locale comes from configuration (``[locale] default``) unless a
caller scopes an override with :func:`use_locale`. The override lives in a
``ContextVar``, so concurrent threads and tasks never see each other's
locale. Locales Babel does not know fall back to ``[locale] fallback``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import timedelta
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from babel.dates import format_timedelta, get_day_names, get_month_names, get_period_names

from chronofmt.config.settings import get_settings

logger = logging.getLogger(__name__)

_locale_override: ContextVar[str | None] = ContextVar("chronofmt_locale", default=None)


def current_locale() -> str:
    """Return the locale code used when a caller does not pass one."""
    override = _locale_override.get()
    if override:
        return override
    return get_settings().locale.default


@contextmanager
def use_locale(code: str) -> Iterator[str]:
    """Make *code* the current locale for the enclosed block."""
    if not code:
        raise ValueError("locale code must not be empty")
    token = _locale_override.set(code)
    try:
        yield code
    finally:
        _locale_override.reset(token)


@lru_cache(maxsize=64)
def _parse(code: str, fallback: str) -> Locale:
    try:
        return Locale.parse(code.replace("-", "_"))
    except (UnknownLocaleError, ValueError):
        logger.debug("No translations for locale %r, using %r", code, fallback)
        return Locale.parse(fallback.replace("-", "_"))


def get_locale(code: str) -> Locale:
    """Return the Babel locale for *code*, or the fallback locale."""
    return _parse(code, get_settings().locale.fallback)


def month_name(code: str, month: int, *, abbreviated: bool = False) -> str:
    width = "abbreviated" if abbreviated else "wide"
    return get_month_names(width, locale=get_locale(code))[month]


def weekday_name(code: str, weekday: int, *, abbreviated: bool = False) -> str:
    """Name of *weekday* (0 = Monday, as ``date.weekday()``)."""
    width = "abbreviated" if abbreviated else "wide"
    return get_day_names(width, locale=get_locale(code))[weekday]


def period_name(code: str, hour: int) -> str:
    """The AM/PM marker for *hour* (0-23)."""
    return get_period_names(locale=get_locale(code))["am" if hour < 12 else "pm"]


def relative_phrase(code: str, delta: timedelta) -> str:
    """Phrase *delta* relative to now, e.g. ``"3 days ago"`` or ``"in 2 hours"``.

    Negative deltas lie in the past.
    """
    options = get_settings().relative
    return format_timedelta(
        delta,
        granularity=options.granularity,
        threshold=options.threshold,
        add_direction=True,
        format=options.format,
        locale=get_locale(code),
    )
