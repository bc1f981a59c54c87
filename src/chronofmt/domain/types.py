"""Dialect names, calendar kinds and the failed-input sentinel."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class DialectName(StrEnum):
    """Built-in formatting dialects.

    ``"strftime"`` and ``"relative"`` are the reserved shorthand names;
    omitting a dialect selects ``DEFAULT``.
    """

    DEFAULT = "default"
    STRFTIME = "strftime"
    RELATIVE = "relative"


class CalendarKind(StrEnum):
    """The four native calendar value shapes."""

    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    NAIVE_DATETIME = "naive_datetime"


class FailedInput(BaseModel):
    """A value that is itself the outcome of an earlier failed computation.

    Passed in place of a calendar value, it is short-circuited by every
    formatting entry point instead of being rendered.
    """

    model_config = {"frozen": True}

    reason: str
    detail: dict[str, Any] = Field(default_factory=dict)

    def __str__(self) -> str:
        return self.reason
