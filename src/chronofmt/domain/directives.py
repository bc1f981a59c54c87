"""Directive model shared by every formatting dialect.

A tokenizer turns a format string into an ordered tuple of directives:
literal text, or a named token carrying its padding and width. Each
directive keeps the exact ``raw`` source text it was parsed from, so
joining the ``raw`` values of a tokenize result gives back the original
format string.

INVARIANT: directive tuples are built fresh per call and never mutated.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, model_validator


class Padding(StrEnum):
    """How a numeric token is padded up to its minimum width."""

    ZEROES = "zeroes"
    SPACES = "spaces"
    NONE = "none"


_PAD_CHARS: dict[Padding, str] = {
    Padding.ZEROES: "0",
    Padding.SPACES: " ",
    Padding.NONE: "",
}


def pad_char(padding: Padding) -> str:
    """Return the fill character for *padding* (empty for ``NONE``)."""
    return _PAD_CHARS[Padding(padding)]


class WidthSpec(BaseModel):
    """Inclusive width bounds for a rendered token; ``max=None`` is unbounded."""

    model_config = {"frozen": True}

    min: int = Field(default=0, ge=0)
    max: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> WidthSpec:
        if self.max is not None and self.max < self.min:
            msg = f"width max ({self.max}) is smaller than min ({self.min})"
            raise ValueError(msg)
        return self

    @classmethod
    def between(cls, min_width: int, max_width: int | None) -> WidthSpec:
        """Build from an explicit ``(min, max)`` pair."""
        return cls(min=min_width, max=max_width)

    @classmethod
    def from_range(cls, bounds: range) -> WidthSpec:
        """Build from a range literal.

        Ranges are half-open, so ``range(2, 5)`` covers widths 2 through 4.
        The step is accepted but has no effect on the bounds.
        """
        return cls(min=bounds.start, max=bounds.stop - 1)

    @property
    def bounded(self) -> bool:
        return self.max is not None


def width_spec(bounds: int | range, max_width: int | None = None) -> WidthSpec:
    """Normalize either width surface form into a :class:`WidthSpec`.

    ``width_spec(2, 4)`` and ``width_spec(range(2, 5))`` are equal.
    """
    if isinstance(bounds, range):
        return WidthSpec.from_range(bounds)
    return WidthSpec.between(bounds, max_width)


class LiteralDirective(BaseModel):
    """Text copied to the output unchanged.

    ``raw`` differs from ``value`` only for escapes (``{{`` renders ``{``).
    """

    model_config = {"frozen": True}

    kind: Literal["literal"] = "literal"
    value: str
    raw: str = ""

    @model_validator(mode="before")
    @classmethod
    def _default_raw(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("raw"):
            return {**data, "raw": data.get("value", "")}
        return data


class TokenDirective(BaseModel):
    """A named calendar component to render, e.g. ``year4`` or ``mfull``."""

    model_config = {"frozen": True}

    kind: Literal["token"] = "token"
    name: str
    raw: str
    padding: Padding = Padding.NONE
    width: WidthSpec = Field(default_factory=WidthSpec)


Directive = Annotated[LiteralDirective | TokenDirective, Field(discriminator="kind")]


def count_tokens(directives: Iterable[LiteralDirective | TokenDirective]) -> int:
    """Number of token (non-literal) directives in *directives*."""
    return sum(1 for d in directives if isinstance(d, TokenDirective))


def reconstruct(directives: Iterable[LiteralDirective | TokenDirective]) -> str:
    """Rebuild the source format string from a tokenize result."""
    return "".join(d.raw for d in directives)
