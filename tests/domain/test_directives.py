"""Tests for the directive model, padding and width specs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from chronofmt.domain.directives import (
    LiteralDirective,
    Padding,
    TokenDirective,
    WidthSpec,
    count_tokens,
    pad_char,
    reconstruct,
    width_spec,
)


class TestPadChar:
    @pytest.mark.parametrize(
        "padding,expected",
        [(Padding.ZEROES, "0"), (Padding.SPACES, " "), (Padding.NONE, "")],
    )
    def test_fill_character(self, padding: Padding, expected: str) -> None:
        assert pad_char(padding) == expected

    def test_accepts_string_value(self) -> None:
        assert pad_char("zeroes") == "0"  # type: ignore[arg-type]

    def test_unknown_padding_rejected(self) -> None:
        with pytest.raises(ValueError):
            pad_char("tabs")  # type: ignore[arg-type]


class TestWidthSpec:
    def test_pair_and_range_forms_are_equal(self) -> None:
        assert width_spec(2, 4) == width_spec(range(2, 5))
        assert width_spec(2, 4) == WidthSpec(min=2, max=4)

    def test_range_step_is_ignored(self) -> None:
        assert width_spec(range(2, 5, 2)) == WidthSpec(min=2, max=4)

    def test_single_width_range(self) -> None:
        assert width_spec(range(1, 2)) == WidthSpec(min=1, max=1)

    def test_unbounded(self) -> None:
        spec = width_spec(4)
        assert spec.min == 4
        assert spec.max is None
        assert not spec.bounded

    def test_between_constructor(self) -> None:
        spec = WidthSpec.between(6, 6)
        assert spec.bounded
        assert (spec.min, spec.max) == (6, 6)

    def test_max_below_min_rejected(self) -> None:
        with pytest.raises(ValidationError, match="smaller than min"):
            width_spec(5, 3)

    def test_negative_width_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WidthSpec(min=-1)

    def test_frozen(self) -> None:
        spec = WidthSpec(min=1, max=2)
        with pytest.raises(ValidationError):
            spec.min = 3  # type: ignore[misc]


class TestDirectives:
    def test_literal_raw_defaults_to_value(self) -> None:
        literal = LiteralDirective(value="-")
        assert literal.raw == "-"
        assert literal.kind == "literal"

    def test_literal_keeps_escaped_raw(self) -> None:
        literal = LiteralDirective(value="{", raw="{{")
        assert literal.value == "{"
        assert literal.raw == "{{"

    def test_token_defaults(self) -> None:
        token = TokenDirective(name="year4", raw="{YYYY}")
        assert token.kind == "token"
        assert token.padding is Padding.NONE
        assert token.width == WidthSpec()

    def test_count_tokens(self) -> None:
        directives = [
            TokenDirective(name="year4", raw="{YYYY}"),
            LiteralDirective(value="-"),
            TokenDirective(name="month", raw="{M}"),
        ]
        assert count_tokens(directives) == 2
        assert count_tokens([LiteralDirective(value="plain")]) == 0
        assert count_tokens([]) == 0

    def test_reconstruct_joins_raw_text(self) -> None:
        directives = [
            LiteralDirective(value="{", raw="{{"),
            TokenDirective(name="year4", raw="{YYYY}"),
            LiteralDirective(value="}", raw="}}"),
        ]
        assert reconstruct(directives) == "{{{YYYY}}}"
