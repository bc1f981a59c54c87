"""Tests for FormatResult and the raising bridge."""

from __future__ import annotations

import pytest

from chronofmt.domain.directives import LiteralDirective
from chronofmt.domain.errors import ErrorCode, FormatError, InvalidDateError
from chronofmt.formatting.result import FormatResult, unwrap_or_raise


class TestFormatResult:
    def test_success(self) -> None:
        result = FormatResult.success("lformat", text="2024", meta={"dialect": "default"})
        assert result.ok
        assert result.text == "2024"
        assert result.error is None
        assert result.directives == ()

    def test_success_with_directives(self) -> None:
        result = FormatResult.success("tokenize", directives=(LiteralDirective(value="x"),))
        assert result.directives[0].raw == "x"

    def test_failure_collects_detail(self) -> None:
        result = FormatResult.failure("lformat", ErrorCode.FORMAT, "bad", dialect="strftime")
        assert not result.ok
        assert result.text is None
        assert result.error is not None
        assert result.error.code is ErrorCode.FORMAT
        assert result.error.message == "bad"
        assert result.error.detail == {"dialect": "strftime"}

    def test_json_round_trip_keeps_directive_kinds(self) -> None:
        result = FormatResult.success("tokenize", directives=(LiteralDirective(value="{", raw="{{"),))
        restored = FormatResult.model_validate_json(result.model_dump_json())
        assert restored == result


class TestUnwrapOrRaise:
    def test_success_returns_text(self) -> None:
        assert unwrap_or_raise(FormatResult.success("lformat", text="ok")) == "ok"

    def test_success_without_text_returns_empty(self) -> None:
        assert unwrap_or_raise(FormatResult.success("validate")) == ""

    def test_invalid_date_raises_argument_error(self) -> None:
        result = FormatResult.failure("lformat", ErrorCode.INVALID_DATE, "boom")
        with pytest.raises(InvalidDateError) as excinfo:
            unwrap_or_raise(result)
        assert str(excinfo.value) == "invalid_date"

    @pytest.mark.parametrize(
        "code",
        [ErrorCode.FORMAT, ErrorCode.NO_DIRECTIVES, ErrorCode.UNRESOLVED_DIALECT],
    )
    def test_other_codes_raise_format_error_with_message(self, code: ErrorCode) -> None:
        result = FormatResult.failure("lformat", code, "the reason")
        with pytest.raises(FormatError) as excinfo:
            unwrap_or_raise(result)
        assert excinfo.value.message == "the reason"
        assert excinfo.value.code is code

    def test_failure_without_payload(self) -> None:
        with pytest.raises(FormatError, match="without an error payload"):
            unwrap_or_raise(FormatResult(ok=False, op="lformat"))
