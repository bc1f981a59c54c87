"""Tests for locale resolution and Babel-backed names."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import pytest
from babel import Locale

from chronofmt.config.settings import reset_settings
from chronofmt.i18n.translator import (
    current_locale,
    get_locale,
    month_name,
    period_name,
    relative_phrase,
    use_locale,
    weekday_name,
)


class TestCurrentLocale:
    def test_default_is_english(self) -> None:
        assert current_locale() == "en"

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHRONOFMT_LOCALE__DEFAULT", "fr")
        reset_settings()
        assert current_locale() == "fr"

    def test_from_config_file(self, tmp_path: Path) -> None:
        (tmp_path / "chronofmt.toml").write_text('[locale]\ndefault = "de"\n')
        reset_settings()
        assert current_locale() == "de"

    def test_use_locale_scopes_override(self) -> None:
        with use_locale("fr") as code:
            assert code == "fr"
            assert current_locale() == "fr"
            with use_locale("de"):
                assert current_locale() == "de"
            assert current_locale() == "fr"
        assert current_locale() == "en"

    def test_use_locale_restores_after_error(self) -> None:
        with pytest.raises(RuntimeError):
            with use_locale("fr"):
                raise RuntimeError("boom")
        assert current_locale() == "en"

    def test_empty_code_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            with use_locale(""):
                pass


class TestGetLocale:
    def test_hyphenated_code(self) -> None:
        assert get_locale("pt-BR") == Locale("pt", "BR")

    def test_unknown_locale_falls_back(self) -> None:
        assert get_locale("xx_YY") == Locale("en")

    def test_configured_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHRONOFMT_LOCALE__FALLBACK", "fr")
        reset_settings()
        assert get_locale("zz") == Locale("fr")


class TestNames:
    def test_months(self) -> None:
        assert month_name("en", 1) == "January"
        assert month_name("en", 9, abbreviated=True) == "Sep"
        assert month_name("fr", 8) == "août"

    def test_weekdays_start_on_monday(self) -> None:
        assert weekday_name("en", 0) == "Monday"
        assert weekday_name("en", 6, abbreviated=True) == "Sun"
        assert weekday_name("de", 2) == "Mittwoch"

    def test_periods(self) -> None:
        assert period_name("en", 0).upper() == "AM"
        assert period_name("en", 11).upper() == "AM"
        assert period_name("en", 12).upper() == "PM"


class TestRelativePhrase:
    def test_direction(self) -> None:
        assert relative_phrase("en", timedelta(days=-3)) == "3 days ago"
        assert relative_phrase("en", timedelta(hours=2)) == "in 2 hours"

    def test_short_format_from_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHRONOFMT_RELATIVE__FORMAT", "short")
        reset_settings()
        phrase = relative_phrase("en", timedelta(hours=2))
        assert phrase.startswith("in 2 ")
        assert phrase != "in 2 hours"

    def test_granularity_from_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHRONOFMT_RELATIVE__GRANULARITY", "day")
        reset_settings()
        assert relative_phrase("en", timedelta(minutes=-5)) == "1 day ago"
