"""Tests for ChronoSettings: env vars, TOML source and the shared instance."""

from __future__ import annotations

from pathlib import Path

import pytest

from chronofmt.config.settings import ChronoSettings, get_settings, reset_settings, set_settings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = ChronoSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.locale.default == "en"
        assert settings.locale.fallback == "en"
        assert settings.relative.threshold == 0.85
        assert settings.relative.granularity == "second"
        assert settings.relative.format == "long"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ChronoSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "chronofmt.toml"
        toml.write_text('[locale]\ndefault = "fr"\n[relative]\nformat = "short"\n')
        settings = ChronoSettings.from_cli(start=tmp_path)
        assert settings.config_path == toml
        assert settings.locale.default == "fr"
        assert settings.locale.fallback == "en"
        assert settings.relative.format == "short"
        assert settings.relative.threshold == 0.85

    def test_walks_up_from_start(self, tmp_path: Path) -> None:
        (tmp_path / "chronofmt.toml").write_text('[locale]\ndefault = "de"\n')
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        assert ChronoSettings.from_cli(start=child).locale.default == "de"

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "chronofmt.toml").write_text("")
        assert ChronoSettings.from_cli(start=tmp_path).locale.default == "en"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "formats.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[locale]\ndefault = "es"\n')
        settings = ChronoSettings.from_cli(config_path=str(custom))
        assert settings.locale.default == "es"
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = ChronoSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "chronofmt.toml").write_text("[locale\n")
        with pytest.raises(ValueError, match="Invalid TOML"):
            ChronoSettings.from_cli(start=tmp_path)

    def test_invalid_value_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "chronofmt.toml").write_text("[relative]\nthreshold = 0\n")
        with pytest.raises(ValueError):
            ChronoSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "chronofmt.toml").write_text('[locale]\ndefault = "fr"\nfallback = "de"\n')
        monkeypatch.setenv("CHRONOFMT_LOCALE__DEFAULT", "it")
        settings = ChronoSettings.from_cli(start=tmp_path)
        assert settings.locale.default == "it"
        assert settings.locale.fallback == "de"

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHRONOFMT_VERBOSE", "false")
        settings = ChronoSettings.from_cli(start=tmp_path, verbose=True)
        assert settings.verbose is True

    def test_plugins_toggle_from_env(self, tmp_path: Path) -> None:
        assert ChronoSettings.from_cli(start=tmp_path).plugins.enabled is False


class TestSharedInstance:
    def test_cached_until_reset(self) -> None:
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first

    def test_set_settings(self, tmp_path: Path) -> None:
        custom = ChronoSettings.from_cli(start=tmp_path, verbose=True)
        set_settings(custom)
        assert get_settings() is custom
