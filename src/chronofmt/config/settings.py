"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``CHRONOFMT_*`` prefix (``CHRONOFMT_LOCALE__DEFAULT=fr``)
  3. TOML file: ``chronofmt.toml`` discovered via walk-up
  4. Code defaults: baked into the section models

The library reads one process-wide instance through :func:`get_settings`;
the CLI builds its own through :meth:`ChronoSettings.from_cli` and installs
it with :func:`set_settings`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from chronofmt.config.discovery import find_config
from chronofmt.config.models import LocaleConfig, PluginsConfig, RelativeConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``chronofmt.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise ValueError(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ChronoSettings(BaseSettings):
    """Unified settings for the library and the ``chronofmt`` CLI.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        locale: Default and fallback locale codes.
        relative: Options for relative-time phrasing.
        plugins: Whether entry-point dialect plugins are discovered.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CHRONOFMT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    locale: LocaleConfig = Field(default_factory=LocaleConfig)
    relative: RelativeConfig = Field(default_factory=RelativeConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> ChronoSettings:
        """Construct settings from a CLI invocation (or library defaults).

        Discovers ``chronofmt.toml`` via walk-up from *start* (or uses the
        explicit *config_path*) and merges *cli_flags* as highest-priority
        overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None


_lock = threading.Lock()
_settings: ChronoSettings | None = None


def get_settings() -> ChronoSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        with _lock:
            if _settings is None:
                _settings = ChronoSettings.from_cli()
    return _settings


def set_settings(settings: ChronoSettings | None) -> None:
    """Install *settings* as the process-wide instance (None clears it)."""
    global _settings
    with _lock:
        _settings = settings


def reset_settings() -> None:
    """Drop the cached settings so the next read reloads them."""
    set_settings(None)
