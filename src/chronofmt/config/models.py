"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, chronofmt.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class LocaleConfig(BaseModel):
    """[locale] section."""

    model_config = {"frozen": True}

    default: str = Field(default="en", min_length=1)
    fallback: str = Field(default="en", min_length=1)


class RelativeConfig(BaseModel):
    """[relative] section: passed to Babel's ``format_timedelta``."""

    model_config = {"frozen": True}

    threshold: float = Field(default=0.85, gt=0)
    granularity: Literal["year", "month", "week", "day", "hour", "minute", "second"] = "second"
    format: Literal["narrow", "short", "long"] = "long"


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
