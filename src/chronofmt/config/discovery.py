"""Locate ``chronofmt.toml``.

``CHRONOFMT_CONFIG`` names the file outright. Otherwise the nearest
``chronofmt.toml`` in the start directory or one of its ancestors wins.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "chronofmt.toml"
CONFIG_ENV_VAR = "CHRONOFMT_CONFIG"


def _candidates(start: Path) -> Iterator[Path]:
    directory = start.resolve()
    for folder in (directory, *directory.parents):
        yield folder / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        if path.is_file():
            return path
        # An explicit override never falls back to discovery.
        logger.warning("%s=%s is not a file; using built-in defaults", CONFIG_ENV_VAR, override)
        return None
    return next((path for path in _candidates(start or Path.cwd()) if path.is_file()), None)
