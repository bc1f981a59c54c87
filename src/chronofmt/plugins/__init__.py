"""Plugin system: pluggy hook specifications and dialect discovery."""

from __future__ import annotations

import pluggy

hookimpl = pluggy.HookimplMarker("chronofmt")
