"""Pluggy hook specifications for chronofmt extensions.

One setup-time hook lets installed packages contribute formatting dialects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from chronofmt.formatting.contract import Formatter

hookspec = pluggy.HookspecMarker("chronofmt")


class ChronofmtHookSpec:
    """Hook specifications for the chronofmt plugin system."""

    @hookspec
    def register_dialects(self) -> dict[str, Formatter | type[Formatter]] | None:
        """Return dialect name -> Formatter (instance or class) mappings."""
