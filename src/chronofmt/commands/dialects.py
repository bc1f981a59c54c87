"""Command: list available dialects."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronofmt.commands._base import ChronoCommand

if TYPE_CHECKING:
    from chronofmt.commands._context import AppContext


@click.command("dialects", cls=ChronoCommand)
@click.pass_obj
def dialects(app: AppContext) -> None:
    """List built-in and plugin dialects."""
    from chronofmt.dialects.registry import RESERVED_NAMES, ensure_plugin_dialects, list_dialects
    from chronofmt.formatting.result import FormatResult

    ensure_plugin_dialects()
    names = list_dialects()
    app.emit(
        FormatResult.success(
            "dialects",
            meta={"dialects": names, "builtin": sorted(RESERVED_NAMES)},
        )
    )
