"""Command: check a format string for a dialect."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronofmt.commands._base import ChronoCommand

if TYPE_CHECKING:
    from chronofmt.commands._context import AppContext


@click.command(
    "validate",
    cls=ChronoCommand,
    examples="""\
  chronofmt validate "{YYYY}-{0M}-{0D}"
  chronofmt validate "%Y-%m-%d" --dialect strftime
  chronofmt --json validate "no tokens here\"""",
)
@click.argument("format_string")
@click.option("-d", "--dialect", default=None, help="Dialect name.")
@click.pass_obj
def validate_cmd(app: AppContext, format_string: str, dialect: str | None) -> None:
    """Check that FORMAT_STRING parses and contains at least one directive."""
    from chronofmt.formatting.dispatcher import validate

    app.emit(validate(format_string, dialect))
