"""Command: show the directives a format string parses into."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronofmt.commands._base import ChronoCommand

if TYPE_CHECKING:
    from chronofmt.commands._context import AppContext


@click.command(
    "tokenize",
    cls=ChronoCommand,
    examples="""\
  chronofmt tokenize "{YYYY}-{0M}-{0D}"
  chronofmt --json tokenize "%-d %B" --dialect strftime""",
)
@click.argument("format_string")
@click.option("-d", "--dialect", default=None, help="Dialect name.")
@click.pass_obj
def tokenize_cmd(app: AppContext, format_string: str, dialect: str | None) -> None:
    """Parse FORMAT_STRING and list its directives."""
    from chronofmt.formatting.dispatcher import tokenize

    app.emit(tokenize(format_string, dialect))
