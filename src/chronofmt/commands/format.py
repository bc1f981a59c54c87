"""Command: render a calendar value with a format string."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

import click

from chronofmt.commands._base import ChronoCommand

if TYPE_CHECKING:
    from chronofmt.commands._context import AppContext


def parse_value(text: str) -> object:
    """Turn a command-line VALUE into something the dispatcher accepts.

    ``now`` and ``today`` are the current UTC moment and date; digits are
    a Unix timestamp; ISO 8601 text keeps its UTC offset. Anything else is
    passed through and reported as an invalid date.
    """
    lowered = text.strip().lower()
    if lowered == "now":
        return datetime.now(UTC)
    if lowered == "today":
        return datetime.now(UTC).date()
    try:
        return int(lowered)
    except ValueError:
        pass
    try:
        if len(lowered) == 10:
            return date.fromisoformat(text.strip())
        return datetime.fromisoformat(text.strip())
    except ValueError:
        return text


@click.command(
    "format",
    cls=ChronoCommand,
    examples="""\
  chronofmt format 2024-03-05T14:07:09 "{YYYY}-{0M}-{0D} {h24}:{0m}"
  chronofmt format 2024-03-05 "%A %-d %B %Y" --dialect strftime --locale fr
  chronofmt format now "{relative}" --dialect relative
  chronofmt format 1700000000 "{ISO:Extended}\"""",
)
@click.argument("value")
@click.argument("format_string")
@click.option("-d", "--dialect", default=None, help="Dialect name (default, strftime, relative, or a plugin).")
@click.option("-l", "--locale", default=None, help="Locale code; defaults to the configured locale.")
@click.pass_obj
def format_cmd(
    app: AppContext,
    value: str,
    format_string: str,
    dialect: str | None,
    locale: str | None,
) -> None:
    """Render VALUE using FORMAT_STRING."""
    from chronofmt.formatting.dispatcher import lformat

    app.emit(lformat(parse_value(value), format_string, locale, dialect))
