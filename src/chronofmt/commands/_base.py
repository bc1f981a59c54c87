"""Click classes shared by the chronofmt commands.

A command declared with ``examples=...`` gains an eager ``--examples``
flag that prints the examples and exits before arguments are checked.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesOption(click.Option):
    """Eager ``--examples`` flag bound to one command's example text."""

    def __init__(self, examples: str) -> None:
        super().__init__(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=self._show,
            help="Show usage examples and exit.",
        )
        self.examples = examples

    def _show(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
        ctx.exit(0)


class ChronoCommand(click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples:
            self.params.append(ExamplesOption(examples))


class ChronoGroup(click.Group):
    command_class = ChronoCommand
