"""Subcommand modules for chronofmt.

Provides register_commands() which uses deferred imports to keep
``chronofmt --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from chronofmt.commands.dialects import dialects
    from chronofmt.commands.format import format_cmd
    from chronofmt.commands.tokenize import tokenize_cmd
    from chronofmt.commands.validate import validate_cmd

    cli.add_command(format_cmd)
    cli.add_command(validate_cmd)
    cli.add_command(tokenize_cmd)
    cli.add_command(dialects)
