"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Installs the CLI settings as the process-wide
settings and centralizes result emission (stdout/stderr + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronofmt.config.logging import configure_logging
from chronofmt.config.settings import set_settings
from chronofmt.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from chronofmt.config.settings import ChronoSettings
    from chronofmt.formatting.result import FormatResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ChronoSettings) -> None:
        self.settings = settings
        set_settings(settings)
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: FormatResult) -> None:
        """Format and output a FormatResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
