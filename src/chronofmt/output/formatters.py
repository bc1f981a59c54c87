"""Rich/JSON output helpers.

The CLI renders FormatResult for humans (Rich output) or machines
(--json). The formatter layer adapts FormatResult to the requested mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from chronofmt.output.renderers import render_result

if TYPE_CHECKING:
    from chronofmt.formatting.result import FormatResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    verbose: bool = False


def format_result(result: FormatResult, *, settings: OutputSettings | None = None) -> str:
    """Format a FormatResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    return render_result(result, verbose=settings.verbose)
