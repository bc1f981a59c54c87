"""Operation-specific Rich renderers for FormatResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic status renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from chronofmt.domain.directives import TokenDirective
from chronofmt.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from chronofmt.formatting.result import FormatResult


def render_result(result: FormatResult, *, verbose: bool = False) -> str:
    """Render a FormatResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose)
    else:
        _render_error(result, console, verbose)

    return get_output(console).rstrip("\n")


def _status_line(console: Console, result: FormatResult) -> None:
    console.print(Text("OK", style="chrono.ok"), Text(f"  {result.op}", style="chrono.op"))


def _render_meta(result: FormatResult, console: Console) -> None:
    for key, value in (result.meta or {}).items():
        console.print(Text(f"  {key}:", style="chrono.key"), escape(str(value)))


def _render_text(result: FormatResult, console: Console, verbose: bool) -> None:
    # Rendered text goes out bare so it can be piped.
    console.print(result.text or "", markup=False, soft_wrap=True)
    if verbose:
        _render_meta(result, console)


def _render_tokenize(result: FormatResult, console: Console, verbose: bool) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Kind")
    table.add_column("Raw", no_wrap=True)
    table.add_column("Name")
    table.add_column("Padding")
    table.add_column("Width")
    for directive in result.directives:
        if isinstance(directive, TokenDirective):
            width = f"{directive.width.min}..{'' if directive.width.max is None else directive.width.max}"
            table.add_row(
                Text("token", style="chrono.token"),
                escape(directive.raw),
                directive.name,
                directive.padding.value,
                width,
            )
        else:
            table.add_row(Text("literal", style="chrono.literal"), repr(directive.value), "", "", "")
    console.print(table)
    if verbose:
        _render_meta(result, console)


def _render_dialects(result: FormatResult, console: Console, verbose: bool) -> None:
    meta = result.meta or {}
    builtins = set(meta.get("builtin", []))
    for name in meta.get("dialects", []):
        style = "chrono.builtin" if name in builtins else ""
        console.print(Text(name, style=style))


def _render_generic(result: FormatResult, console: Console, verbose: bool) -> None:
    _status_line(console, result)
    _render_meta(result, console)


def _render_error(result: FormatResult, console: Console, verbose: bool) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="chrono.error")
    op = Text(f"  {result.op}", style="chrono.op")
    code = Text(f" [{err.code.value}]" if err else "", style="chrono.key")
    console.print(label, op, code, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {escape(str(v))}")


_OP_RENDERERS: dict[str, Callable[[FormatResult, Console, bool], None]] = {
    "lformat": _render_text,
    "format": _render_text,
    "tokenize": _render_tokenize,
    "dialects": _render_dialects,
}
