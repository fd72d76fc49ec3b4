"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from intervalds.output.console import create_console, get_output, style_for_sign

if TYPE_CHECKING:
    from rich.console import Console

    from intervalds.services.result import ServiceResult

_COMPONENTS = ("days", "hours", "minutes", "seconds", "nanoseconds")


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "text" in result.data:
        return str(result.data["text"])
    if "equal" in result.data:
        return "equal" if result.data["equal"] else "different"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="ivl.ok")
    op = Text(f"  {result.op}", style="ivl.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ivl.key")
    console.print(k, Text(str(value)), sep="")


def _literal_line(console: Console, data: dict[str, Any]) -> None:
    text = Text(f"  {data['text']}", style="ivl.literal")
    text.stylize(style_for_sign(bool(data.get("negative"))), 2, 3)
    console.print(text)


def _warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  WARNING ", style="ivl.warning"), Text(warning), sep="")


def _component_table(data: dict[str, Any]) -> Table:
    """Build a Rich Table of the components and precisions."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    for name in _COMPONENTS:
        table.add_column(name.title(), justify="right")
    table.add_column("LF prec", style="ivl.precision", justify="right")
    table.add_column("FS prec", style="ivl.precision", justify="right")
    table.add_row(
        *(str(data[name]) for name in _COMPONENTS),
        str(data["leading_field_precision"]),
        str(data["fractional_second_precision"]),
    )
    return table


# ── Op renderers ──────────────────────────────────────────────────────


def _render_interval(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _literal_line(console, result.data)
    if "source" in result.data:
        _field(console, "source", result.data["source"])
    if verbose:
        console.print(_component_table(result.data))
    _warnings(console, result)


def _render_compare(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    verdict = "equal" if result.data["equal"] else "different"
    _field(console, "left", result.data["left"])
    _field(console, "right", result.data["right"])
    _field(console, "result", verdict)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _warnings(console, result)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ivl.error")
    op = Text(f"  {result.op}", style="ivl.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")
    if verbose and err is not None:
        _field(console, "code", err.code)
        for key, value in err.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "parse_interval": _render_interval,
    "format_interval": _render_interval,
    "reformat_interval": _render_interval,
    "compare_intervals": _render_compare,
}
