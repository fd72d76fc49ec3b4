"""Rich Console factory and theme for intervalds output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

INTERVAL_THEME = Theme(
    {
        "ivl.ok": "bold green",
        "ivl.error": "bold red",
        "ivl.warning": "bold yellow",
        "ivl.op": "bold cyan",
        "ivl.key": "dim",
        "ivl.literal": "bold",
        "ivl.positive": "green",
        "ivl.negative": "magenta",
        "ivl.precision": "blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=INTERVAL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_sign(negative: bool) -> str:
    """Return the Rich style name for an interval's sign."""
    return "ivl.negative" if negative else "ivl.positive"
