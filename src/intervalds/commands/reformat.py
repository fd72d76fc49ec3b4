"""Command: re-render a literal with different precisions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from intervalds.commands._base import PRECISION, IntervalCommand

if TYPE_CHECKING:
    from intervalds.commands._context import AppContext


@click.command(
    cls=IntervalCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  intervalds reformat "+1 02:03:04.5" --lfprec 9 --fsprec 9
  intervalds -q reformat "-000000012 01:00:00.123456789" --fsprec 3""",
)
@click.argument("literal")
@click.option("--lfprec", type=PRECISION, default=None, help="New leading field precision.")
@click.option("--fsprec", type=PRECISION, default=None, help="New fractional second precision.")
@click.pass_obj
def reformat(app: AppContext, literal: str, lfprec: int | None, fsprec: int | None) -> None:
    """Re-render LITERAL; omitted precisions keep the literal's own."""
    app.emit(app.service.reformat(literal, lfprec=lfprec, fsprec=fsprec))
