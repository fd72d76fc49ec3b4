"""Command: convert a literal to a Python timedelta."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from intervalds.commands._base import IntervalCommand

if TYPE_CHECKING:
    from intervalds.commands._context import AppContext


@click.command(
    "timedelta",
    cls=IntervalCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  intervalds timedelta "+1 02:03:04.5"
  intervalds --json timedelta "-0 00:00:01.000000999\"""",
)
@click.argument("literal")
@click.pass_obj
def timedelta_cmd(app: AppContext, literal: str) -> None:
    """Convert LITERAL to a timedelta (sub-microsecond digits are truncated)."""
    app.emit(app.service.to_timedelta(literal))
