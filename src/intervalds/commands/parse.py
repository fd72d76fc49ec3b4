"""Command: parse an interval literal."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from intervalds.commands._base import IntervalCommand

if TYPE_CHECKING:
    from intervalds.commands._context import AppContext


@click.command(
    cls=IntervalCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  intervalds parse "+1 02:03:04.50"
  intervalds -v parse "-000000001 02:03:04.500000000"
  intervalds --json parse "3 00:00:00\"""",
)
@click.argument("literal")
@click.pass_obj
def parse(app: AppContext, literal: str) -> None:
    """Parse LITERAL and show its components and precisions."""
    app.emit(app.service.parse(literal))
