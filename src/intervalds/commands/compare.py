"""Command: compare two literals by value."""

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
  intervalds compare "+1 02:03:04.5" "+000000001 02:03:04.500000000"
  intervalds --json compare "1 00:00:00" "-1 00:00:00\"""",
)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def compare(app: AppContext, left: str, right: str) -> None:
    """Check whether LEFT and RIGHT denote the same interval.

    Display precisions are ignored.
    """
    app.emit(app.service.compare(left, right))
