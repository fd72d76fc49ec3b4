"""Command: render interval components as a literal."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from intervalds.commands._base import PRECISION, IntervalCommand

if TYPE_CHECKING:
    from intervalds.commands._context import AppContext


@click.command(
    "format",
    cls=IntervalCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  intervalds format 1 2 3 4 500000000
  intervalds format 1 2 3 4 500000000 --lfprec 2 --fsprec 3
  intervalds format -1 -2 -3 -4 -500000000""",
)
@click.argument("days", type=int)
@click.argument("hours", type=int)
@click.argument("minutes", type=int)
@click.argument("seconds", type=int)
@click.argument("nanoseconds", type=int, default=0)
@click.option("--lfprec", type=PRECISION, default=None, help="Leading field precision (0-9).")
@click.option("--fsprec", type=PRECISION, default=None, help="Fractional second precision (0-9).")
@click.pass_obj
def format_cmd(
    app: AppContext,
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    nanoseconds: int,
    lfprec: int | None,
    fsprec: int | None,
) -> None:
    """Render DAYS HOURS MINUTES SECONDS [NANOSECONDS] as a literal.

    Precisions default to the [display] section of intervalds.toml.
    """
    app.emit(
        app.service.format(
            days, hours, minutes, seconds, nanoseconds, lfprec=lfprec, fsprec=fsprec
        )
    )
