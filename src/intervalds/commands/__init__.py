"""Subcommand modules for intervalds.

Provides register_commands() which uses deferred imports to keep
``intervalds --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from intervalds.commands.compare import compare
    from intervalds.commands.format_cmd import format_cmd
    from intervalds.commands.parse import parse
    from intervalds.commands.reformat import reformat
    from intervalds.commands.timedelta_cmd import timedelta_cmd

    cli.add_command(parse)
    cli.add_command(format_cmd)
    cli.add_command(reformat)
    cli.add_command(compare)
    cli.add_command(timedelta_cmd)
