"""Root CLI group for intervalds with global flags and command registration."""

from __future__ import annotations

import click

from intervalds import __version__
from intervalds.commands import register_commands
from intervalds.commands._base import IntervalGroup
from intervalds.commands._context import AppContext
from intervalds.config.settings import IntervalSettings


@click.group(cls=IntervalGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="intervalds")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting literal.")
@click.option("-v", "--verbose", is_flag=True, help="Component tables and debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """intervalds — INTERVAL DAY TO SECOND literal toolkit."""
    ctx.ensure_object(dict)
    settings = IntervalSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
