"""Root CLI group for idiomctl with global flags and command registration."""

from __future__ import annotations

import click

from idiomctl import __version__
from idiomctl.commands import register_commands
from idiomctl.commands._context import AppContext
from idiomctl.config.settings import IdiomSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="idiomctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """idiomctl — runnable demonstrations of everyday coding idioms."""
    ctx.ensure_object(dict)
    settings = IdiomSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
