"""Root CLI group for seqtools with global flags and command registration."""

from __future__ import annotations

import click

from seqtools import __version__
from seqtools.commands import register_commands
from seqtools.commands._base import SeqGroup
from seqtools.commands._context import AppContext
from seqtools.config.settings import SeqSettings


@click.group(cls=SeqGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="seqtools")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the result value.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing details.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-t",
    "--type",
    "element_type",
    type=click.Choice(["int", "float", "str"]),
    default=None,
    help="Element type for sequence arguments (default from config: int).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    element_type: str | None,
) -> None:
    """seqtools: map, filter, fold and zip sequences from the command line."""
    ctx.ensure_object(dict)
    settings = SeqSettings.from_cli(
        config_path=config_path,
        element_type=element_type,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings, command=ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
