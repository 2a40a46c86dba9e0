"""Root CLI group for measurectl with global flags and command registration."""

from __future__ import annotations

import click

from measurectl import __version__
from measurectl.commands import register_commands
from measurectl.commands._context import AppContext
from measurectl.config.settings import MeasureSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="measurectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with mismatch diagnostics.")
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
    """measurectl — check circuit costs against declared measurements."""
    ctx.ensure_object(dict)
    settings = MeasureSettings.from_cli(
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
