"""Root CLI group for agecalc with global flags and command registration."""

from __future__ import annotations

import click

from agecalc import __version__
from agecalc.commands import register_commands
from agecalc.commands._context import AppContext
from agecalc.config.settings import AgeCalcSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="agecalc")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
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
    """agecalc — age in years, months and days from a birth date."""
    ctx.ensure_object(dict)
    # Unset flags are left out so AGECALC_* env vars and the TOML file still apply.
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    settings = AgeCalcSettings.from_cli(
        config_path=config_path,
        **{name: True for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
