"""Root CLI group for toyrobot with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from toyrobot import __version__
from toyrobot.commands import register_commands
from toyrobot.commands._context import AppContext
from toyrobot.config.settings import RobotSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="toyrobot")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--height", type=click.IntRange(min=1), default=None, help="Board rows.")
@click.option("--width", type=click.IntRange(min=1), default=None, help="Board columns.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    height: int | None,
    width: int | None,
) -> None:
    """toyrobot — drive a robot around a wrapping grid with walls."""
    try:
        settings = RobotSettings.from_cli(
            config_path=config_path,
            height=height,
            width=width,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
