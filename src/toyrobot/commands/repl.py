"""Command: interactive read-eval loop."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import click

from toyrobot.commands._base import RobotCommand
from toyrobot.commands._input import is_exit
from toyrobot.output.formatters import format_result
from toyrobot.services.interpreter import ARGUMENT_HINTS, IGNORE_OP

if TYPE_CHECKING:
    from toyrobot.commands._context import AppContext

BANNER_HEADER = """\
Welcome to the Toy Robot Simulator!
Type commands to control the robot, or 'EXIT' to quit.

Available commands:"""

GOODBYE = "Exiting the simulator."


def build_banner(keywords: Iterable[str]) -> str:
    """Banner text listing *keywords* with their argument shapes."""
    lines = [BANNER_HEADER]
    for keyword in keywords:
        lines.append(f"  {keyword} {ARGUMENT_HINTS.get(keyword, '')}".rstrip())
    return "\n".join(lines) + "\n"


@click.command(
    cls=RobotCommand,
    examples="""\
  toyrobot repl
  toyrobot --height 10 --width 10 repl
  toyrobot -v --log-json repl 2> debug.log
  toyrobot --json repl < commands.txt""",
)
@click.pass_obj
def repl(app: AppContext) -> None:
    """Read commands interactively until EXIT or end of input.

    Invalid commands are ignored silently; use -v to log why. With -v every
    accepted command also echoes its result.
    In --json mode every non-blank command echoes its result as one JSON line.
    """
    settings = app.settings
    json_mode = settings.json_output
    interactive = not json_mode

    if interactive and settings.repl.banner and not settings.quiet:
        click.echo(build_banner(app.interpreter.keywords))

    stdin = click.get_text_stream("stdin")
    while True:
        if interactive:
            click.echo(settings.repl.prompt, nl=False)
        line = stdin.readline()
        if not line:
            if interactive:
                click.echo()
            break
        if is_exit(line):
            if interactive:
                click.echo(GOODBYE)
            break

        result = app.interpreter.dispatch(line.rstrip("\r\n"))
        if json_mode:
            if result.op != IGNORE_OP:
                click.echo(result.model_dump_json())
            continue
        if not result.ok or result.op == IGNORE_OP:
            continue
        if settings.verbose:
            output = format_result(result, settings=app.output_settings)
        else:
            output = result.data.get("report", "") if result.op == "report" else ""
        if output:
            click.echo(output)
