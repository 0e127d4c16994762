"""Command: run a script of robot commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from toyrobot.commands._base import RobotCommand
from toyrobot.commands._input import until_exit

if TYPE_CHECKING:
    from toyrobot.commands._context import AppContext


@click.command(
    cls=RobotCommand,
    examples="""\
  toyrobot run commands.txt
  printf 'PLACE_ROBOT 1,1,NORTH\\nMOVE\\nREPORT\\n' | toyrobot run
  toyrobot --height 8 --width 8 run maze.txt --show-board
  toyrobot -q run commands.txt
  toyrobot --json run commands.txt --strict""",
)
@click.argument("script", type=click.File("r"), default="-")
@click.option("--strict", is_flag=True, help="Stop at the first failed command and exit 1.")
@click.option("--show-board", is_flag=True, help="Draw the final board after the run.")
@click.pass_obj
def run(app: AppContext, script: TextIO, strict: bool, show_board: bool) -> None:
    """Execute commands from SCRIPT (default: stdin) until EXIT or end of file.

    Prints every REPORT output; with --quiet only the final report.
    """
    result = app.interpreter.run_script(until_exit(script), strict=strict)
    app.emit(result)
    if show_board and not app.settings.json_output:
        from toyrobot.output.renderers import render_board

        click.echo(render_board(app.board))
