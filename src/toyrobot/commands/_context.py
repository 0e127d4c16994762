"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns the session's board and interpreter, and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from toyrobot.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from toyrobot.config.settings import RobotSettings
    from toyrobot.domain.board import Board
    from toyrobot.services.interpreter import CommandInterpreter
    from toyrobot.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The board is created lazily on first use so ``--help`` and
    ``--version`` never validate board settings.
    """

    def __init__(self, settings: RobotSettings) -> None:
        self.settings = settings
        self._board: Board | None = None
        self._interpreter: CommandInterpreter | None = None

        from toyrobot.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        for key in settings.ignored_keys:
            logger.warning(
                "unknown config entry",
                extra={"key": key, "path": str(settings.config_path)},
            )

    @property
    def board(self) -> Board:
        """The session board (created lazily on first access)."""
        if self._board is None:
            from toyrobot.config.logging import bind_board
            from toyrobot.domain.board import Board

            height, width = self.settings.board.height, self.settings.board.width
            self._board = Board(height, width)
            bind_board(height, width)
        return self._board

    @property
    def interpreter(self) -> CommandInterpreter:
        """Command interpreter bound to :attr:`board`."""
        if self._interpreter is None:
            from toyrobot.services.interpreter import CommandInterpreter

            self._interpreter = CommandInterpreter(self.board)
        return self._interpreter

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
