"""CommandInterpreter — one line of text in, one board operation out.

Grammar (keyword is case-insensitive, arguments are comma-separated)::

    PLACE_ROBOT row,col,FACING
    PLACE_WALL row,col
    MOVE | LEFT | RIGHT | REPORT

Blank lines and unknown keywords are ignored. Every failure (malformed
argument, unknown facing, wrong argument count, rejected placement) is
caught in :meth:`CommandInterpreter.dispatch` and returned as an
``ok=False`` result; the board is left as it was before the command.

``execute_command`` / ``execute_commands`` return a plain string that is
always empty. Callers that need the REPORT output read
``dispatch(...).data["report"]`` or call ``report()``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from toyrobot.domain.board import Board
from toyrobot.domain.errors import RobotError
from toyrobot.domain.types import Facing
from toyrobot.services.base import BaseService
from toyrobot.services.result import ServiceError, ServiceResult
from toyrobot.services.robot import RobotService

logger = logging.getLogger(__name__)

IGNORE_OP = "ignore"

# Argument shape per keyword, for help text.
ARGUMENT_HINTS: dict[str, str] = {
    "PLACE_ROBOT": "ROW,COL,FACING",
    "PLACE_WALL": "ROW,COL",
}

_INTEGER = re.compile(r"^\s*[+-]?[0-9]+\s*$", re.ASCII)


class CommandParseError(RobotError):
    """A recognised command whose arguments could not be parsed."""

    code = "PARSE_ERROR"


@dataclass(frozen=True)
class ParsedCommand:
    """A tokenised command line."""

    keyword: str  # upper-cased
    args: tuple[str, ...] = ()

    @property
    def op(self) -> str:
        return self.keyword.lower()


def parse_command(line: str) -> ParsedCommand | None:
    """Split *line* into keyword and argument tokens.

    Returns None for empty or whitespace-only lines.
    """
    parts = line.split()
    if not parts:
        return None
    return ParsedCommand(keyword=parts[0].upper(), args=tuple(parts[1:]))


def _single_argument(command: ParsedCommand, fields: int) -> list[str]:
    """Return the comma-separated fields of the one required argument."""
    if len(command.args) != 1:
        raise CommandParseError(
            f"{command.keyword} takes exactly one argument, got {len(command.args)}."
        )
    values = command.args[0].split(",")
    if len(values) != fields:
        raise CommandParseError(
            f"{command.keyword} expects {fields} comma-separated values, got {len(values)}."
        )
    return values


def _parse_int(value: str, name: str) -> int:
    if not _INTEGER.match(value):
        raise CommandParseError(f"{name} must be an integer, got {value!r}.")
    try:
        return int(value)
    except ValueError:
        # past the interpreter's int digit limit
        raise CommandParseError(f"{name} has too many digits ({len(value.strip())}).") from None


def _parse_facing(value: str) -> Facing:
    try:
        return Facing.parse(value)
    except ValueError as exc:
        raise CommandParseError(str(exc)) from None


def _no_arguments(command: ParsedCommand) -> None:
    if command.args:
        raise CommandParseError(f"{command.keyword} takes no arguments.")


class CommandInterpreter(BaseService):
    """Parses command lines and dispatches them to :class:`RobotService`."""

    def __init__(self, board: Board) -> None:
        super().__init__(board)
        self._robot = RobotService(board)
        self._handlers: dict[str, Callable[[ParsedCommand], ServiceResult]] = {
            "PLACE_ROBOT": self._place_robot,
            "PLACE_WALL": self._place_wall,
            "MOVE": self._without_args(self._robot.move_robot),
            "LEFT": self._without_args(self._robot.turn_robot_left),
            "RIGHT": self._without_args(self._robot.turn_robot_right),
            "REPORT": self._without_args(self._robot.report),
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def keywords(self) -> list[str]:
        """Recognised command keywords, in grammar order."""
        return list(self._handlers)

    def dispatch(self, line: str) -> ServiceResult:
        """Interpret one line and return the outcome as a ServiceResult.

        Never raises: any failure becomes ``ok=False`` with an error code.
        """
        command = parse_command(line)
        if command is None:
            return ServiceResult(ok=True, op=IGNORE_OP, meta={"line": line})

        handler = self._handlers.get(command.keyword)
        if handler is None:
            logger.debug("command ignored", extra={"line": line, "keyword": command.keyword})
            return ServiceResult(ok=True, op=IGNORE_OP, meta={"line": line})

        try:
            result = handler(command)
        except RobotError as exc:
            result = ServiceResult.failure(command.op, ServiceError.from_exception(exc))
        except Exception as exc:
            logger.debug("command raised", extra={"line": line}, exc_info=True)
            result = ServiceResult.failure(
                command.op, ServiceError(code="INTERNAL_ERROR", message=str(exc))
            )

        if not result.ok and result.error is not None:
            logger.debug(
                "command failed",
                extra={"line": line, "op": result.op, "code": result.error.code},
            )
        return result.model_copy(update={"meta": {**(result.meta or {}), "line": line}})

    def execute_command(self, line: str) -> str:
        """Run one command. The string result is always empty."""
        self.dispatch(line)
        return ""

    def execute_commands(self, lines: Iterable[str]) -> str:
        """Run commands in order, returning the last non-empty result."""
        last = ""
        for line in lines:
            result = self.execute_command(line)
            if result:
                last = result
        return last

    def report(self) -> str:
        return self._board.report()

    def run_script(self, lines: Iterable[str], *, strict: bool = False) -> ServiceResult:
        """Dispatch every line and aggregate the REPORT outputs.

        Failed commands are counted, not surfaced, unless *strict* is set:
        then the first failure is returned as-is with its 1-based line
        number in ``meta`` and the remaining lines are not run.
        """
        reports: list[str] = []
        executed = ignored = failed = 0
        for number, line in enumerate(lines, start=1):
            result = self.dispatch(line)
            if result.op == IGNORE_OP:
                ignored += 1
            elif not result.ok:
                if strict:
                    meta = {**(result.meta or {}), "line_number": number}
                    return result.model_copy(update={"meta": meta})
                failed += 1
            else:
                executed += 1
                report = result.data.get("report") if result.op == "report" else None
                if report:
                    reports.append(report)
        return ServiceResult(
            ok=True,
            op="run_script",
            data={
                "reports": reports,
                "report": self._board.report(),
                "executed": executed,
                "ignored": ignored,
                "failed": failed,
            },
        )

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _place_robot(self, command: ParsedCommand) -> ServiceResult:
        row, col, facing = _single_argument(command, 3)
        return self._robot.place_robot(
            _parse_int(row, "row"), _parse_int(col, "col"), _parse_facing(facing)
        )

    def _place_wall(self, command: ParsedCommand) -> ServiceResult:
        row, col = _single_argument(command, 2)
        return self._robot.place_wall(_parse_int(row, "row"), _parse_int(col, "col"))

    @staticmethod
    def _without_args(
        action: Callable[[], ServiceResult],
    ) -> Callable[[ParsedCommand], ServiceResult]:
        def handler(command: ParsedCommand) -> ServiceResult:
            _no_arguments(command)
            return action()

        return handler
