"""Rich renderers for ServiceResult and the board grid.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Result renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from toyrobot.domain.position import Position
from toyrobot.output.console import (
    EMPTY_CELL,
    ROBOT_CELLS,
    WALL_CELL,
    create_console,
    get_output,
)

if TYPE_CHECKING:
    from rich.console import Console

    from toyrobot.domain.board import Board
    from toyrobot.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the final report only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return str(result.data.get("report", ""))


def render_board(board: Board) -> str:
    """Draw the board with north at the top and row/column labels.

    ``#`` marks a wall, ``^ v > <`` the robot by facing, ``.`` an empty cell.
    """
    console = create_console()
    cell = len(str(board.width))
    label = len(str(board.height))

    for row in range(board.height, 0, -1):
        line = Text(f"{row:>{label}} ", style="robot.axis")
        for col in range(1, board.width + 1):
            glyph, style = _cell(board, Position(row, col))
            line.append(f"{glyph:>{cell}}", style=style)
            if col < board.width:
                line.append(" ")
        console.print(line)

    axis = " ".join(f"{col:>{cell}}" for col in range(1, board.width + 1))
    console.print(Text(f"{'':>{label}} {axis}", style="robot.axis"))
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _cell(board: Board, position: Position) -> tuple[str, str]:
    robot = board.robot
    if robot is not None and robot.position == position:
        return ROBOT_CELLS[robot.facing.name]
    if board.is_wall_at(position):
        return WALL_CELL
    return EMPTY_CELL


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="robot.ok")
    op = Text(f"  {result.op}", style="robot.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="robot.key"), Text(str(value)), sep="")


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text(f"  WARNING: {warning}", style="robot.warning"))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


def _render_report(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    report = result.data.get("report", "")
    if report:
        console.print(Text(report))
    if verbose:
        _render_meta(console, result)


def _render_run_script(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for report in result.data.get("reports", []):
        console.print(Text(report))
    if verbose:
        counts = ", ".join(
            f"{key}={result.data.get(key, 0)}" for key in ("executed", "ignored", "failed")
        )
        console.print(Text(f"  {counts}", style="dim"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    label = Text("ERROR", style="robot.error")
    op = Text(f"  {result.op}", style="robot.op")
    console.print(label, op, sep="")
    if result.error is None:
        console.print("  Unknown error")
        return
    console.print(Text(f"  {result.error.code}: {result.error.message}"))
    if verbose:
        for key, value in result.error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "report": _render_report,
    "run_script": _render_run_script,
}
