"""Rich console and palette for toyrobot output.

Renderers print into a Console backed by StringIO and hand back the text,
which leaves commands free to echo it, send it to stderr or skip it.
Rich drops colour codes by itself when the target is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROBOT_THEME = Theme(
    {
        "robot.ok": "bold green",
        "robot.error": "bold red",
        "robot.warning": "bold yellow",
        "robot.op": "bold cyan",
        "robot.key": "dim",
        "robot.wall": "bold red",
        "robot.robot": "bold green",
        "robot.empty": "dim",
        "robot.axis": "dim cyan",
    }
)

# Board cells: (glyph, theme style).
WALL_CELL = ("#", "robot.wall")
EMPTY_CELL = (".", "robot.empty")
ROBOT_CELLS: dict[str, tuple[str, str]] = {
    "NORTH": ("^", "robot.robot"),
    "SOUTH": ("v", "robot.robot"),
    "EAST": (">", "robot.robot"),
    "WEST": ("<", "robot.robot"),
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Console writing to memory; *width* defaults to 120 so grids never wrap."""
    return Console(
        file=StringIO(),
        theme=ROBOT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    assert isinstance(buffer, StringIO)
    return buffer.getvalue()
