"""Position value object.

Only the lower bound is checked here. Whether a position fits on a given
board is the board's concern (:meth:`Board.contains`).
"""

from __future__ import annotations

from dataclasses import dataclass

from toyrobot.domain.errors import OutOfRangeError


@dataclass(frozen=True)
class Position:
    """A 1-based ``(row, col)`` grid coordinate.

    Attributes:
        row: Row index, 1 at the southern edge.
        col: Column index, 1 at the western edge.
    """

    row: int
    col: int

    def __post_init__(self) -> None:
        if self.row < 1:
            raise OutOfRangeError.for_row(self.row)
        if self.col < 1:
            raise OutOfRangeError.for_column(self.col)

    def __str__(self) -> str:
        return f"{self.row},{self.col}"
