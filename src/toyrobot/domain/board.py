"""Board — grid dimensions, walls, and at most one robot.

The board is the single mutable owner of session state. Every rule lives
here: bounds, wall uniqueness, placement validation, wrapping and blocked
moves.

Movement contract:

* Rows grow northward and columns grow eastward.
* A step off an edge re-enters at the opposite edge of the same axis; the
  other coordinate is unchanged.
* A step onto a wall (after wrapping) is discarded without error.

Placement validates before mutating, so a failed ``place_robot`` leaves the
board exactly as it was.
"""

from __future__ import annotations

from collections.abc import Iterable

from toyrobot.domain.errors import (
    InvalidPositionError,
    OutOfRangeError,
    RobotPlacementBlockedError,
)
from toyrobot.domain.position import Position
from toyrobot.domain.robot import Robot, Wall
from toyrobot.domain.types import Facing

DEFAULT_HEIGHT = 5
DEFAULT_WIDTH = 5


class Board:
    """A ``height`` x ``width`` grid holding walls and an optional robot.

    Args:
        height: Number of rows (>= 1).
        width: Number of columns (>= 1).
        walls: Initial wall positions, placed in order with
            :meth:`place_wall` rules.
        robot: Initial robot, placed with :meth:`place_robot` rules after
            the walls.

    Raises:
        OutOfRangeError: If either dimension is below 1.
        InvalidPositionError: If an initial wall is rejected or the initial
            robot lies outside the board.
        RobotPlacementBlockedError: If the initial robot sits on a wall.
    """

    def __init__(
        self,
        height: int = DEFAULT_HEIGHT,
        width: int = DEFAULT_WIDTH,
        *,
        walls: Iterable[Position] | None = None,
        robot: Robot | None = None,
    ) -> None:
        if height < 1 or width < 1:
            raise OutOfRangeError.for_dimensions(height, width)
        self._height = height
        self._width = width
        self._walls: list[Wall] = []
        self._robot: Robot | None = None

        for position in walls or ():
            if not self.place_wall(position):
                raise InvalidPositionError(f"Cannot place initial wall at {position}.")
        if robot is not None:
            self.place_robot(robot.position, robot.facing)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def walls(self) -> tuple[Wall, ...]:
        """Walls in insertion order."""
        return tuple(self._walls)

    @property
    def robot(self) -> Robot | None:
        return self._robot

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, position: Position) -> bool:
        """True if *position* lies within ``[1, height] x [1, width]``."""
        return position.row <= self._height and position.col <= self._width

    def is_wall_at(self, position: Position) -> bool:
        return any(wall.position == position for wall in self._walls)

    def is_robot_at(self, position: Position) -> bool:
        return self._robot is not None and self._robot.position == position

    def report(self) -> str:
        """``row,col,FACING`` for the robot, or ``""`` when none is placed."""
        if self._robot is None:
            return ""
        return self._robot.report()

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def place_wall(self, position: Position) -> bool:
        """Add a wall at *position*.

        Returns False, leaving the board untouched, when the position is
        off the board, holds the robot, or already holds a wall.
        """
        if not self.contains(position) or self.is_robot_at(position) or self.is_wall_at(position):
            return False
        self._walls.append(Wall(position))
        return True

    def place_robot(self, position: Position, facing: Facing) -> Robot:
        """Place (or re-place) the robot and return the new snapshot.

        Raises:
            InvalidPositionError: If *position* is off the board.
            RobotPlacementBlockedError: If a wall occupies *position*.
        """
        if not self.contains(position):
            raise InvalidPositionError.outside(position, self._height, self._width)
        if self.is_wall_at(position):
            raise RobotPlacementBlockedError.because_wall_is_present(position)
        self._robot = Robot(position, facing)
        return self._robot

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def move_robot(self) -> None:
        """Advance one cell in the current facing, wrapping at the edges."""
        if self._robot is None:
            return
        target = self._forward(self._robot.position, self._robot.facing)
        if self.is_wall_at(target):
            return
        self._robot = self._robot.moved_to(target)

    def turn_robot_left(self) -> None:
        if self._robot is not None:
            self._robot = self._robot.turned_left()

    def turn_robot_right(self) -> None:
        if self._robot is not None:
            self._robot = self._robot.turned_right()

    def _forward(self, position: Position, facing: Facing) -> Position:
        d_row, d_col = facing.step
        row = (position.row - 1 + d_row) % self._height + 1
        col = (position.col - 1 + d_col) % self._width + 1
        return Position(row, col)

    def __repr__(self) -> str:
        return (
            f"Board(height={self._height}, width={self._width}, "
            f"walls={len(self._walls)}, robot={self._robot!r})"
        )
