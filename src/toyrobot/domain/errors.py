"""Typed domain errors.

Each error carries a stable ``code`` that the service layer copies into
``ServiceError.code``. Only placement and construction raise; moves and
turns are no-ops when their preconditions fail.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from toyrobot.domain.position import Position


class RobotError(Exception):
    """Base class for all toyrobot domain errors."""

    code = "ROBOT_ERROR"


class OutOfRangeError(RobotError, ValueError):
    """A coordinate or dimension is below 1."""

    code = "OUT_OF_RANGE"

    @classmethod
    def for_row(cls, row: int) -> OutOfRangeError:
        return cls(f"Row '{row}' must be 1 or greater.")

    @classmethod
    def for_column(cls, col: int) -> OutOfRangeError:
        return cls(f"Column '{col}' must be 1 or greater.")

    @classmethod
    def for_dimensions(cls, height: int, width: int) -> OutOfRangeError:
        return cls(f"Board height '{height}' and width '{width}' must be 1 or greater.")


class InvalidPositionError(RobotError, ValueError):
    """A position lies outside the board's extent."""

    code = "INVALID_POSITION"

    @classmethod
    def outside(cls, position: Position, height: int, width: int) -> InvalidPositionError:
        return cls(f"Position {position} is outside the {height}x{width} board.")


class RobotPlacementBlockedError(RobotError):
    """A wall occupies the cell the robot was asked to occupy."""

    code = "ROBOT_PLACEMENT_BLOCKED"

    @classmethod
    def because_wall_is_present(cls, position: Position) -> RobotPlacementBlockedError:
        return cls(f"Cannot place robot at {position} because a wall is present.")


class NullArgumentError(RobotError, TypeError):
    """A required value was None."""

    code = "NULL_ARGUMENT"

    def __init__(self, name: str) -> None:
        super().__init__(f"'{name}' cannot be None.")
        self.name = name
