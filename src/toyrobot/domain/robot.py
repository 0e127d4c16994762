"""Robot and Wall value objects.

Both are frozen; the board replaces its ``Robot`` wholesale on every
transition instead of mutating it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from toyrobot.domain.errors import NullArgumentError
from toyrobot.domain.position import Position
from toyrobot.domain.types import Facing


@dataclass(frozen=True)
class Wall:
    """An impassable cell."""

    position: Position

    def __post_init__(self) -> None:
        if self.position is None:
            raise NullArgumentError("position")

    def __str__(self) -> str:
        return f"Wall at {self.position}"


@dataclass(frozen=True)
class Robot:
    """Snapshot of the robot's position and facing."""

    position: Position
    facing: Facing

    def __post_init__(self) -> None:
        if self.position is None:
            raise NullArgumentError("position")
        if self.facing is None:
            raise NullArgumentError("facing")

    def moved_to(self, position: Position) -> Robot:
        return replace(self, position=position)

    def turned_left(self) -> Robot:
        return replace(self, facing=self.facing.left())

    def turned_right(self) -> Robot:
        return replace(self, facing=self.facing.right())

    def report(self) -> str:
        """Render as ``row,col,FACING``."""
        return f"{self.position},{self.facing.name}"
