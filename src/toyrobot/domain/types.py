"""Facing enum and rotation maps.

Rows grow northward and columns grow eastward, so each facing maps to a
single-axis ``(d_row, d_col)`` step.
"""

from __future__ import annotations

from enum import StrEnum


class Facing(StrEnum):
    """Cardinal heading of the robot."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @classmethod
    def parse(cls, name: str) -> Facing:
        """Look up a facing by name, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If *name* is not a cardinal direction.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown facing: {name!r}") from None

    def left(self) -> Facing:
        """Facing after a 90° counter-clockwise turn."""
        return _LEFT_OF[self]

    def right(self) -> Facing:
        """Facing after a 90° clockwise turn."""
        return _RIGHT_OF[self]

    @property
    def step(self) -> tuple[int, int]:
        """One-cell ``(d_row, d_col)`` offset in this direction."""
        return _STEPS[self]


_LEFT_OF: dict[Facing, Facing] = {
    Facing.NORTH: Facing.WEST,
    Facing.WEST: Facing.SOUTH,
    Facing.SOUTH: Facing.EAST,
    Facing.EAST: Facing.NORTH,
}

_RIGHT_OF: dict[Facing, Facing] = {after: before for before, after in _LEFT_OF.items()}

_STEPS: dict[Facing, tuple[int, int]] = {
    Facing.NORTH: (1, 0),
    Facing.SOUTH: (-1, 0),
    Facing.EAST: (0, 1),
    Facing.WEST: (0, -1),
}
