"""Domain layer — positions, facings, walls, the robot and the board.

This layer depends only on stdlib.
It must never import from services, commands, config, or output.
"""

from toyrobot.domain.board import Board
from toyrobot.domain.errors import (
    InvalidPositionError,
    NullArgumentError,
    OutOfRangeError,
    RobotError,
    RobotPlacementBlockedError,
)
from toyrobot.domain.position import Position
from toyrobot.domain.robot import Robot, Wall
from toyrobot.domain.types import Facing

__all__ = [
    "Board",
    "Facing",
    "InvalidPositionError",
    "NullArgumentError",
    "OutOfRangeError",
    "Position",
    "Robot",
    "RobotError",
    "RobotPlacementBlockedError",
    "Wall",
]
