"""RobotService — board operations behind the ServiceResult contract.

Each method performs exactly one board call. Domain errors raised by
placement become ``ok=False`` results; moves and turns always succeed and
carry a warning when no robot has been placed yet.
"""

from __future__ import annotations

import logging
from typing import Any

from toyrobot.domain.errors import RobotError
from toyrobot.domain.position import Position
from toyrobot.domain.robot import Robot
from toyrobot.domain.types import Facing
from toyrobot.services.base import BaseService
from toyrobot.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

NO_ROBOT_WARNING = "No robot placed"


def robot_payload(robot: Robot) -> dict[str, Any]:
    """Serialize a robot snapshot for ``ServiceResult.data``."""
    return {
        "row": robot.position.row,
        "col": robot.position.col,
        "facing": robot.facing.name,
    }


class RobotService(BaseService):
    """Places, moves, turns and reports the robot on a single board."""

    def place_robot(self, row: int, col: int, facing: Facing) -> ServiceResult:
        op = "place_robot"
        try:
            robot = self._board.place_robot(Position(row, col), facing)
        except RobotError as exc:
            logger.debug("placement rejected", extra={"code": exc.code, "reason": str(exc)})
            return ServiceResult.failure(
                op, ServiceError.from_exception(exc, row=row, col=col, facing=facing.name)
            )
        return ServiceResult(ok=True, op=op, data=robot_payload(robot))

    def place_wall(self, row: int, col: int) -> ServiceResult:
        op = "place_wall"
        try:
            position = Position(row, col)
        except RobotError as exc:
            return ServiceResult.failure(op, ServiceError.from_exception(exc, row=row, col=col))

        if not self._board.place_wall(position):
            logger.debug("wall rejected", extra={"position": str(position)})
            return ServiceResult.failure(
                op,
                ServiceError(
                    code="WALL_REJECTED",
                    message=(
                        f"Cannot place wall at {position}: off the board, "
                        "occupied by the robot, or already walled."
                    ),
                    detail={"row": row, "col": col},
                ),
            )
        return ServiceResult(ok=True, op=op, data={"row": row, "col": col})

    def move_robot(self) -> ServiceResult:
        self._board.move_robot()
        return self._robot_state("move")

    def turn_robot_left(self) -> ServiceResult:
        self._board.turn_robot_left()
        return self._robot_state("left")

    def turn_robot_right(self) -> ServiceResult:
        self._board.turn_robot_right()
        return self._robot_state("right")

    def report(self) -> ServiceResult:
        return ServiceResult(ok=True, op="report", data={"report": self._board.report()})

    def _robot_state(self, op: str) -> ServiceResult:
        robot = self._board.robot
        if robot is None:
            return ServiceResult(ok=True, op=op, warnings=[NO_ROBOT_WARNING])
        return ServiceResult(ok=True, op=op, data=robot_payload(robot))
