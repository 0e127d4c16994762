"""BaseService — abstract foundation for all toyrobot services.

Every service receives the caller-owned :class:`Board` at construction
time. There is no process-wide board; two services built on the same board
share its state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from toyrobot.domain.board import Board


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class RobotService(BaseService):
            def move_robot(self) -> ServiceResult:
                self._board.move_robot()
                ...
    """

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board
