"""Tests for RobotService and BaseService."""

import pytest

from toyrobot.domain.board import Board
from toyrobot.domain.position import Position
from toyrobot.domain.types import Facing
from toyrobot.services.base import BaseService
from toyrobot.services.interpreter import CommandInterpreter
from toyrobot.services.robot import NO_ROBOT_WARNING, RobotService


@pytest.fixture
def service(board: Board) -> RobotService:
    return RobotService(board)


class TestBaseService:
    @pytest.mark.parametrize("service_cls", [RobotService, CommandInterpreter])
    def test_board_injection(self, service_cls: type[BaseService], board: Board) -> None:
        svc = service_cls(board)
        assert isinstance(svc, BaseService)
        assert svc.board is board

    def test_services_share_board_state(self, board: Board) -> None:
        RobotService(board).place_robot(2, 2, Facing.EAST)
        assert RobotService(board).report().data["report"] == "2,2,EAST"


class TestPlaceRobot:
    @pytest.mark.parametrize(
        ("row", "col", "facing"),
        [(1, 1, Facing.NORTH), (2, 3, Facing.SOUTH), (5, 5, Facing.EAST)],
    )
    def test_valid(
        self, service: RobotService, board: Board, row: int, col: int, facing: Facing
    ) -> None:
        result = service.place_robot(row, col, facing)
        assert result.ok
        assert result.op == "place_robot"
        assert result.data == {"row": row, "col": col, "facing": facing.name}
        assert board.robot is not None
        assert board.robot.position == Position(row, col)

    @pytest.mark.parametrize(("row", "col"), [(0, 1), (1, 0), (-3, 2)])
    def test_out_of_range(self, service: RobotService, row: int, col: int) -> None:
        result = service.place_robot(row, col, Facing.NORTH)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "OUT_OF_RANGE"

    @pytest.mark.parametrize(("row", "col"), [(6, 1), (1, 6), (10, 10)])
    def test_outside_board(self, service: RobotService, board: Board, row: int, col: int) -> None:
        result = service.place_robot(row, col, Facing.NORTH)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_POSITION"
        assert result.error.detail == {"row": row, "col": col, "facing": "NORTH"}
        assert board.robot is None

    def test_on_wall(self, service: RobotService, board: Board) -> None:
        board.place_wall(Position(2, 2))
        result = service.place_robot(2, 2, Facing.NORTH)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "ROBOT_PLACEMENT_BLOCKED"


class TestPlaceWall:
    def test_valid(self, service: RobotService, board: Board) -> None:
        result = service.place_wall(3, 4)
        assert result.ok
        assert result.data == {"row": 3, "col": 4}
        assert board.is_wall_at(Position(3, 4))

    def test_rejected(self, service: RobotService) -> None:
        service.place_wall(3, 4)
        result = service.place_wall(3, 4)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "WALL_REJECTED"

    def test_out_of_range(self, service: RobotService, board: Board) -> None:
        result = service.place_wall(0, 4)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "OUT_OF_RANGE"
        assert board.walls == ()


class TestMovement:
    def test_move_without_robot_warns(self, service: RobotService) -> None:
        result = service.move_robot()
        assert result.ok
        assert result.warnings == [NO_ROBOT_WARNING]
        assert result.data == {}

    def test_move(self, service: RobotService) -> None:
        service.place_robot(2, 2, Facing.NORTH)
        result = service.move_robot()
        assert result.op == "move"
        assert result.data == {"row": 3, "col": 2, "facing": "NORTH"}

    def test_move_into_wall(self, service: RobotService) -> None:
        service.place_wall(3, 2)
        service.place_robot(2, 2, Facing.NORTH)
        result = service.move_robot()
        assert result.ok
        assert result.data == {"row": 2, "col": 2, "facing": "NORTH"}

    def test_turns(self, service: RobotService) -> None:
        service.place_robot(1, 1, Facing.NORTH)
        assert service.turn_robot_left().data["facing"] == "WEST"
        assert service.turn_robot_right().data["facing"] == "NORTH"
        assert service.turn_robot_right().op == "right"


class TestReport:
    def test_empty_without_robot(self, service: RobotService) -> None:
        result = service.report()
        assert result.ok
        assert result.data == {"report": ""}

    def test_format(self, service: RobotService) -> None:
        service.place_robot(3, 3, Facing.EAST)
        assert service.report().data == {"report": "3,3,EAST"}
