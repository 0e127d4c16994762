"""Tests for the Robot and Wall value objects."""

import pytest

from toyrobot.domain.errors import NullArgumentError
from toyrobot.domain.position import Position
from toyrobot.domain.robot import Robot, Wall
from toyrobot.domain.types import Facing


class TestWall:
    def test_equality_by_position(self) -> None:
        assert Wall(Position(1, 2)) == Wall(Position(1, 2))
        assert Wall(Position(1, 2)) != Wall(Position(2, 1))

    def test_none_position(self) -> None:
        with pytest.raises(NullArgumentError) as excinfo:
            Wall(None)  # type: ignore[arg-type]
        assert excinfo.value.code == "NULL_ARGUMENT"
        assert excinfo.value.name == "position"

    def test_str(self) -> None:
        assert str(Wall(Position(3, 4))) == "Wall at 3,4"


class TestRobot:
    def test_none_position(self) -> None:
        with pytest.raises(NullArgumentError):
            Robot(None, Facing.NORTH)  # type: ignore[arg-type]

    def test_none_facing(self) -> None:
        with pytest.raises(NullArgumentError, match="facing"):
            Robot(Position(1, 1), None)  # type: ignore[arg-type]

    def test_transitions_return_new_values(self) -> None:
        robot = Robot(Position(2, 2), Facing.NORTH)

        moved = robot.moved_to(Position(3, 2))
        left = robot.turned_left()
        right = robot.turned_right()

        assert robot == Robot(Position(2, 2), Facing.NORTH)
        assert moved == Robot(Position(3, 2), Facing.NORTH)
        assert left == Robot(Position(2, 2), Facing.WEST)
        assert right == Robot(Position(2, 2), Facing.EAST)

    def test_frozen(self) -> None:
        robot = Robot(Position(1, 1), Facing.SOUTH)
        with pytest.raises(AttributeError):
            robot.facing = Facing.NORTH  # type: ignore[misc]

    @pytest.mark.parametrize("facing", list(Facing))
    def test_report_upper_case(self, facing: Facing) -> None:
        assert Robot(Position(3, 1), facing).report() == f"3,1,{facing.name}"
