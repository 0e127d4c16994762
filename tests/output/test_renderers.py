"""Tests for the Rich board and result renderers."""

from toyrobot.domain.board import Board
from toyrobot.domain.position import Position
from toyrobot.domain.types import Facing
from toyrobot.output.console import create_console, get_output
from toyrobot.output.renderers import render_board, render_result
from toyrobot.services.result import ServiceResult


class TestRenderBoard:
    def test_empty_board(self) -> None:
        assert render_board(Board(2, 3)) == "2 . . .\n1 . . .\n  1 2 3"

    def test_north_at_top(self) -> None:
        board = Board(3, 3)
        board.place_wall(Position(3, 1))
        board.place_robot(Position(1, 3), Facing.NORTH)
        lines = render_board(board).splitlines()
        assert lines[0] == "3 # . ."
        assert lines[2] == "1 . . ^"

    def test_robot_glyph_per_facing(self) -> None:
        board = Board(1, 1)
        for facing, glyph in [
            (Facing.NORTH, "^"),
            (Facing.SOUTH, "v"),
            (Facing.EAST, ">"),
            (Facing.WEST, "<"),
        ]:
            board.place_robot(Position(1, 1), facing)
            assert render_board(board).splitlines()[0] == f"1 {glyph}"

    def test_wide_board_alignment(self) -> None:
        lines = render_board(Board(1, 10)).splitlines()
        assert lines[0] == "1  .  .  .  .  .  .  .  .  .  ."
        assert lines[1] == "   1  2  3  4  5  6  7  8  9 10"


class TestRenderResult:
    def test_report_only_prints_report(self) -> None:
        result = ServiceResult(ok=True, op="report", data={"report": "3,3,EAST"})
        assert render_result(result) == "3,3,EAST"

    def test_empty_report_prints_nothing(self) -> None:
        result = ServiceResult(ok=True, op="report", data={"report": ""})
        assert render_result(result) == ""

    def test_generic_fields(self) -> None:
        result = ServiceResult(ok=True, op="place_wall", data={"row": 1, "col": 2})
        output = render_result(result)
        assert "row: 1" in output
        assert "col: 2" in output


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True, width=40)
        console.print("hello")
        assert get_output(console) == "hello\n"
