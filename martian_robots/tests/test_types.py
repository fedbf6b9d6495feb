"""Tests for headings, positions and move snapshots."""

import pytest

from martian_robots.utils.enums import Heading, Instruction
from martian_robots.utils.errors import InstructionError
from martian_robots.utils.types import Move, Pose, Position, apply_update, format_move


class TestHeading:

    @pytest.mark.parametrize("start, right", [
        (Heading.NORTH, Heading.EAST),
        (Heading.EAST, Heading.SOUTH),
        (Heading.SOUTH, Heading.WEST),
        (Heading.WEST, Heading.NORTH),
    ])
    def test_turn_right(self, start, right):
        assert start.turn_right() is right
        assert right.turn_left() is start

    def test_index_order(self):
        assert [h.index for h in Heading] == [0, 1, 2, 3]

    def test_steps(self):
        assert Heading.NORTH.step == (0, 1)
        assert Heading.EAST.step == (1, 0)
        assert Heading.SOUTH.step == (0, -1)
        assert Heading.WEST.step == (-1, 0)

    def test_from_letter(self):
        assert Heading.from_letter("S") is Heading.SOUTH
        assert Heading.from_letter("w") is Heading.WEST
        assert Heading.from_letter(Heading.EAST) is Heading.EAST

    @pytest.mark.parametrize("bad", ["X", "", "NE", 3, None])
    def test_from_letter_rejects(self, bad):
        with pytest.raises(InstructionError):
            Heading.from_letter(bad)

    def test_instruction_values(self):
        assert Instruction("L") is Instruction.TURN_LEFT
        assert Instruction("R") is Instruction.TURN_RIGHT
        assert Instruction("F") is Instruction.FORWARD


class TestPosition:

    def test_equality_and_hash(self):
        assert Position(3, 4) == Position(3, 4)
        assert hash(Position(3, 4)) == hash(Position(3, 4))
        assert Position(3, 4) != Position(4, 3)

    def test_moved(self):
        assert Position(0, 0).moved(Heading.WEST) == Position(-1, 0)
        assert Position(0, 0).moved(Heading.NORTH) == Position(0, 1)

    def test_immutable(self):
        p = Position(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5


class TestMove:

    def setup_method(self):
        self.move = Move(Pose(Position(2, 3), Heading.EAST))

    def test_update_heading_keeps_position(self):
        nxt = apply_update(self.move, heading=Heading.SOUTH)
        assert nxt.position == Position(2, 3)
        assert nxt.heading is Heading.SOUTH
        assert nxt.lost is False

    def test_update_position_keeps_heading(self):
        nxt = apply_update(self.move, position=Position(3, 3))
        assert nxt.heading is Heading.EAST

    def test_update_lost(self):
        assert apply_update(self.move, lost=True).lost is True

    def test_update_does_not_touch_original(self):
        apply_update(self.move, position=Position(9, 9), lost=True)
        assert self.move == Move(Pose(Position(2, 3), Heading.EAST))

    def test_format(self):
        assert format_move(self.move) == "2 3 E"
        assert format_move(apply_update(self.move, lost=True)) == "2 3 E LOST"

    def test_get_dict(self):
        assert self.move.get_dict() == {"x": 2, "y": 3, "heading": "E", "lost": False}
