"""Tests for instruction parsing."""

import pytest

from martian_robots.commands.parser import parse_instructions
from martian_robots.utils.enums import Instruction
from martian_robots.utils.errors import InstructionError


def test_parses_in_order():
    assert parse_instructions("LRF") == [
        Instruction.TURN_LEFT,
        Instruction.TURN_RIGHT,
        Instruction.FORWARD,
    ]


def test_case_insensitive():
    assert parse_instructions("lRf") == parse_instructions("LRF")


def test_empty_string():
    assert parse_instructions("") == []


@pytest.mark.parametrize("bad", ["lfrflfrlflrz", "L R", "F|L", "ff\n"])
def test_rejects_other_characters(bad):
    with pytest.raises(InstructionError) as exc:
        parse_instructions(bad)
    assert str(exc.value) == "Instructions can only include a combination of L, R and F"


def test_rejects_bytes():
    with pytest.raises(TypeError):
        parse_instructions(b"LRF")
