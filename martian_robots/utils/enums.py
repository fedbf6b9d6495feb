# IN THIS FILE: HEADINGS and INSTRUCTIONS
from enum import Enum
from typing import Tuple

from martian_robots.utils.consts import HEADING_ERROR
from martian_robots.utils.errors import InstructionError


class Heading(Enum):
    """
    Robot facing direction.
    Declaration order is the compass order, so turning is just an
    index step around the cycle N -> E -> S -> W -> N.
    """
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @property
    def index(self) -> int:
        return _COMPASS.index(self)

    @property
    def letter(self) -> str:
        return self.value

    @property
    def step(self) -> Tuple[int, int]:
        """(dx, dy) of one forward move while facing this way"""
        return _STEPS[self]

    def turn_left(self) -> 'Heading':
        return _COMPASS[(self.index - 1) % 4]

    def turn_right(self) -> 'Heading':
        return _COMPASS[(self.index + 1) % 4]

    @staticmethod
    def from_letter(letter: str) -> 'Heading':
        """
        Parse a one-letter heading code, case-insensitive.

        Examples:
            "N" -> NORTH
            "w" -> WEST
        """
        if isinstance(letter, Heading):
            return letter
        if not isinstance(letter, str):
            raise InstructionError(HEADING_ERROR)
        try:
            return Heading(letter.upper())
        except ValueError:
            raise InstructionError(HEADING_ERROR) from None


_COMPASS = [Heading.NORTH, Heading.EAST, Heading.SOUTH, Heading.WEST]

_STEPS = {
    Heading.NORTH: (0, 1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, -1),
    Heading.WEST: (-1, 0),
}


class Instruction(Enum):
    """
    Single-character robot instructions.
    Value is the upper-case character accepted in instruction strings.
    """
    TURN_LEFT = "L"
    TURN_RIGHT = "R"
    FORWARD = "F"
