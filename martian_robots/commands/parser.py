# martian_robots/commands/parser.py
from typing import List

from martian_robots.utils.consts import (
    MAX_INSTRUCTION_LENGTH,
    LENGTH_ERROR,
    CHARACTER_ERROR,
)
from martian_robots.utils.enums import Instruction
from martian_robots.utils.errors import InstructionError


class InstructionParser:
    """
    Validates an instruction string and turns it into Instruction values.

    Validation is all-or-nothing: the whole string is checked before a
    single Instruction is returned, so a robot never executes half of a
    bad string.
    """

    def parse(self, instructions: str) -> List[Instruction]:
        if not isinstance(instructions, str):
            raise TypeError(
                f"Instructions must be a string, not {type(instructions).__name__}"
            )

        if len(instructions) >= MAX_INSTRUCTION_LENGTH:
            raise InstructionError(LENGTH_ERROR)

        parsed = []
        for char in instructions:
            try:
                parsed.append(Instruction(char.upper()))
            except ValueError:
                raise InstructionError(CHARACTER_ERROR) from None
        return parsed


def parse_instructions(instructions: str) -> List[Instruction]:
    return InstructionParser().parse(instructions)
