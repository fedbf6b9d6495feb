# IN THIS FILE: TRACKING ROBOT'S CURRENT STATE & MOVEMENT HISTORY

import threading
from typing import List, Mapping, Optional, Tuple, Union

from martian_robots.commands.parser import InstructionParser
from martian_robots.entities.grid import Grid, MARS
from martian_robots.entities.scents import DEFAULT_REGISTRY, LossRegistry
from martian_robots.utils.consts import DEFAULT_X, DEFAULT_Y, DEFAULT_HEADING
from martian_robots.utils.enums import Heading, Instruction
from martian_robots.utils.types import (
    Move,
    Pose,
    Position,
    apply_update,
    format_move,
)


class Robot:
    """
    A single robot exploring the grid.

    States are Active and Lost. Lost is terminal: it is entered only by a
    forward move off the grid at a coordinate nobody has been lost at
    before, and a lost robot ignores every instruction afterwards.
    """

    def __init__(
        self,
        x: int = DEFAULT_X,
        y: int = DEFAULT_Y,
        heading: Union[Heading, str] = Heading.NORTH,
        registry: Optional[LossRegistry] = None,
        grid: Grid = MARS,
    ):
        """
        Initialize robot at starting position.

        Args:
            x, y: Grid coordinates
            heading: Initial facing direction, a Heading or its letter code
            registry: Scent registry shared with other robots. Defaults to
                      the process-wide registry.
            grid: Surface the robot moves on
        """
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.grid = grid
        self._parser = InstructionParser()
        # Held for a whole instruct() so concurrent callers can't interleave commits
        self._lock = threading.Lock()
        start = Pose(Position(x, y), Heading.from_letter(heading))
        self._moves: List[Move] = [Move(start, lost=False)]

    @property
    def current(self) -> Move:
        return self._moves[-1]

    @property
    def lost(self) -> bool:
        return self.current.lost

    @property
    def history(self) -> Tuple[Move, ...]:
        """Every committed snapshot, oldest first"""
        return tuple(self._moves)

    def instruct(self, instructions: str) -> str:
        """
        Run a string of L/R/F instructions and report where the robot ended up.

        Raises:
            TypeError: `instructions` is not a string
            InstructionError: the string is too long or has characters
                              other than L, R and F
        """
        # Parse everything first; a rejected string must not move the robot
        parsed = self._parser.parse(instructions)

        with self._lock:
            for instruction in parsed:
                if instruction is Instruction.TURN_LEFT:
                    self._turn_left()
                elif instruction is Instruction.TURN_RIGHT:
                    self._turn_right()
                elif instruction is Instruction.FORWARD:
                    self._forward()

            return format_move(self.current)

    def _turn_left(self) -> None:
        self._commit(heading=self.current.heading.turn_left())

    def _turn_right(self) -> None:
        self._commit(heading=self.current.heading.turn_right())

    def _forward(self) -> None:
        last = self.current
        self._commit(position=last.position.moved(last.heading))

    def _commit(
        self,
        position: Optional[Position] = None,
        heading: Optional[Heading] = None,
    ) -> None:
        last = self.current
        if last.lost:
            return

        move = apply_update(last, position=position, heading=heading)

        if self.grid.is_within_bounds(move.position):
            self._moves.append(move)
        elif self.registry.claim(move.position):
            self._moves.append(apply_update(move, lost=True))
        # else: a previous robot left a scent here, drop the move

    def __repr__(self) -> str:
        return f"Robot({format_move(self.current)!r})"


def create(
    options: Optional[Mapping] = None,
    registry: Optional[LossRegistry] = None,
) -> Robot:
    """
    Build a robot from an options mapping.

    Recognised keys are `x`, `y` and `heading` ("N", "E", "S" or "W").
    Unknown keys are ignored and missing ones fall back to (0, 0, N).
    """
    options = options or {}
    return Robot(
        x=options.get("x", DEFAULT_X),
        y=options.get("y", DEFAULT_Y),
        heading=options.get("heading", DEFAULT_HEADING),
        registry=registry,
    )
