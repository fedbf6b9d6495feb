# IN THIS FILE: POSITION, POSE, MOVE SNAPSHOTS

from typing import Optional

from martian_robots.utils.consts import LOST_SUFFIX
from martian_robots.utils.enums import Heading


class Position:
    """
    An integer grid coordinate.
    Immutable so it can be stored in the scent registry and compared by value.
    """

    __slots__ = ("_x", "_y")

    def __init__(self, x: int, y: int):
        self._x = x
        self._y = y

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def moved(self, heading: Heading) -> 'Position':
        """The neighbouring coordinate one step ahead when facing `heading`"""
        dx, dy = heading.step
        return Position(self._x + dx, self._y + dy)

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {"x": self._x, "y": self._y}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return False
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"Position(x={self._x}, y={self._y})"


class Pose:
    """Where a robot stands and which way it faces."""

    __slots__ = ("_position", "_heading")

    def __init__(self, position: Position, heading: Heading):
        self._position = position
        self._heading = heading

    @property
    def position(self) -> Position:
        return self._position

    @property
    def heading(self) -> Heading:
        return self._heading

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pose):
            return False
        return self._position == other._position and self._heading == other._heading

    def __hash__(self) -> int:
        return hash((self._position, self._heading))

    def __repr__(self) -> str:
        return f"Pose(x={self._position.x}, y={self._position.y}, h={self._heading.name})"


class Move:
    """
    One committed step in a robot's history.
    A robot that is lost never records another Move after the lost one.
    """

    __slots__ = ("_pose", "_lost")

    def __init__(self, pose: Pose, lost: bool = False):
        self._pose = pose
        self._lost = lost

    @property
    def pose(self) -> Pose:
        return self._pose

    @property
    def position(self) -> Position:
        return self._pose.position

    @property
    def heading(self) -> Heading:
        return self._pose.heading

    @property
    def lost(self) -> bool:
        return self._lost

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "x": self.position.x,
            "y": self.position.y,
            "heading": self.heading.letter,
            "lost": self._lost,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return False
        return self._pose == other._pose and self._lost == other._lost

    def __hash__(self) -> int:
        return hash((self._pose, self._lost))

    def __repr__(self) -> str:
        return (f"Move(x={self.position.x}, y={self.position.y}, "
                f"h={self.heading.name}, lost={self._lost})")


def apply_update(
    move: Move,
    position: Optional[Position] = None,
    heading: Optional[Heading] = None,
    lost: Optional[bool] = None,
) -> Move:
    """
    Build the next snapshot from `move`, replacing only the named fields.
    Fields left as None keep the value they have in `move`.
    """
    return Move(
        Pose(
            position if position is not None else move.position,
            heading if heading is not None else move.heading,
        ),
        lost if lost is not None else move.lost,
    )


def format_move(move: Move) -> str:
    """Render a snapshot as "<x> <y> <H>", plus " LOST" for a lost robot"""
    result = f"{move.position.x} {move.position.y} {move.heading.letter}"
    if move.lost:
        result += f" {LOST_SUFFIX}"
    return result
