# IN THIS FILE: THE SHARED "SCENT" REGISTRY OF COORDINATES WHERE ROBOTS WERE LOST

import threading
from typing import List, Set

from martian_robots.utils.types import Position


class LossRegistry:
    """
    Records every off-grid coordinate at which a robot has been lost.

    A later robot trying to step onto one of these coordinates smells the
    scent and ignores the instruction instead of getting lost too.
    Matching is exact: a different coordinate on the same edge is not
    protected.

    Entries are only ever added. Callers that need isolated runs (tests,
    a fresh simulation) either build a new registry or call reset().
    """

    def __init__(self):
        self._positions: Set[Position] = set()
        self._lock = threading.Lock()

    def contains(self, position: Position) -> bool:
        with self._lock:
            return position in self._positions

    def add(self, position: Position) -> None:
        with self._lock:
            self._positions.add(position)

    def claim(self, position: Position) -> bool:
        """
        Atomic contains-then-add.

        Returns:
            True if no scent existed and `position` has now been recorded,
            False if an earlier robot already left a scent there.
        """
        with self._lock:
            if position in self._positions:
                return False
            self._positions.add(position)
            return True

    def reset(self) -> None:
        with self._lock:
            self._positions.clear()

    def positions(self) -> List[Position]:
        """Snapshot of the recorded scents, sorted for stable output"""
        with self._lock:
            return sorted(self._positions, key=lambda p: (p.x, p.y))

    def __contains__(self, position: object) -> bool:
        return isinstance(position, Position) and self.contains(position)

    def __len__(self) -> int:
        with self._lock:
            return len(self._positions)

    def __repr__(self) -> str:
        return f"LossRegistry(scents={len(self)})"


# Process-wide registry shared by every robot that isn't given its own
DEFAULT_REGISTRY = LossRegistry()
