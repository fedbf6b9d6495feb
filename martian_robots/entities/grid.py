# martian_robots/entities/grid.py

from martian_robots.utils.consts import MIN_X, MIN_Y, MAX_X, MAX_Y
from martian_robots.utils.types import Position


class Grid:
    """
    The rectangular surface robots explore.
    Both corners are inclusive, so the default grid is 51x26 cells.
    """

    def __init__(
        self,
        min_x: int = MIN_X,
        min_y: int = MIN_Y,
        max_x: int = MAX_X,
        max_y: int = MAX_Y,
    ):
        self.min_x = min_x
        self.min_y = min_y
        self.max_x = max_x
        self.max_y = max_y

    def is_within_bounds(self, position: Position) -> bool:
        return (self.min_x <= position.x <= self.max_x and
                self.min_y <= position.y <= self.max_y)

    def get_dict(self) -> dict:
        return {
            "min": {"x": self.min_x, "y": self.min_y},
            "max": {"x": self.max_x, "y": self.max_y},
        }


# Grid bounds are global, every robot shares the same surface
MARS = Grid()
