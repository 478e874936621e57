# mission/entities/grid.py

from mission.utils.consts import MIN_GRID_SIZE
from mission.utils.types import Position


class Grid:
    """
    Represents the exploration grid.
    Dimensions are fixed for the whole run; valid cells are [0, width] x [0, height].
    """

    def __init__(self, width: int, height: int):
        if width < MIN_GRID_SIZE or height < MIN_GRID_SIZE:
            raise ValueError(f"Grid must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, got {width}x{height}")
        self.width = width
        self.height = height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_within_bounds(self, position: Position) -> bool:
        """
        Check if position lies on the grid.
        The upper bound is inclusive of width and height.
        """
        return 0 <= position.x <= self.width and 0 <= position.y <= self.height

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
