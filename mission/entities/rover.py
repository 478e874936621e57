# IN THIS FILE: TRACKING A ROVER'S CURRENT STATE & VISITED CELLS

from typing import FrozenSet

from mission.utils.enums import Command, Orientation
from mission.utils.types import Position


class Rover:
    """
    A rover deployed on the grid.
    Knows nothing about bounds or other rovers; the coordinator validates it.
    """

    def __init__(self, rover_id: int, x: int, y: int, orientation: Orientation):
        """
        Initialize rover at its deployment cell.

        Args:
            rover_id: Unique positive id
            x, y: Grid coordinates
            orientation: Initial facing direction
        """
        if rover_id < 1:
            raise ValueError(f"Rover id must be positive, got {rover_id}")
        self._rover_id = rover_id
        self._position = Position(x, y)
        self._orientation = orientation
        self._visited_cells = {self._position}

    @property
    def rover_id(self) -> int:
        return self._rover_id

    @property
    def position(self) -> Position:
        return self._position

    @property
    def x(self) -> int:
        return self._position.x

    @property
    def y(self) -> int:
        return self._position.y

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def visited_cells(self) -> FrozenSet[Position]:
        return frozenset(self._visited_cells)

    def apply_command(self, command: Command) -> None:
        """
        Turn or move one cell forward, then record the current cell as visited.
        """
        if command is Command.TURN_LEFT:
            self._orientation = self._orientation.turn_left()
        elif command is Command.TURN_RIGHT:
            self._orientation = self._orientation.turn_right()
        elif command is Command.MOVE_FORWARD:
            dx, dy = self._orientation.delta
            self._position = self._position.offset(dx, dy)
        else:
            raise ValueError(f"Unsupported command: {command!r}")
        self._visited_cells.add(self._position)

    def move_backward(self) -> None:
        """
        Pull the rover back one cell against its current orientation.

        Only used to undo a forward move that landed on an invalid cell, so that
        cell is also dropped from the visited set.
        """
        self._visited_cells.discard(self._position)
        dx, dy = self._orientation.delta
        self._position = self._position.offset(-dx, -dy)
        self._visited_cells.add(self._position)

    def __repr__(self) -> str:
        return f"Rover(id={self._rover_id}, x={self.x}, y={self.y}, o={self._orientation.letter})"
