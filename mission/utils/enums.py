# IN THIS FILE: ORIENTATIONS, COMMANDS, VALIDATION OUTCOMES and BOUNDARY POLICIES
from enum import Enum
from typing import Tuple


class Orientation(int, Enum):
    """
    Rover facing direction on the grid.
    Values run clockwise so a rotation is a step of +/-1 modulo 4.
    """
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def __int__(self):
        return self.value

    def turn_left(self) -> 'Orientation':
        """NORTH -> WEST -> SOUTH -> EAST -> NORTH"""
        return Orientation((self.value - 1) % 4)

    def turn_right(self) -> 'Orientation':
        """NORTH -> EAST -> SOUTH -> WEST -> NORTH"""
        return Orientation((self.value + 1) % 4)

    @property
    def delta(self) -> Tuple[int, int]:
        """
        Unit movement vector for a forward move.

        Examples:
            NORTH -> (0, 1)
            WEST  -> (-1, 0)
        """
        return ORIENTATION_DELTAS[self]

    @property
    def letter(self) -> str:
        return self.name[0]

    @staticmethod
    def from_letter(letter: str) -> 'Orientation':
        for orientation in Orientation:
            if orientation.letter == letter:
                return orientation
        raise ValueError(f"Unknown orientation '{letter}' (expected one of N, E, S, W)")


ORIENTATION_DELTAS = {
    Orientation.NORTH: (0, 1),
    Orientation.EAST: (1, 0),
    Orientation.SOUTH: (0, -1),
    Orientation.WEST: (-1, 0),
}


class Command(Enum):
    """
    Rover instructions.
    Value is the letter used in instruction strings.
    """
    MOVE_FORWARD = "M"
    TURN_LEFT = "L"
    TURN_RIGHT = "R"

    @staticmethod
    def from_letter(letter: str) -> 'Command':
        try:
            return Command(letter)
        except ValueError:
            raise ValueError(f"Unknown command '{letter}' (expected one of L, R, M)") from None


class ValidationResult(Enum):
    """Outcome of checking a rover's current cell."""
    VALID = "valid"
    OUT_OF_BOUNDS = "out_of_bounds"
    POSITION_OCCUPIED = "position_occupied"


class BoundaryPolicy(Enum):
    """
    What the coordinator does after pulling a rover back from outside the grid.
    ROLLBACK keeps replaying the remaining commands, HALT drops them.
    """
    ROLLBACK = "rollback"
    HALT = "halt"
