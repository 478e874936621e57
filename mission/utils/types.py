# IN THIS FILE: POSITION, ROVER SPECS and MISSION REPORTS

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from mission.utils.enums import Command, Orientation, ValidationResult


class Position:
    """
    Grid-relative integer cell coordinates.
    Validity against a grid is checked at runtime by the validator, not here.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def offset(self, dx: int, dy: int) -> 'Position':
        """Return a new position shifted by (dx, dy)"""
        return Position(self.x + dx, self.y + dy)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        """Allow Position to be used in visited-cell sets"""
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"


@dataclass
class RoverSpec:
    """Parsed input for one rover: where it lands and what it is told to do."""
    position: Position
    orientation: Orientation
    commands: List[Command] = field(default_factory=list)


@dataclass
class Rollback:
    """A command that was undone because it left the rover on an invalid cell."""
    step: int                   # 0-based index in the instruction string
    command: Command
    reason: ValidationResult


@dataclass
class RoverReport:
    """
    Result of processing one rover.
    A rejected rover keeps its initial state and has no coverage.
    """
    rover_id: int
    deployed: bool
    x: int
    y: int
    orientation: Orientation
    rejection_reason: Optional[ValidationResult] = None
    coverage_percent: float = 0.0
    commands_applied: int = 0
    halted: bool = False
    rollbacks: List[Rollback] = field(default_factory=list)

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "id": self.rover_id,
            "deployed": self.deployed,
            "x": self.x,
            "y": self.y,
            "o": self.orientation.letter,
            "rejection_reason": self.rejection_reason.value if self.rejection_reason is not None else None,
            "coverage": self.coverage_percent,
            "commands_applied": self.commands_applied,
            "halted": self.halted,
            "rollbacks": [
                {"step": r.step, "command": r.command.value, "reason": r.reason.value}
                for r in self.rollbacks
            ],
        }
