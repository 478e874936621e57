# mission/validation/validator.py

from typing import Iterable

from mission.entities.grid import Grid
from mission.entities.rover import Rover
from mission.utils.enums import ValidationResult


class GridValidator:
    """
    Classifies a rover's current cell. Never moves the rover.
    """

    def validate(self, rover: Rover, grid: Grid, all_rovers: Iterable[Rover]) -> ValidationResult:
        # Grid bounds first
        if not grid.is_within_bounds(rover.position):
            return ValidationResult.OUT_OF_BOUNDS

        for other in all_rovers:
            if other is rover:
                continue
            if other.position == rover.position:
                return ValidationResult.POSITION_OCCUPIED

        return ValidationResult.VALID
