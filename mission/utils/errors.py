# IN THIS FILE: MISSION EXCEPTIONS

from mission.utils.enums import ValidationResult


class MissionError(Exception):
    pass


class InvalidRoverPositionError(MissionError):
    """
    Raised when a rover would enter the managed set from an invalid cell.
    """

    def __init__(self, rover, reason: ValidationResult, message: str = ""):
        self.rover = rover
        self.reason = reason
        super().__init__(message or f"Rover {rover.rover_id} at {rover.position}: {reason.value}")


class MissionDataError(MissionError, ValueError):
    """Malformed mission input (grid line, rover state or instruction string)."""
    pass
