import pytest

from mission.entities.grid import Grid
from mission.entities.rover import Rover
from mission.utils.enums import Orientation, ValidationResult
from mission.validation.validator import GridValidator


@pytest.fixture
def grid():
    return Grid(5, 5)


@pytest.fixture
def validator():
    return GridValidator()


@pytest.mark.parametrize("x, y", [(0, 0), (5, 5), (0, 5), (5, 0), (2, 3)])
def test_inside_grid_is_valid(validator, grid, x, y):
    rover = Rover(1, x, y, Orientation.NORTH)
    assert validator.validate(rover, grid, []) is ValidationResult.VALID


@pytest.mark.parametrize("x, y", [(6, 0), (0, 6), (-1, 0), (0, -1), (9, 9)])
def test_outside_grid(validator, grid, x, y):
    rover = Rover(1, x, y, Orientation.NORTH)
    assert validator.validate(rover, grid, []) is ValidationResult.OUT_OF_BOUNDS


def test_occupied_by_other_rover(validator, grid):
    parked = Rover(1, 2, 2, Orientation.EAST)
    rover = Rover(2, 2, 2, Orientation.NORTH)
    assert validator.validate(rover, grid, [parked]) is ValidationResult.POSITION_OCCUPIED


def test_rover_does_not_collide_with_itself(validator, grid):
    rover = Rover(1, 2, 2, Orientation.NORTH)
    assert validator.validate(rover, grid, [rover]) is ValidationResult.VALID


def test_bounds_checked_before_occupancy(validator):
    grid = Grid(1, 1)
    parked = Rover(1, 3, 3, Orientation.NORTH)
    rover = Rover(2, 3, 3, Orientation.NORTH)
    assert validator.validate(rover, grid, [parked]) is ValidationResult.OUT_OF_BOUNDS


def test_validate_does_not_move_rover(validator, grid):
    parked = Rover(1, 1, 1, Orientation.NORTH)
    rover = Rover(2, 1, 1, Orientation.NORTH)
    validator.validate(rover, grid, [parked])
    assert (rover.x, rover.y, rover.orientation) == (1, 1, Orientation.NORTH)


def test_grid_rejects_empty_dimensions():
    with pytest.raises(ValueError):
        Grid(0, 3)
