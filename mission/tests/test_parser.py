import pytest

from mission.commands.parser import (
    parse_grid_line,
    parse_instructions,
    parse_mission_data,
    parse_rover_state,
    process_rover_data,
)
from mission.utils.enums import BoundaryPolicy, Command, Orientation
from mission.utils.errors import MissionDataError
from mission.utils.types import Position

MISSION = [
    "5 5",
    "1 2 N",
    "LMLMLMLMM",
    "3 3 E",
    "MMRMMRMRRM",
]


def test_process_rover_data():
    assert process_rover_data(MISSION) == ["1 3 N", "5 1 E"]


def test_rejected_rovers_are_left_out_of_output():
    lines = ["5 5", "1 2 N", "M", "1 3 E", "M", "9 9 N", "M", "0 0 E", "MM"]
    assert process_rover_data(lines) == ["1 3 N", "2 0 E"]


def test_boundary_policy_is_passed_through():
    lines = ["2 2", "0 0 N", "MMMRM"]
    assert process_rover_data(lines) == ["1 2 E"]
    assert process_rover_data(lines, BoundaryPolicy.HALT) == ["0 2 N"]


def test_parse_mission_data():
    width, height, specs = parse_mission_data(MISSION)
    assert (width, height) == (5, 5)
    assert len(specs) == 2
    assert specs[0].position == Position(1, 2)
    assert specs[0].orientation is Orientation.NORTH
    assert specs[1].commands[:3] == [Command.MOVE_FORWARD, Command.MOVE_FORWARD, Command.TURN_RIGHT]


def test_blank_instruction_line_means_no_commands():
    _, _, specs = parse_mission_data(["3 3", "1 1 W", ""])
    assert specs[0].commands == []


def test_trailing_blank_line_is_ignored():
    _, _, specs = parse_mission_data(MISSION + [""])
    assert len(specs) == 2


def test_parse_rover_state():
    assert parse_rover_state("3 4 S") == (Position(3, 4), Orientation.SOUTH)


def test_parse_instructions_strips_whitespace():
    assert parse_instructions("  LR\n") == [Command.TURN_LEFT, Command.TURN_RIGHT]


@pytest.mark.parametrize("line", ["5", "5 x", "5 5 5", "0 4", "4 -1"])
def test_bad_grid_line(line):
    with pytest.raises(MissionDataError):
        parse_grid_line(line)


@pytest.mark.parametrize("line", ["1 2", "1 b N", "1 2 Q", "1 2 NORTH"])
def test_bad_rover_state(line):
    with pytest.raises(MissionDataError):
        parse_rover_state(line)


def test_bad_instruction_letter():
    with pytest.raises(MissionDataError):
        parse_instructions("MMX")


def test_missing_instruction_line():
    with pytest.raises(MissionDataError):
        parse_mission_data(["5 5", "1 2 N", "M", "3 3 E"])


def test_empty_mission_data():
    with pytest.raises(MissionDataError):
        parse_mission_data([])


def test_mission_data_error_is_a_value_error():
    with pytest.raises(ValueError):
        process_rover_data(["5 5", "1 2 N", "Z"])
