# mission/commands/parser.py
"""
Text form of a mission.

    5 5            <- grid width and height
    1 2 N          <- rover 1 initial state
    LMLMLMLMM      <- rover 1 instructions
    3 3 E          <- rover 2 ...
    MMRMMRMRRM

Output is one "x y O" line per deployed rover, in deployment order.
"""
from typing import Iterable, List, Tuple

from mission.control.coordinator import MissionCoordinator
from mission.entities.grid import Grid
from mission.utils.consts import DEFAULT_BOUNDARY_POLICY, MIN_GRID_SIZE
from mission.utils.enums import BoundaryPolicy, Command, Orientation
from mission.utils.errors import MissionDataError
from mission.utils.types import Position, RoverReport, RoverSpec


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise MissionDataError(f"Invalid {what}: '{token}' is not an integer") from None


def parse_grid_line(line: str) -> Tuple[int, int]:
    parts = line.split()
    if len(parts) != 2:
        raise MissionDataError(f"Grid line must be '<width> <height>', got '{line.strip()}'")
    width = _parse_int(parts[0], "grid width")
    height = _parse_int(parts[1], "grid height")
    if width < MIN_GRID_SIZE or height < MIN_GRID_SIZE:
        raise MissionDataError(f"Grid must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, got {width}x{height}")
    return width, height


def parse_rover_state(line: str) -> Tuple[Position, Orientation]:
    parts = line.split()
    if len(parts) != 3:
        raise MissionDataError(f"Rover state must be '<x> <y> <N|E|S|W>', got '{line.strip()}'")
    x = _parse_int(parts[0], "rover x")
    y = _parse_int(parts[1], "rover y")
    try:
        orientation = Orientation.from_letter(parts[2])
    except ValueError as e:
        raise MissionDataError(str(e)) from None
    return Position(x, y), orientation


def parse_instructions(line: str) -> List[Command]:
    """One command per character; surrounding whitespace is ignored."""
    try:
        return [Command.from_letter(c) for c in line.strip()]
    except ValueError as e:
        raise MissionDataError(str(e)) from None


def parse_mission_data(lines: Iterable[str]) -> Tuple[int, int, List[RoverSpec]]:
    """
    Parse a whole mission.

    Returns:
        (grid width, grid height, rover specs in input order)
    """
    lines = [line.rstrip("\r\n") for line in lines]
    if not lines or not lines[0].strip():
        raise MissionDataError("Mission data is empty")

    width, height = parse_grid_line(lines[0])
    rover_lines = lines[1:]
    # A blank instruction line is a rover with no commands, but a stray
    # trailing blank line after the last pair is not
    if len(rover_lines) % 2 != 0 and not rover_lines[-1].strip():
        rover_lines.pop()
    if len(rover_lines) % 2 != 0:
        raise MissionDataError("Each rover needs a state line and an instruction line")

    specs = []
    for i in range(0, len(rover_lines), 2):
        position, orientation = parse_rover_state(rover_lines[i])
        commands = parse_instructions(rover_lines[i + 1])
        specs.append(RoverSpec(position, orientation, commands))
    return width, height, specs


def format_rover_state(report: RoverReport) -> str:
    return f"{report.x} {report.y} {report.orientation.letter}"


def process_rover_data(
    lines: Iterable[str], boundary_policy: BoundaryPolicy = DEFAULT_BOUNDARY_POLICY
) -> List[str]:
    """Run a text mission end to end on a fresh coordinator."""
    width, height, specs = parse_mission_data(lines)
    coordinator = MissionCoordinator(Grid(width, height), boundary_policy=boundary_policy)
    reports = coordinator.process_mission(specs)
    return [format_rover_state(r) for r in reports if r.deployed]
