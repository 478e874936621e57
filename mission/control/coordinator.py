# IN THIS FILE: DEPLOYING ROVERS, REPLAYING THEIR COMMANDS & COMPUTING COVERAGE

import logging
from typing import Iterable, List, Optional, Tuple

from mission.entities.grid import Grid
from mission.entities.rover import Rover
from mission.utils.consts import DEFAULT_BOUNDARY_POLICY, FIRST_ROVER_ID, MAX_COVERAGE_PERCENT
from mission.utils.enums import BoundaryPolicy, Command, Orientation, ValidationResult
from mission.utils.errors import InvalidRoverPositionError
from mission.utils.types import Position, Rollback, RoverReport, RoverSpec
from mission.validation.validator import GridValidator

logger = logging.getLogger(__name__)


class MissionCoordinator:
    """
    Owns the grid and the rovers deployed on it for one mission run.

    Rovers are handled one at a time: deploy, replay every command with a
    pull-back on invalid moves, then finalize. Only rovers whose deployment
    cell was valid ever join the managed set.
    """

    def __init__(
        self,
        grid: Grid,
        validator: Optional[GridValidator] = None,
        boundary_policy: BoundaryPolicy = DEFAULT_BOUNDARY_POLICY,
    ):
        self.grid = grid
        self.validator = validator or GridValidator()
        self.boundary_policy = boundary_policy
        self._rovers: List[Rover] = []

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def grid_width(self) -> int:
        return self.grid.width

    @property
    def grid_height(self) -> int:
        return self.grid.height

    @property
    def rovers(self) -> Tuple[Rover, ...]:
        """Managed rovers in deployment order"""
        return tuple(self._rovers)

    # -------------------------------------------------------------------------
    # Administration
    # -------------------------------------------------------------------------

    def add_rover(self, rover: Rover) -> None:
        """
        Manage an already built rover.
        Raises InvalidRoverPositionError if its cell is off-grid or taken.
        """
        result = self.check_rover_position(rover)
        if result is not ValidationResult.VALID:
            raise InvalidRoverPositionError(rover, result)
        self._rovers.append(rover)

    def clear_rovers(self) -> None:
        self._rovers.clear()

    def check_rover_position(self, rover: Rover) -> ValidationResult:
        return self.validator.validate(rover, self.grid, self._rovers)

    # -------------------------------------------------------------------------
    # Mission processing
    # -------------------------------------------------------------------------

    def process_mission(self, rover_specs: Iterable[RoverSpec]) -> List[RoverReport]:
        """
        Process every rover in input order. Ids start at FIRST_ROVER_ID and a
        rejected rover still uses up its id.
        """
        logger.info("Processing rover data...")
        logger.info("* Size of the grid : (%d,%d)", self.grid_width, self.grid_height)

        reports = []
        for rover_id, spec in enumerate(rover_specs, start=FIRST_ROVER_ID):
            report = self.deploy_and_move_rover(rover_id, spec.position, spec.orientation, spec.commands)
            reports.append(report)

        logger.info("Finished processing rover data.")
        return reports

    def deploy_and_move_rover(
        self,
        rover_id: int,
        position: Position,
        orientation: Orientation,
        commands: Iterable[Command],
    ) -> RoverReport:
        """
        Deploy a rover, replay its commands and finalize it.

        Returns:
            RoverReport; `deployed` is False when the initial cell was invalid
        """
        logger.info("* Established communication signal with rover %d.", rover_id)

        rover, result = self.deploy_rover(rover_id, position, orientation)
        if result is not ValidationResult.VALID:
            logger.warning("Rover %d rejected at deployment (%s): %s", rover_id, result.value, rover)
            logger.info("Terminated communication with rover %d.", rover_id)
            return RoverReport(
                rover_id=rover_id,
                deployed=False,
                x=rover.x,
                y=rover.y,
                orientation=rover.orientation,
                rejection_reason=result,
            )

        logger.info("Controlling rover %d...", rover_id)
        report = RoverReport(
            rover_id=rover_id,
            deployed=True,
            x=rover.x,
            y=rover.y,
            orientation=rover.orientation,
        )
        self.replay_commands(rover, commands, report)
        logger.info("Terminated communication with rover %d.", rover_id)

        self.finalize_rover(rover, report)
        return report

    def deploy_rover(
        self, rover_id: int, position: Position, orientation: Orientation
    ) -> Tuple[Rover, ValidationResult]:
        """Build the rover and check its landing cell. Does not manage it yet."""
        rover = Rover(rover_id, position.x, position.y, orientation)
        logger.info("Rover %d's initial state : %s", rover_id, rover)
        return rover, self.check_rover_position(rover)

    def replay_commands(self, rover: Rover, commands: Iterable[Command], report: RoverReport) -> None:
        """
        Apply each command and validate after it. Invalid moves are pulled back.
        Boundary violations stop the replay under BoundaryPolicy.HALT.
        """
        for step, command in enumerate(commands):
            rover.apply_command(command)
            report.commands_applied += 1

            result = self.check_rover_position(rover)
            if result is ValidationResult.VALID:
                continue

            logger.warning(
                "Rover %d: command %s at step %d led to %s, pulling back",
                rover.rover_id, command.value, step, result.value,
            )
            rover.move_backward()
            report.rollbacks.append(Rollback(step, command, result))

            if result is ValidationResult.OUT_OF_BOUNDS and self.boundary_policy is BoundaryPolicy.HALT:
                logger.warning("Rover %d: replay halted after leaving the grid", rover.rover_id)
                report.halted = True
                break

    def finalize_rover(self, rover: Rover, report: RoverReport) -> None:
        coverage = self.compute_rover_coverage_percent(rover)
        self._rovers.append(rover)

        report.x = rover.x
        report.y = rover.y
        report.orientation = rover.orientation
        report.coverage_percent = coverage

        logger.info("Rover %d's final state : %s", rover.rover_id, rover)
        logger.info("Rover %d's grid coverage : %s%%", rover.rover_id, coverage)

    def compute_rover_coverage_percent(self, rover: Rover) -> float:
        """
        Distinct cells visited over grid area, as a percentage capped at
        MAX_COVERAGE_PERCENT.
        """
        coverage = len(rover.visited_cells) / self.grid.area * 100
        return min(coverage, MAX_COVERAGE_PERCENT)
