# main.py
import argparse
import logging
import sys
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from mission.commands.parser import (
    format_rover_state,
    parse_instructions,
    process_rover_data,
)
from mission.control.coordinator import MissionCoordinator
from mission.entities.grid import Grid
from mission.utils.consts import DEFAULT_BOUNDARY_POLICY, LOG_FORMAT, SERVER_HOST, SERVER_PORT
from mission.utils.enums import BoundaryPolicy, Orientation
from mission.utils.types import Position, RoverSpec

app = FastAPI(title="Mission Command Center")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class RoverInput(BaseModel):
    x: int
    y: int
    o: str                  # N / E / S / W
    instructions: str = ""  # L / R / M

class MissionInput(BaseModel):
    grid_width: int
    grid_height: int
    rovers: List[RoverInput]
    boundary_policy: Optional[str] = DEFAULT_BOUNDARY_POLICY.value

class RawMissionInput(BaseModel):
    # Same lines as a mission data file
    lines: List[str]
    boundary_policy: Optional[str] = DEFAULT_BOUNDARY_POLICY.value

class RollbackOutput(BaseModel):
    step: int
    command: str
    reason: str

class RoverOutput(BaseModel):
    id: int
    deployed: bool
    x: int
    y: int
    o: str
    rejection_reason: Optional[str] = None
    coverage: float
    commands_applied: int
    halted: bool
    rollbacks: List[RollbackOutput]
    visited: List[List[int]] = []

class MissionOutput(BaseModel):
    rovers: List[RoverOutput]
    output: List[str]

class RawMissionOutput(BaseModel):
    output: List[str]


# =============================================================================
# CORE
# =============================================================================

def run_mission(
    grid_width: int,
    grid_height: int,
    rovers_data: List[dict],
    boundary_policy: BoundaryPolicy = DEFAULT_BOUNDARY_POLICY,
) -> dict:
    """
    Run one mission on a fresh coordinator.
    Raises ValueError on a bad grid, orientation letter or command letter.
    """
    grid = Grid(grid_width, grid_height)
    specs = [
        RoverSpec(
            Position(r["x"], r["y"]),
            Orientation.from_letter(r["o"]),
            parse_instructions(r["instructions"]),
        )
        for r in rovers_data
    ]

    coordinator = MissionCoordinator(grid, boundary_policy=boundary_policy)
    reports = coordinator.process_mission(specs)

    visited = {
        rover.rover_id: sorted(list(p.as_tuple()) for p in rover.visited_cells)
        for rover in coordinator.rovers
    }
    rovers_out = []
    for report in reports:
        entry = report.get_dict()
        entry["visited"] = visited.get(report.rover_id, [])
        rovers_out.append(entry)

    return {
        "rovers": rovers_out,
        "output": [format_rover_state(r) for r in reports if r.deployed],
    }


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/status")
def health_check():
    return {"status": "ok", "message": "Mission command center is running"}


@app.post("/mission", response_model=MissionOutput)
def compute_mission(input_data: MissionInput):
    try:
        rovers_data = [
            {"x": r.x, "y": r.y, "o": r.o, "instructions": r.instructions}
            for r in input_data.rovers
        ]
        return run_mission(
            input_data.grid_width,
            input_data.grid_height,
            rovers_data,
            BoundaryPolicy(input_data.boundary_policy),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        import traceback; traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/mission/raw", response_model=RawMissionOutput)
def compute_raw_mission(input_data: RawMissionInput):
    try:
        output = process_rover_data(input_data.lines, BoundaryPolicy(input_data.boundary_policy))
        return {"output": output}
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        import traceback; traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(e))


# =============================================================================
# CLI
# =============================================================================

def run_file(path: str, boundary_policy: BoundaryPolicy) -> int:
    try:
        with open(path) as f:
            lines = f.read().splitlines()
    except OSError as e:
        print(f"Error reading mission data {path}: {e}", file=sys.stderr)
        return 1

    try:
        output = process_rover_data(lines, boundary_policy)
    except ValueError as e:
        print(f"Error: invalid mission data: {e}", file=sys.stderr)
        return 1

    for line in output:
        print(line)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    parser = argparse.ArgumentParser(description="Mars rover mission command center.")
    sub = parser.add_subparsers(dest="mode")
    serve = sub.add_parser("serve", help="Start the HTTP server (default).")
    serve.add_argument("--host", default=SERVER_HOST)
    serve.add_argument("--port", type=int, default=SERVER_PORT)
    run = sub.add_parser("run", help="Process a mission data file and print final rover states.")
    run.add_argument("path", help="Mission data file (grid line, then state/instruction line pairs).")
    run.add_argument(
        "--boundary-policy",
        choices=[p.value for p in BoundaryPolicy],
        default=DEFAULT_BOUNDARY_POLICY.value,
        help="What to do after pulling a rover back from outside the grid.",
    )

    args = parser.parse_args()

    if args.mode == "run":
        sys.exit(run_file(args.path, BoundaryPolicy(args.boundary_policy)))
    else:
        host = getattr(args, "host", SERVER_HOST)
        port = getattr(args, "port", SERVER_PORT)
        uvicorn.run(app, host=host, port=port)
