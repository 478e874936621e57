# IN THIS FILE: ALL CONSTANTS

from mission.utils.enums import BoundaryPolicy

# -----------------------------------------------------------------------------
# 1. GRID
# -----------------------------------------------------------------------------
# Smallest accepted grid extent on either axis.
MIN_GRID_SIZE = 1

# -----------------------------------------------------------------------------
# 2. MISSION RULES
# -----------------------------------------------------------------------------
# Applied when a move would take a rover off the grid.
DEFAULT_BOUNDARY_POLICY = BoundaryPolicy.ROLLBACK

# Coverage is reported as a percentage and never exceeds this value.
# The grid accepts coordinates 0..width inclusive, so a rover can touch more
# cells than width * height.
MAX_COVERAGE_PERCENT = 100.0

# First id handed out when a batch of rovers is processed.
FIRST_ROVER_ID = 1

# -----------------------------------------------------------------------------
# 3. SERVER
# -----------------------------------------------------------------------------
SERVER_HOST = "0.0.0.0"
SERVER_PORT = 5000
API_URL = f"http://localhost:{SERVER_PORT}/mission"

# -----------------------------------------------------------------------------
# 4. LOGGING
# -----------------------------------------------------------------------------
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
