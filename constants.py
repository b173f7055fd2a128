"""
Configuration constants for the grid search tools.

Everything tunable by the command line tools lives here. The log level can be
overridden through the LOG_LEVEL environment variable.
"""

import os

# =============================================================================
# Search methods
# =============================================================================

# Method names accepted on the command line
METHOD_BFS = "BFS"      # every path, needs an acyclic grid
METHOD_ASTAR = "AS"     # single shortest path
METHOD_COUNT = "COUNT"  # number of walks from the origin to dead ends, needs an acyclic grid

METHODS = (METHOD_BFS, METHOD_ASTAR, METHOD_COUNT)

# Methods that never terminate on a grid with cycles
ACYCLIC_ONLY_METHODS = (METHOD_BFS, METHOD_COUNT)

# =============================================================================
# Problem files
# =============================================================================

TEST_CASE_FOLDER = "Test_Cases"

WALL_CHAR = "#"
OPEN_CHAR = "."

# Move rules: 4 neighbours, 8 neighbours, or east/north only (acyclic)
MOVES_4 = "4"
MOVES_8 = "8"
MOVES_FORWARD = "forward"
MOVE_RULES = (MOVES_4, MOVES_8, MOVES_FORWARD)
DEFAULT_MOVES = MOVES_4

# =============================================================================
# Visualization
# =============================================================================

FIGURE_SIZE = (10, 8)
PATH_COLOR = "red"
WALL_COLOR = "dimgray"

# =============================================================================
# Logging
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
