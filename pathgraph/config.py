"""
Configuration constants for pathgraph.

All defaults and tunable parameters are defined here.
Values can be overridden from the environment or a local .env file.
"""

import math
import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathgraph/
PROJECT_ROOT = Path(__file__).parent.parent

# Optional .env next to the project (never required)
load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Graph Configuration
# =============================================================================

# Weight given to edges when none is specified
DEFAULT_EDGE_WEIGHT = 1

# Weight reported by edges touching a blocked node
BLOCKED_WEIGHT = math.inf

# Default node size (only used by rendering collaborators)
NODE_SIZE = 10

# =============================================================================
# Grid Configuration
# =============================================================================

# Pixel size of one grid cell; node x/y are cell centres
CELL_SIZE = 25

# Fraction of cells blocked by random_blocked_mask() when not specified
DEFAULT_BLOCK_DENSITY = 0.2

# =============================================================================
# Search Configuration
# =============================================================================

# Number of A* steps performed per host tick (one frame = N steps)
STEPS_PER_TICK = int(os.environ.get("PATHGRAPH_STEPS_PER_TICK", "10"))

# Heuristic used by scripts when none is given
DEFAULT_METRIC = os.environ.get("PATHGRAPH_METRIC", "euclidean")

# Upper bound on steps for scripted run-to-completion
MAX_SEARCH_STEPS = 1_000_000

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
