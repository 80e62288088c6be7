"""
Configuration constants for the pagegraph library.

All tunable parameters are defined here. Values that operators may want to
change without editing code are read from environment variables (a local
.env file is loaded first, if present).
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def env_int(name: str, default: int) -> int:
    """Read an integer from the environment, keeping default if unset or malformed."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}; using {default}")
        return default


# =============================================================================
# Traversal Configuration
# =============================================================================

# Distance reported for unreachable vertices and unknown labels
UNREACHABLE = -1

# =============================================================================
# Hamiltonian Solver Configuration
# =============================================================================

# Cost of moving between two consecutive vertices with no direct link.
# Kept well below int64 max / 64 so a full path of penalties cannot overflow.
NO_LINK_PENALTY = 1 << 32

# The DP table has n * 2^n cells; above this many vertices a warning is logged
HAMILTONIAN_WARN_VERTICES = env_int("PAGEGRAPH_HAMILTONIAN_WARN_VERTICES", 16)

# Above this many vertices the tables (two int64 arrays of n * 2^n cells,
# about 6 GB at 24) are not allocated and the search is skipped
HAMILTONIAN_MAX_VERTICES = env_int("PAGEGRAPH_HAMILTONIAN_MAX_VERTICES", 24)

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for applications embedding the library."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
