"""Global defaults for searches started from the command line.

Values can be overridden at runtime via the configuration loader in
`collinear_queens.cli.apply_configuration` and, after that, by CLI flags.
"""
from __future__ import annotations

import sys
from typing import List, Optional

# Collinearity predicate used by the search ("slope" or "exact")
COLLINEARITY_MODE: str = "slope"

# Search time limit in seconds (None = no limit)
TIME_LIMIT: Optional[float] = None

# Board sizes counted by --sweep (in ascending order)
SWEEP_N_VALUES: List[int] = [1, 2, 3, 4, 5, 6, 7, 8]

# When True, progress and settings lines are printed to stderr
VERBOSE: bool = False


def set_time_limit(time_limit: Optional[float]) -> None:
    """Configure the search time limit.

    Parameters
    - time_limit: limit in seconds; None (or 0) disables the limit.

    Side effects
    - Updates the module-level global and, in verbose mode, prints the active
      limit to stderr.
    """
    global TIME_LIMIT
    if time_limit is not None and time_limit < 0:
        raise ValueError(f"time limit must be >= 0, got {time_limit}")
    TIME_LIMIT = time_limit or None

    if VERBOSE:
        print(
            f"Search time limit: {TIME_LIMIT}s" if TIME_LIMIT else "Search time limit: unlimited",
            file=sys.stderr,
        )
