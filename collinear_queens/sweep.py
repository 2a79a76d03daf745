"""Solution counts across a range of board sizes.

Runs the counting search once per N (the search is deterministic, so one run
is enough) and shapes the results into a pandas DataFrame for console display.
"""
from __future__ import annotations

from typing import List, Optional, TypedDict

import pandas as pd

from .backtracking import bt_count_solutions
from .reporting import ProgressPrinter

SWEEP_COLUMNS = ["N", "solutions", "nodes", "time_s", "timed_out"]


class SweepEntry(TypedDict):
    N: int
    solutions: int
    nodes: int
    time_s: float
    timed_out: bool


def run_sweep(
    n_values: List[int],
    time_limit: Optional[float] = None,
    collinearity: str = "slope",
    progress: bool = False,
) -> pd.DataFrame:
    """Count solutions for every N in ``n_values``.

    Parameters
    ----------
    n_values : List[int]
        Board sizes, each >= 1. Duplicates are counted once, order preserved.
    time_limit : float | None
        Per-N limit in seconds; rows that hit it have ``timed_out`` set and a
        partial count.
    collinearity : str
        Collinearity predicate label.
    progress : bool
        Print a progress line to stderr after each N.

    Returns
    -------
    pd.DataFrame
        One row per N with columns ``N, solutions, nodes, time_s, timed_out``.
    """
    sizes = list(dict.fromkeys(int(n) for n in n_values))
    printer = ProgressPrinter(len(sizes), "Sweep") if progress else None
    rows: List[SweepEntry] = []
    for index, n in enumerate(sizes, start=1):
        count, nodes, elapsed, timed_out = bt_count_solutions(n, time_limit=time_limit, collinearity=collinearity)
        rows.append({"N": n, "solutions": count, "nodes": nodes, "time_s": elapsed, "timed_out": timed_out})
        if printer is not None:
            printer.update(index, f"N={n}: {count} solution(s)")
    return pd.DataFrame(rows, columns=SWEEP_COLUMNS)


def format_sweep_table(frame: pd.DataFrame) -> str:
    """Render a sweep DataFrame as a fixed-width console table."""
    return frame.to_string(index=False, formatters={"time_s": "{:.4f}".format})
