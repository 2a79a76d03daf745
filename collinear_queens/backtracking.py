"""Backtracking search for N-Queens excluding any three collinear queens.

This module enumerates every placement of N queens on an N x N board such that
no two queens attack each other and no three queens lie on a common line. It
provides two entry points:

- CollinearQueens(n, ...): a search object owning its partial placement and
  counters. ``solutions()`` lazily yields each solution; ``place_queens()``
  prints every solution followed by a summary line.
- bt_count_solutions(size, time_limit=None, collinearity="slope"): counts
  solutions without printing and returns
        (solutions: int, nodes_explored: int, elapsed_seconds: float, timed_out: bool)

Implementation overview
-----------------------
- State representation: a partial placement is a list `placement` where
    `placement[c] = r` means a queen on row r, column c. Its length is the
    number of columns filled so far.
- Search strategy: depth-first search over columns 0..N-1 implemented
    iteratively with an explicit stack of `_Frame(column, next_row)` records,
    so large N never hits Python's recursion limit. Rows are tried in
    increasing order; solutions therefore come out in lexicographic order.
- Backtracking: every committed row is removed again (last element only) when
    the frame above it is popped, whether or not that branch found solutions.
- Feasibility: delegated to `collinear_queens.feasibility`; the collinearity
    predicate is chosen by name.

Contract (public API)
---------------------
- Input: `n >= 1` (ValueError otherwise, TypeError for non-integers).
- Determinism: equal inputs give the same solutions in the same order.
- Timeouts: if `time_limit` is not None and exceeded, the search stops at the
    next frame entry and `timed_out` is set. Without a limit the search always
    runs to completion.
- Nodes explored semantics: incremented every time a candidate (row, column)
    is evaluated, even if it is rejected immediately.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from time import perf_counter
from typing import Iterator, List, Optional, Tuple

from .feasibility import get_collinearity_test, is_feasible
from .reporting import SolutionPrinter

Solution = Tuple[int, ...]


@dataclass
class _Frame:
    """Mutable stack frame: the column being filled and the next row to try."""

    column: int
    next_row: int = 0


class CollinearQueens:
    """Search context for one N-Queens-without-collinear-triples enumeration.

    Parameters
    ----------
    n : int
        Board dimension N (number of queens), N >= 1.
    collinearity : str, default "slope"
        Collinearity predicate label, see `feasibility.get_collinearity_test`.
    time_limit : float | None
        Optional wall-clock limit in seconds.

    Notes
    -----
    A search object runs once. The counters describe that single run; build a
    new object to search again.
    """

    def __init__(self, n: int, collinearity: str = "slope", time_limit: Optional[float] = None):
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise TypeError(f"board dimension must be an integer, got {n!r}")
        if n <= 0:
            raise ValueError(f"{n} is an invalid value for dimension of chess board")
        self.n = int(n)
        self.collinearity = collinearity
        self._collinear = get_collinearity_test(collinearity)
        self.time_limit = time_limit
        self._placement: List[int] = []
        self._solution_count = 0
        self._nodes_explored = 0
        self._elapsed = 0.0
        self._timed_out = False
        self._started = False

    @property
    def solution_count(self) -> int:
        return self._solution_count

    @property
    def nodes_explored(self) -> int:
        return self._nodes_explored

    @property
    def elapsed(self) -> float:
        """Wall-clock seconds from the first ``next()`` until the generator finished.

        Measured inside the generator, so it includes time the consumer spends
        between solutions (printing, for example). ``time_limit`` is checked
        against the same clock. Zero before the search starts.
        """
        return self._elapsed

    @property
    def timed_out(self) -> bool:
        return self._timed_out

    def solutions(self) -> Iterator[Solution]:
        """Yield every solution as a tuple of 0-based rows indexed by column.

        The iterator is single-pass. Stopping early (``break`` or ``close()``)
        leaves the counters at the values reached so far.
        """
        if self._started:
            raise RuntimeError("search already started; create a new CollinearQueens to search again")
        self._started = True
        return self._search()

    def _search(self) -> Iterator[Solution]:
        n = self.n
        placement = self._placement
        collinear = self._collinear
        time_limit = self.time_limit
        stack: List[_Frame] = [_Frame(0)]
        start = perf_counter()

        try:
            while stack:
                if time_limit is not None and (perf_counter() - start) > time_limit:
                    self._timed_out = True
                    return

                frame = stack[-1]
                column = frame.column

                if column == n:
                    # Complete placement: report it, then undo the last queen.
                    self._solution_count += 1
                    yield tuple(placement)
                    stack.pop()
                    placement.pop()
                    continue

                if frame.next_row >= n:
                    # All rows tried for this column; backtrack.
                    stack.pop()
                    if column > 0:
                        placement.pop()
                    continue

                row = frame.next_row
                frame.next_row = row + 1
                self._nodes_explored += 1
                if is_feasible(placement, row, column, collinear):
                    placement.append(row)
                    stack.append(_Frame(column + 1))
        finally:
            placement.clear()
            self._elapsed = perf_counter() - start

    def place_queens(
        self,
        printer: Optional[SolutionPrinter] = None,
        show_solutions: bool = True,
        report_empty: bool = False,
    ) -> None:
        """Run the full search, printing each solution and then the summary.

        Parameters
        ----------
        printer : SolutionPrinter | None
            Output sink; defaults to stdout.
        show_solutions : bool
            When False only the summary line is printed.
        report_empty : bool
            Print the no-solution message before the summary when nothing
            was found.
        """
        printer = printer or SolutionPrinter()
        for solution in self.solutions():
            if show_solutions:
                printer.report(solution)
        if report_empty and self._solution_count == 0:
            printer.report_no_solution()
        printer.summary(self._solution_count, self.n)


def bt_count_solutions(
    size: int,
    time_limit: Optional[float] = None,
    collinearity: str = "slope",
) -> Tuple[int, int, float, bool]:
    """Count solutions without printing them.

    Returns
    -------
    (solutions, nodes_explored, elapsed_seconds, timed_out)
    """
    search = CollinearQueens(size, collinearity=collinearity, time_limit=time_limit)
    for _ in search.solutions():
        pass
    return search.solution_count, search.nodes_explored, search.elapsed, search.timed_out
