"""Console formatting for solutions, summaries and progress lines.

Solution lines use 1-based ``(row, col)`` pairs in increasing column order::

    (2, 1) (4, 2) (1, 3) (3, 4)

Only this module converts from the 0-based internal encoding.
"""
from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

NO_SOLUTION = "No solution exists."


def format_solution(placement: Sequence[int]) -> str:
    """Render a placement, or the no-solution message when it is empty."""
    if not placement:
        return NO_SOLUTION
    return " ".join(f"({row + 1}, {col + 1})" for col, row in enumerate(placement))


def format_summary(count: int, n: int) -> str:
    return f"{count} solution(s) found for {n} Queens problem, excluding any 3 collinear."


class SolutionPrinter:
    """Write solution lines to a text stream as they are produced.

    Parameters
    ----------
    stream : TextIO | None
        Destination; ``None`` means the current ``sys.stdout`` at call time so
        that redirection (e.g. in tests) is honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def report(self, placement: Sequence[int]) -> None:
        print(format_solution(placement), file=self.stream)

    def report_no_solution(self) -> None:
        print(NO_SOLUTION, file=self.stream)

    def summary(self, count: int, n: int) -> None:
        print(format_summary(count, n), file=self.stream)


class ProgressPrinter:
    """Minimal progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps expected. Values <= 0 are coerced to 1 to avoid
        division by zero when reporting percentages.
    label : str
        Short label printed in front of the counters.
    stream : TextIO | None
        Destination, ``sys.stderr`` by default so stdout carries only results.
    """

    def __init__(self, total: int, label: str, stream: Optional[TextIO] = None):
        self.total = max(1, total)
        self.label = label
        self._stream = stream

    def update(self, index: int, detail: str = "") -> None:
        """Print a single progress line; ``index`` above ``total`` prints >100%."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        stream = self._stream if self._stream is not None else sys.stderr
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix, file=stream)
