"""N-Queens search excluding any three collinear queens."""

from .backtracking import CollinearQueens, bt_count_solutions
from .feasibility import (
    get_collinearity_test,
    is_any3_collinear,
    is_any3_collinear_exact,
    is_attacked,
    is_feasible,
)
from .reporting import NO_SOLUTION, SolutionPrinter, format_solution, format_summary
from .utils import brute_force_solutions, collinear_triples, conflicts, is_valid_solution

__all__ = [
    "CollinearQueens",
    "bt_count_solutions",
    "get_collinearity_test",
    "is_any3_collinear",
    "is_any3_collinear_exact",
    "is_attacked",
    "is_feasible",
    "NO_SOLUTION",
    "SolutionPrinter",
    "format_solution",
    "format_summary",
    "brute_force_solutions",
    "collinear_triples",
    "conflicts",
    "is_valid_solution",
]
