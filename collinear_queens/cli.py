"""Command-line interface for the collinear-free N-Queens search.

This module wires together configuration loading, argument parsing and the
search itself. It isolates all console I/O decisions (exit codes, stderr
diagnostics) from the core modules so those stay easy to test
programmatically.

Usage::

    collinear-queens 8
    collinear-queens 10 --count-only --collinearity exact
    collinear-queens --sweep 9 --time-limit 30
"""
from __future__ import annotations

import argparse
import re
import sys
from typing import List, Optional

from . import settings
from .backtracking import CollinearQueens
from .feasibility import COLLINEARITY_MODES, get_collinearity_test
from .sweep import format_sweep_table, run_sweep
from config_manager import ConfigManager

USAGE_PROMPT = "Please provide an integer in command line as the number of queens."
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


# ------------- Utils --------------------------------------------------------

def parse_board_size(value: str) -> int:
    """Convert the positional argument to an integer.

    Only an optional sign followed by ASCII digits is accepted; surrounding
    whitespace and digit-group underscores are rejected. Raises ``ValueError``
    with the user-facing message otherwise.
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"Argument {value} must be an integer, i.e., number of queens.")
    return int(value)


def apply_configuration(config_path: str) -> ConfigManager:
    """Load configuration and copy its values into the ``settings`` module.

    Raises ``FileNotFoundError`` for a missing file and ``ValueError`` for
    values of the wrong shape.
    """
    config_mgr = ConfigManager(config_path)

    search_settings = config_mgr.get_search_settings()
    if search_settings:
        mode = str(search_settings.get("collinearity", settings.COLLINEARITY_MODE)).lower()
        get_collinearity_test(mode)
        settings.COLLINEARITY_MODE = mode
        if "time_limit" in search_settings:
            limit = search_settings["time_limit"]
            try:
                settings.set_time_limit(None if limit is None else float(limit))
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Invalid time_limit in configuration: {limit!r}") from exc

    sweep_settings = config_mgr.get_sweep_settings()
    if sweep_settings:
        try:
            n_values = [int(n) for n in sweep_settings.get("N_values", settings.SWEEP_N_VALUES)]
        except (TypeError, ValueError) as exc:
            raise ValueError("sweep_settings.N_values must be a list of integers") from exc
        if not n_values or any(n <= 0 for n in n_values):
            raise ValueError("sweep_settings.N_values must contain positive integers only")
        settings.SWEEP_N_VALUES = n_values

    return config_mgr


# ------------- Pipelines ---------------------------------------------------

def run_search(
    n: int,
    collinearity: str,
    time_limit: Optional[float],
    count_only: bool = False,
    report_empty: bool = False,
    verbose: bool = False,
) -> CollinearQueens:
    """Construct the search for ``n``, run it and print its output."""
    search = CollinearQueens(n, collinearity=collinearity, time_limit=time_limit)
    if verbose:
        limit = f"{time_limit}s" if time_limit else "unlimited"
        print(f"[Search] N={n}, collinearity={collinearity}, time limit={limit}", file=sys.stderr)
    search.place_queens(show_solutions=not count_only, report_empty=report_empty)
    if search.timed_out:
        print(
            f"Search stopped after {search.elapsed:.1f}s (time limit {time_limit}s); the count above is partial.",
            file=sys.stderr,
        )
    if verbose:
        print(
            f"[Search] nodes explored={search.nodes_explored}, time={search.elapsed:.4f}s",
            file=sys.stderr,
        )
    return search


def run_sweep_pipeline(
    n_values: List[int],
    collinearity: str,
    time_limit: Optional[float],
    verbose: bool = False,
) -> None:
    """Count solutions for each size and print the resulting table."""
    frame = run_sweep(n_values, time_limit=time_limit, collinearity=collinearity, progress=verbose)
    print(format_sweep_table(frame))


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="collinear-queens",
        description="Print every N-Queens solution in which no three queens are collinear.",
    )
    parser.add_argument("n", nargs="?", help="Number of queens (board dimension).")
    parser.add_argument(
        "--collinearity",
        choices=list(COLLINEARITY_MODES),
        default=None,
        help="Collinearity test: float slope equality (default) or exact integer cross product.",
    )
    parser.add_argument(
        "--time-limit",
        type=float,
        default=None,
        help="Stop the search after this many seconds (default: unlimited).",
    )
    parser.add_argument("--count-only", action="store_true", help="Print only the summary line.")
    parser.add_argument(
        "--report-empty",
        action="store_true",
        help="Print 'No solution exists.' before the summary when nothing is found.",
    )
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file.")
    parser.add_argument(
        "--sweep",
        action="store_true",
        help="Print a solution-count table for N=1..n (or the configured sizes when n is omitted).",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Print progress details to stderr.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch to the search or sweep."""
    parser = build_arg_parser()
    # Arguments after the board size are ignored.
    args, _ = parser.parse_known_args(argv)

    if args.config:
        try:
            apply_configuration(args.config)
        except (FileNotFoundError, ValueError) as exc:
            print(f"Configuration error: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc

    verbose = args.verbose or settings.VERBOSE
    collinearity = args.collinearity or settings.COLLINEARITY_MODE
    time_limit = settings.TIME_LIMIT
    if args.time_limit is not None:
        if args.time_limit < 0:
            print(f"Configuration error: time limit must be >= 0, got {args.time_limit}", file=sys.stderr)
            raise SystemExit(1)
        time_limit = args.time_limit or None

    n: Optional[int] = None
    if args.n is not None:
        try:
            n = parse_board_size(args.n)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            raise SystemExit(1) from exc

    try:
        if args.sweep:
            if n is not None and n <= 0:
                print(f"{n} is an invalid value for dimension of chess board", file=sys.stderr)
                raise SystemExit(1)
            n_values = list(range(1, n + 1)) if n is not None else settings.SWEEP_N_VALUES
            run_sweep_pipeline(n_values, collinearity, time_limit, verbose=verbose)
            return

        if n is None:
            print(USAGE_PROMPT)
            raise SystemExit(1)

        try:
            run_search(
                n,
                collinearity,
                time_limit,
                count_only=args.count_only,
                report_empty=args.report_empty,
                verbose=verbose,
            )
        except ValueError as exc:
            print(exc, file=sys.stderr)
            raise SystemExit(1) from exc
    except KeyboardInterrupt:
        print("\nSearch interrupted by user.", file=sys.stderr)
        raise SystemExit(130) from None
