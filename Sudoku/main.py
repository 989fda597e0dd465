#!/usr/bin/env python3
"""
Sudoku Solver - Main Entry Point

Usage:
    python -m Sudoku.main puzzles.txt            # every puzzle in the file
    python -m Sudoku.main - < puzzles.txt        # read from stdin
    python -m Sudoku.main puzzles.txt --first    # stop at the first solution
    python -m Sudoku.main --compare puzzles.txt  # compare cell orderings
    python -m Sudoku.main --size 16 big.txt      # 16x16 boards
"""

import sys
import os
from pathlib import Path

from .errors import SudokuError
from .loader import LoadedPuzzle, iter_puzzles
from .output import ConsoleReporter, RecordingReporter, SolutionFormatter
from .solver import ORDERINGS, PROGRESS_INTERVAL, Solver
from .diagnostics import SolverDiagnostics

# ============================================================================
# CONFIGURATION
# ============================================================================
INPUT_PATH = "-"              # Puzzle file to read by default ("-" = stdin)
OUTPUT_DIR = "data/solutions" # Base output directory
SAVE_OUTPUT = False           # Write solution.json / solution.txt per puzzle

GRID_SIZE = 9
# Board side length; must be a perfect square (4, 9, 16, 25, ...)

ORDERING = "mrv"
# Order in which empty cells are branched on
# - "mrv": fewest candidates first, sorted once before the search
# - "insertion": row-major, the order cells were read in
# - "dynamic": re-pick the most constrained cell at every level
# RECOMMENDED: "mrv"

MAX_SOLUTIONS = None
# Stop after this many solutions (None = enumerate all of them)

PROGRESS_INTERVAL_CALLS = PROGRESS_INTERVAL
# Print stats and the partial board every this many recursive calls

TIMEOUT_SECONDS = None
# Maximum time to spend on a single puzzle (None = no limit)
# ============================================================================


def read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, 'r') as f:
        return f.read()


def solve_puzzle(puzzle: LoadedPuzzle, number: int = 1, output_dir: str = None,
                 verbose: bool = False,
                 ordering: str = ORDERING,
                 max_solutions=MAX_SOLUTIONS,
                 progress_interval=PROGRESS_INTERVAL_CALLS,
                 timeout_seconds=TIMEOUT_SECONDS,
                 save_output: bool = SAVE_OUTPUT):
    """
    Solve one loaded puzzle, printing it and every solution found.

    Args:
        puzzle: Board populated by the loader
        number: Position of the puzzle in its input, used in headings
        output_dir: Directory for output files (default: OUTPUT_DIR/puzzle_<number>/)
        verbose: Print solver progress and statistics
        ordering: Cell ordering strategy
        max_solutions: Stop after this many solutions (None = all)
        progress_interval: Recursive calls between progress reports
        timeout_seconds: Maximum solving time in seconds
        save_output: Write JSON and text results to output_dir
    """
    reporter = ConsoleReporter()

    print(f"===== Puzzle {number} =====")
    reporter.on_parsed(puzzle.board)
    print("*** Solutions:")

    solver = Solver(
        puzzle,
        reporter=reporter,
        verbose=verbose,
        ordering=ordering,
        max_solutions=max_solutions,
        progress_interval=progress_interval,
    )

    try:
        result = solver.solve(timeout_seconds=timeout_seconds)
    except KeyboardInterrupt:
        print(f"\n\n{'='*60}")
        print("⚠ Solving interrupted by user (Ctrl+C)")
        print(f"{'='*60}")
        solver._print_stats()
        return None, solver

    print(f"{result.solutions_found} solutions\n")
    if result.cancelled:
        print("⚠ Search stopped before the search space was exhausted\n")

    if save_output:
        if output_dir is None:
            output_dir = Path(OUTPUT_DIR) / f"puzzle_{number}"
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        SolutionFormatter.save_solution(puzzle.board, result, str(output_dir / "solution.json"))
        SolutionFormatter.save_human_readable(puzzle.board, result.solutions,
                                              str(output_dir / "solution.txt"))

    if verbose:
        SolverDiagnostics.print_summary(solver, result)

    return result, solver


def solve_all_puzzles(text: str, size: int = GRID_SIZE, **kwargs):
    """
    Solve every puzzle in `text` in order.

    A loading error ends the run: the rest of the input can no longer be
    lined up with cell positions.
    """
    results = []
    try:
        for number, puzzle in enumerate(iter_puzzles(text, size), 1):
            result, _ = solve_puzzle(puzzle, number, **kwargs)
            if result is None:
                break
            results.append(result)
    except SudokuError as e:
        ConsoleReporter().on_error(e)
        return results, e

    return results, None


def run_comparison_test(text: str, size: int = GRID_SIZE, timeout_seconds=60):
    """
    Solve the first puzzle in `text` once per ordering and compare the work done.
    """
    rows = []

    print(f"\n{'='*60}")
    print("COMPARISON TEST")
    print(f"Testing {len(ORDERINGS)} cell orderings")
    print(f"{'='*60}\n")

    for ordering in ORDERINGS:
        puzzle = next(iter_puzzles(text, size), None)
        if puzzle is None:
            print("No puzzle found in input")
            return []

        reporter = RecordingReporter()
        solver = Solver(puzzle, reporter=reporter, ordering=ordering, max_solutions=1)
        result = solver.solve(timeout_seconds=timeout_seconds)

        rows.append({
            'ordering': ordering,
            'status': result.status,
            'calls': result.stats.calls,
            'checks': result.stats.checks,
            'depth': result.stats.depth,
            'elapsed': result.elapsed,
        })

    print(f"{'Ordering':<12} {'Result':<10} {'Calls':<12} {'Checks':<12} {'Depth':<7} {'Time':<8}")
    print(f"{'-'*12} {'-'*10} {'-'*12} {'-'*12} {'-'*7} {'-'*8}")
    for r in rows:
        print(f"{r['ordering']:<12} {r['status']:<10} {r['calls']:<12} {r['checks']:<12} "
              f"{r['depth']:<7} {r['elapsed']:<8.3f}")
    print(f"\n{'='*60}")

    return rows


def main(argv=None):
    """Main entry point"""
    args = list(sys.argv[1:] if argv is None else argv)

    size = GRID_SIZE
    max_solutions = MAX_SOLUTIONS
    compare = False
    path = None

    while args:
        arg = args.pop(0)
        if arg in ("--first", "-1"):
            max_solutions = 1
        elif arg in ("--compare", "-c"):
            compare = True
        elif arg == "--size":
            if not args:
                print("Usage: python -m Sudoku.main --size <N> [puzzles.txt]")
                sys.exit(1)
            value = args.pop(0)
            if not value.isdigit():
                print("Usage: python -m Sudoku.main --size <N> [puzzles.txt]")
                sys.exit(1)
            size = int(value)
        else:
            path = arg

    if path is None:
        path = INPUT_PATH

    if path != "-" and not os.path.exists(path):
        print(f"Error: File not found: {path}")
        sys.exit(1)

    try:
        text = read_input(path)
        if compare:
            run_comparison_test(text, size)
            return
        _, error = solve_all_puzzles(text, size, max_solutions=max_solutions)
    except SudokuError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if error is not None:
        sys.exit(1)


if __name__ == "__main__":
    main()
