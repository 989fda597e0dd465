"""
Backtracking solver for N x N Sudoku

Depth-first search over the list of empty cells, placing and removing one
symbol per frame on a single shared board (no per-branch copies).

Cell ordering:
  - "mrv": sort empty cells once by fewest candidates before searching
  - "insertion": keep the row-major order the cells were read in
  - "dynamic": pick the empty cell with the fewest candidates at every level
"""

import sys
import time
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Optional

from .board import CellRef, Solution
from .loader import LoadedPuzzle
from .output import Reporter


ORDERINGS = ('mrv', 'insertion', 'dynamic')
PROGRESS_INTERVAL = 10_000_000


@dataclass
class Stats:
    depth: int = 0  # deepest recursion level reached
    checks: int = 0  # symbols tried
    calls: int = 0  # recursive calls made

    def as_dict(self) -> Dict[str, int]:
        return {'depth': self.depth, 'checks': self.checks, 'calls': self.calls}

    def snapshot(self) -> 'Stats':
        return replace(self)


@dataclass
class SearchResult:
    status: str  # "solved", "exhausted" or "cancelled"
    solutions: List[Solution] = field(default_factory=list)
    stats: Stats = field(default_factory=Stats)
    elapsed: float = 0.0
    solutions_found: int = 0
    cancelled: bool = False

    @property
    def solved(self) -> bool:
        return self.status == 'solved'

    @property
    def solution(self) -> Optional[Solution]:
        return self.solutions[0] if self.solutions else None


class Solver:
    def __init__(self, puzzle: LoadedPuzzle, reporter: Optional[Reporter] = None,
                 verbose: bool = False, ordering: str = 'mrv',
                 max_solutions: Optional[int] = None,
                 progress_interval: Optional[int] = PROGRESS_INTERVAL,
                 keep_solutions: bool = True):
        if ordering not in ORDERINGS:
            raise ValueError(f"unknown ordering {ordering!r}, expected one of {ORDERINGS}")
        if max_solutions is not None and max_solutions < 1:
            raise ValueError("max_solutions must be at least 1")

        self.puzzle = puzzle
        self.board = puzzle.board
        self.unsolved: List[CellRef] = puzzle.unsolved
        self.reporter = reporter or Reporter()
        self.verbose = verbose
        self.ordering = ordering
        self.max_solutions = max_solutions
        self.progress_interval = progress_interval
        self.keep_solutions = keep_solutions

        self.stats = Stats()
        self.solutions: List[Solution] = []
        self.solutions_found = 0
        self._stop = False
        self._cancelled = False
        self._deadline: Optional[float] = None
        self._should_stop: Optional[Callable[[], bool]] = None

    # -------------------------------------------------------------------------
    # Control
    # -------------------------------------------------------------------------
    def cancel(self) -> None:
        """Ask a running search to stop at its next recursive call."""
        self._cancelled = True
        self._stop = True

    def _halted(self) -> bool:
        if self._stop:
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._cancelled = True
        elif self._should_stop is not None and self._should_stop():
            self._cancelled = True
        self._stop = self._cancelled
        return self._stop

    # -------------------------------------------------------------------------
    # Main solving driver
    # -------------------------------------------------------------------------
    def solve(self, timeout_seconds: Optional[float] = None,
              should_stop: Optional[Callable[[], bool]] = None) -> SearchResult:
        """
        Search for solutions, reporting each one as it is found.

        Returns once the search space is exhausted, `max_solutions` have
        been found, or the search was cancelled. The board is back in its
        loaded state on return.

        Each call starts with the cancel flag cleared, so a `cancel()` made
        before `solve()` has no effect; cancel from a reporter hook, from
        another thread, or through `should_stop` once the search is running.
        """
        self.stats = Stats()
        self.solutions = []
        self.solutions_found = 0
        self._stop = False
        self._cancelled = False
        self._should_stop = should_stop
        self._deadline = None if timeout_seconds is None else time.monotonic() + timeout_seconds

        needed = self.board.num_cells + 100
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)

        if self.ordering == 'mrv':
            self.unsolved.sort(key=self.board.candidate_count)

        if self.verbose:
            print(f"Starting solver: {self.board!r}, {len(self.unsolved)} empty cells")
            print(f"Strategy: backtracking, {self.ordering} ordering\n")

        start = time.time()
        self._search(1)
        elapsed = time.time() - start

        if self.solutions_found:
            status = 'solved'
        elif self._cancelled:
            status = 'cancelled'
        else:
            status = 'exhausted'

        if self.verbose:
            if status == 'solved':
                print(f"\n✓ Found {self.solutions_found} solution(s)")
            elif status == 'cancelled':
                print("\n⚠ Search cancelled")
            else:
                print("\n✗ No solution found")
            self._print_stats()

        self.reporter.on_done(self.stats.snapshot())

        return SearchResult(
            status=status,
            solutions=list(self.solutions),
            stats=self.stats.snapshot(),
            elapsed=elapsed,
            solutions_found=self.solutions_found,
            cancelled=self._cancelled,
        )

    # -------------------------------------------------------------------------
    # Backtracking
    # -------------------------------------------------------------------------
    def _search(self, depth: int) -> None:
        if self._halted():
            return

        stats = self.stats
        if depth > stats.depth:
            stats.depth = depth
        stats.calls += 1

        if self.progress_interval and stats.calls % self.progress_interval == 0:
            self.reporter.on_progress(stats.snapshot(), self.board.snapshot())

        if not self.unsolved:
            self._emit_solution()
            return

        board = self.board
        position = self._next_position()
        cell = self.unsolved.pop(position)

        for symbol in range(1, board.size + 1):
            if self._stop:
                break
            stats.checks += 1
            if board.check(cell, symbol):
                board.place(cell, symbol)
                self._search(depth + 1)
                board.unplace(cell)

        self.unsolved.insert(position, cell)

    def _next_position(self) -> int:
        """Position in the unsolved list of the cell to branch on."""
        if self.ordering != 'dynamic':
            return 0

        best_pos, best_count = 0, None
        for pos, cell in enumerate(self.unsolved):
            count = self.board.candidate_count(cell)
            if count == 0:
                return pos
            if best_count is None or count < best_count:
                best_pos, best_count = pos, count
        return best_pos

    def _emit_solution(self) -> None:
        solution = self.board.snapshot()
        self.solutions_found += 1
        if self.keep_solutions:
            self.solutions.append(solution)
        if self.verbose:
            print(f"  Solution {self.solutions_found} at call {self.stats.calls}")
        self.reporter.on_solution(solution, self.stats.snapshot())
        if self.max_solutions is not None and self.solutions_found >= self.max_solutions:
            self._stop = True

    # -------------------------------------------------------------------------
    # Stats
    # -------------------------------------------------------------------------
    def _print_stats(self) -> None:
        """Print solving statistics."""
        print("\nSolving Statistics:")
        print(f"  Max depth: {self.stats.depth}")
        print(f"  Checks: {self.stats.checks}")
        print(f"  Calls: {self.stats.calls}")
        print(f"  Solutions: {self.solutions_found}")
