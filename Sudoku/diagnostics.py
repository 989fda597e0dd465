"""
Diagnostics: check finished grids and explain what a search did
"""

from typing import List

import numpy as np

from .board import Board
from .constraints import format_mask


def _groups(grid: np.ndarray, block_size: int):
    size = grid.shape[0]
    for r in range(size):
        yield f"row {r}", grid[r, :]
    for c in range(size):
        yield f"col {c}", grid[:, c]
    for br in range(0, size, block_size):
        for bc in range(0, size, block_size):
            block = br + bc // block_size
            yield f"block {block}", grid[br:br + block_size, bc:bc + block_size].ravel()


def validate_solution(solution) -> List[str]:
    """
    List every group that does not hold each symbol 1..N exactly once.

    Accepts a Solution or a Board; an empty list means the grid is a valid
    completed Sudoku.
    """
    size = solution.size
    block_size = int(round(size ** 0.5))
    expected = np.arange(1, size + 1)
    problems = []
    for name, values in _groups(solution.grid, block_size):
        if not np.array_equal(np.sort(values), expected):
            missing = sorted(set(expected.tolist()) - set(values.tolist()))
            problems.append(f"{name}: missing {missing}")
    return problems


def is_valid_solution(solution) -> bool:
    return not validate_solution(solution)


def format_masks(board: Board) -> str:
    """Taken symbols for every row, column and block of the board."""
    lines = []
    for group in (board.rows, board.cols, board.blocks):
        lines.append(f"{group.kind}:")
        for i, mask in enumerate(group.masks):
            lines.append(f"  {i}: {format_mask(mask, board.size)}")
    return "\n".join(lines)


class SolverDiagnostics:
    @staticmethod
    def print_summary(solver, result) -> None:
        """Print what the search did and check every solution it kept."""
        board = solver.board
        print(f"\n{'='*60}")
        print("SOLVER DIAGNOSTICS")
        print(f"{'='*60}")
        print(f"Board: {board.size}x{board.size}, {len(solver.puzzle.solved)} givens, "
              f"{len(solver.puzzle.unsolved)} empty cells")
        print(f"Ordering: {solver.ordering}")
        print(f"Status: {result.status} in {result.elapsed:.3f}s")
        print(f"Depth: {result.stats.depth} | Checks: {result.stats.checks} | "
              f"Calls: {result.stats.calls}")

        if result.stats.calls:
            print(f"Checks per call: {result.stats.checks / result.stats.calls:.2f}")

        for i, solution in enumerate(result.solutions, 1):
            problems = validate_solution(solution)
            if problems:
                print(f"  ✗ Solution {i} breaks {len(problems)} group(s): {problems[:3]}")
            else:
                print(f"  ✓ Solution {i} valid")

        if result.status == 'exhausted':
            print("\n⚠️  SEARCH EXHAUSTED - the givens admit no completion")
        elif result.status == 'cancelled':
            print("\n⚠️  CANCELLED - search space not fully explored")
        print(f"{'='*60}\n")
