"""
Core data structures for Sudoku board representation
"""
import math
import operator
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .constraints import ConstraintSet, mask_has, symbol_bit
from .errors import MalformedSize


EMPTY = 0


def render_values(values, size: int, blank: Optional[str] = None) -> str:
    """
    Board text: one line per row, values joined by a single space,
    newline after every row. `blank` replaces 0 when given.
    """
    lines = []
    for start in range(0, size * size, size):
        row = values[start:start + size]
        lines.append(' '.join(
            blank if (blank is not None and v == EMPTY) else str(int(v)) for v in row
        ))
    return ''.join(line + '\n' for line in lines)


@dataclass(frozen=True)
class CellRef:
    """Position of one cell: linear index plus its row, column and block"""
    index: int
    row: int
    col: int
    block: int

    @classmethod
    def at(cls, index: int, size: int, block_size: int) -> 'CellRef':
        row, col = divmod(index, size)
        block = block_size * (row // block_size) + col // block_size
        return cls(index, row, col, block)

    def __str__(self):
        return f"cell at index: {self.index} row: {self.row} col: {self.col} block: {self.block}"


class Solution:
    """Read-only copy of the board values: a finished grid, or a partial one for progress reports"""

    def __init__(self, values, size: int):
        self.size = size
        self.values = np.array(values, dtype=np.int32, copy=True)
        self.values.setflags(write=False)

    @property
    def grid(self) -> np.ndarray:
        return self.values.reshape(self.size, self.size)

    def is_complete(self) -> bool:
        return bool(np.all(self.values != EMPTY))

    def to_list(self) -> List[List[int]]:
        return self.grid.tolist()

    def __eq__(self, other):
        return (isinstance(other, Solution) and self.size == other.size
                and np.array_equal(self.values, other.values))

    def __hash__(self):
        return hash((self.size, self.values.tobytes()))

    def __str__(self):
        return render_values(self.values, self.size)

    def __repr__(self):
        return f"Solution(size={self.size}, filled={int(np.count_nonzero(self.values))})"


class Board:
    """N x N grid of values plus the row, column and block constraint sets"""

    def __init__(self, size: int = 9):
        try:
            size = operator.index(size)
        except TypeError:
            raise MalformedSize(size) from None
        block_size = math.isqrt(size) if size > 0 else 0
        if block_size * block_size != size or block_size == 0:
            raise MalformedSize(size)

        self.size = size
        self.block_size = block_size
        self.num_cells = size * size
        self.values = np.zeros(self.num_cells, dtype=np.int32)

        self.rows = ConstraintSet('rows', size)
        self.cols = ConstraintSet('cols', size)
        self.blocks = ConstraintSet('blocks', size)

    # -------------------------------------------------------------------------
    # Cell lookup
    # -------------------------------------------------------------------------
    def cell(self, index: int) -> CellRef:
        if not 0 <= index < self.num_cells:
            raise IndexError(f"cell index {index} outside 0..{self.num_cells - 1}")
        return CellRef.at(index, self.size, self.block_size)

    def cell_at(self, row: int, col: int) -> CellRef:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"cell ({row}, {col}) outside a {self.size}x{self.size} board")
        return self.cell(row * self.size + col)

    def cells(self) -> List[CellRef]:
        return [self.cell(i) for i in range(self.num_cells)]

    def value(self, cell: CellRef) -> int:
        return int(self.values[cell.index])

    # -------------------------------------------------------------------------
    # Constraint queries
    # -------------------------------------------------------------------------
    def mask_at(self, cell: CellRef) -> int:
        """Symbols excluded for `cell` by its row, column and block."""
        return (self.rows.masks[cell.row]
                | self.cols.masks[cell.col]
                | self.blocks.masks[cell.block])

    def check(self, cell: CellRef, symbol: int) -> bool:
        return not mask_has(self.mask_at(cell), symbol)

    def candidates(self, cell: CellRef) -> List[int]:
        taken = self.mask_at(cell)
        return [sym for sym in range(1, self.size + 1) if not mask_has(taken, sym)]

    def candidate_count(self, cell: CellRef) -> int:
        return len(self.candidates(cell))

    # -------------------------------------------------------------------------
    # Placement (no validation; callers check first)
    # -------------------------------------------------------------------------
    def place(self, cell: CellRef, symbol: int) -> None:
        self.values[cell.index] = symbol
        bit = symbol_bit(symbol)
        self.rows.masks[cell.row] |= bit
        self.cols.masks[cell.col] |= bit
        self.blocks.masks[cell.block] |= bit

    def unplace(self, cell: CellRef) -> None:
        symbol = int(self.values[cell.index])
        self.values[cell.index] = EMPTY
        bit = ~symbol_bit(symbol)
        self.rows.masks[cell.row] &= bit
        self.cols.masks[cell.col] &= bit
        self.blocks.masks[cell.block] &= bit

    # -------------------------------------------------------------------------
    # Snapshots and views
    # -------------------------------------------------------------------------
    @property
    def grid(self) -> np.ndarray:
        """N x N view sharing memory with the board."""
        return self.values.reshape(self.size, self.size)

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.values))

    def is_complete(self) -> bool:
        return self.filled_count() == self.num_cells

    def snapshot(self) -> Solution:
        return Solution(self.values, self.size)

    def __str__(self):
        return render_values(self.values, self.size)

    def __repr__(self):
        return f"Board(size={self.size}, filled={self.filled_count()}/{self.num_cells})"
