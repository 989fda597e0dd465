"""
Error types raised while building and loading Sudoku boards.

An unsatisfiable puzzle is not an error: the solver reports it as the
"exhausted" outcome.
"""
from typing import Dict, Optional


class SudokuError(Exception):
    """Base class for every error raised by the package"""


class MalformedSize(SudokuError, ValueError):
    """Grid size is not a positive perfect square"""

    def __init__(self, size):
        self.size = size
        super().__init__(f"size {size} is not a perfect square (expected 1, 4, 9, 16, ...)")


class BoardInconsistent(SudokuError):
    """A given value repeats a symbol already placed in its row, column or block"""

    def __init__(self, row: int, col: int, symbol: int, index: Optional[int] = None):
        self.row = row
        self.col = col
        self.symbol = symbol
        self.index = index
        super().__init__(f"Invalid board at row {row}, col {col}: symbol {symbol} already taken")

    def to_dict(self) -> Dict:
        return {
            'error': 'board_inconsistent',
            'row': self.row,
            'col': self.col,
            'symbol': self.symbol,
            'index': self.index,
        }


class IncompleteBoard(SudokuError):
    """Token stream ended before every cell was read"""

    def __init__(self, read: int, expected: int):
        self.read = read
        self.expected = expected
        super().__init__(f"input ended after {read} of {expected} cells")
