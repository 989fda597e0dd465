"""
Sudoku Solver Package

Bitmask constraint tracking and backtracking search for N x N Sudoku.
"""

from .errors import SudokuError, MalformedSize, BoardInconsistent, IncompleteBoard
from .constraints import ConstraintSet
from .board import Board, CellRef, Solution
from .loader import Loader, LoadedPuzzle, tokenize, load_puzzle, iter_puzzles
from .solver import Solver, Stats, SearchResult
from .output import Reporter, ConsoleReporter, RecordingReporter, SolutionFormatter

__version__ = "1.0.0"
__all__ = [
    'SudokuError',
    'MalformedSize',
    'BoardInconsistent',
    'IncompleteBoard',
    'ConstraintSet',
    'Board',
    'CellRef',
    'Solution',
    'Loader',
    'LoadedPuzzle',
    'tokenize',
    'load_puzzle',
    'iter_puzzles',
    'Solver',
    'Stats',
    'SearchResult',
    'Reporter',
    'ConsoleReporter',
    'RecordingReporter',
    'SolutionFormatter'
]
