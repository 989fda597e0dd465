"""
Reading puzzles: text -> tokens -> populated Board

Text format:
  - one character per cell for boards up to 9x9, whitespace-separated
    numbers for larger boards
  - '-' or '0' marks an empty cell
  - '#' starts a comment that runs to the end of the line
  - any other character or number outside 1..N is skipped
"""
import numbers
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from .board import Board, CellRef
from .errors import BoardInconsistent, IncompleteBoard


EMPTY_TOKENS = ('-', '0')


def strip_comments(text: str) -> str:
    return '\n'.join(line.split('#', 1)[0] for line in text.splitlines())


def tokenize(text: str, size: int = 9) -> Iterator[str]:
    """Split puzzle text into cell tokens (comments removed)."""
    text = strip_comments(text)
    if size <= 9:
        for ch in text:
            if not ch.isspace():
                yield ch
    else:
        yield from text.split()


@dataclass
class LoadedPuzzle:
    """A populated board with its given and still-empty cells"""
    board: Board
    solved: List[CellRef] = field(default_factory=list)
    unsolved: List[CellRef] = field(default_factory=list)

    @property
    def knowns(self) -> int:
        return len(self.solved)

    @property
    def blanks(self) -> int:
        return len(self.unsolved)


class Loader:
    """Fills a Board from a row-major token sequence, checking every given"""

    def __init__(self, board: Board):
        self.board = board

    def _symbol(self, token) -> Optional[int]:
        """0 for an empty cell, 1..N for a given, None for a token to skip."""
        if token is None or token in EMPTY_TOKENS:
            return 0
        if isinstance(token, bool):
            return None
        if isinstance(token, numbers.Integral):
            value = int(token)
        elif isinstance(token, str) and token.isascii() and token.isdigit():
            value = int(token)
        else:
            return None
        if value == 0:
            return 0
        if 1 <= value <= self.board.size:
            return value
        return None

    def load(self, tokens: Iterable) -> LoadedPuzzle:
        """
        Consume tokens until every cell is filled.

        Raises BoardInconsistent on the first given that conflicts with an
        earlier one, and IncompleteBoard if the tokens run out first.
        """
        return self._load(iter(tokens))

    def _load(self, tokens: Iterator) -> LoadedPuzzle:
        board = self.board
        puzzle = LoadedPuzzle(board)
        index = 0

        for token in tokens:
            symbol = self._symbol(token)
            if symbol is None:
                continue

            cell = board.cell(index)
            if symbol == 0:
                puzzle.unsolved.append(cell)
            else:
                if not board.check(cell, symbol):
                    raise BoardInconsistent(cell.row, cell.col, symbol, cell.index)
                board.place(cell, symbol)
                puzzle.solved.append(cell)

            index += 1
            if index == board.num_cells:
                return puzzle

        raise IncompleteBoard(index, board.num_cells)


def load_puzzle(text: str, size: int = 9) -> LoadedPuzzle:
    """Load a single puzzle from text onto a fresh board."""
    return Loader(Board(size)).load(tokenize(text, size))


def iter_puzzles(text: str, size: int = 9) -> Iterator[LoadedPuzzle]:
    """
    Yield every puzzle in `text`, one after another.

    Stops cleanly when nothing but skippable tokens remain; a puzzle cut off
    part way raises IncompleteBoard.
    """
    tokens = tokenize(text, size)
    while True:
        board = Board(size)
        try:
            yield Loader(board).load(tokens)
        except IncompleteBoard as e:
            if e.read == 0:
                return
            raise
