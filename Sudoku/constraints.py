"""
Per-group symbol bookkeeping for the Sudoku board

Each group (a row, a column or a block) keeps one bitmask of the symbols
already placed in it: bit k set means symbol k+1 is taken. Python ints grow
as needed, so the same code handles 9x9 and 36x36 boards.
"""

from typing import List


def symbol_bit(symbol: int) -> int:
    """Mask with only the bit for `symbol` set."""
    return 1 << (symbol - 1)


def mask_has(mask: int, symbol: int) -> bool:
    return bool((mask >> (symbol - 1)) & 1)


def mask_to_symbols(mask: int, size: int) -> List[int]:
    """Symbols 1..size whose bit is set in `mask`, ascending."""
    return [sym for sym in range(1, size + 1) if mask_has(mask, sym)]


def format_mask(mask: int, size: int) -> str:
    return '[' + ', '.join(str(sym) for sym in mask_to_symbols(mask, size)) + ']'


# -----------------------------------------------------------------------------
# Constraint sets
# -----------------------------------------------------------------------------
class ConstraintSet:
    """Bitmasks for every group of one kind (all rows, all columns or all blocks)."""

    def __init__(self, kind: str, size: int):
        self.kind = kind
        self.size = size
        self.masks: List[int] = [0] * size

    def mask(self, group: int) -> int:
        return self.masks[group]

    def has(self, group: int, symbol: int) -> bool:
        return mask_has(self.masks[group], symbol)

    def add(self, group: int, symbol: int) -> None:
        self.masks[group] |= symbol_bit(symbol)

    def remove(self, group: int, symbol: int) -> None:
        self.masks[group] &= ~symbol_bit(symbol)

    def symbols(self, group: int) -> List[int]:
        return mask_to_symbols(self.masks[group], self.size)

    def clear(self) -> None:
        self.masks = [0] * self.size

    def __eq__(self, other):
        return (isinstance(other, ConstraintSet) and self.kind == other.kind
                and self.masks == other.masks)

    def __repr__(self):
        groups = ' '.join(format_mask(m, self.size) for m in self.masks)
        return f"ConstraintSet({self.kind}: {groups})"
