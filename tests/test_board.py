import numpy as np
import pytest

from Sudoku import Board, CellRef, ConstraintSet, MalformedSize
from Sudoku.constraints import format_mask, mask_to_symbols, symbol_bit


@pytest.mark.parametrize("size", [0, 2, 8, 10, -9])
def test_rejects_non_square_sizes(size):
    with pytest.raises(MalformedSize):
        Board(size)


@pytest.mark.parametrize("size, block_size", [(1, 1), (4, 2), (9, 3), (16, 4)])
def test_block_size(size, block_size):
    board = Board(size)
    assert board.block_size == block_size
    assert board.values.shape == (size * size,)


def test_cell_groups():
    board = Board(9)
    assert board.cell_at(0, 0) == CellRef(0, 0, 0, 0)
    assert board.cell_at(4, 5) == CellRef(41, 4, 5, 4)
    assert board.cell_at(8, 0).block == 6
    assert board.cell_at(2, 8).block == 2
    assert board.cell(80) == CellRef(80, 8, 8, 8)

    with pytest.raises(IndexError):
        board.cell(81)


def test_place_marks_all_three_groups():
    board = Board(9)
    cell = board.cell_at(4, 5)
    board.place(cell, 7)

    assert board.value(cell) == 7
    assert board.rows.has(4, 7)
    assert board.cols.has(5, 7)
    assert board.blocks.has(4, 7)
    assert not board.check(board.cell_at(4, 0), 7)
    assert not board.check(board.cell_at(0, 5), 7)
    assert not board.check(board.cell_at(3, 3), 7)
    assert board.check(board.cell_at(0, 0), 7)


def test_place_unplace_round_trip():
    board = Board(9)
    board.place(board.cell_at(0, 0), 5)
    board.place(board.cell_at(8, 8), 9)

    values = board.values.copy()
    masks = (list(board.rows.masks), list(board.cols.masks), list(board.blocks.masks))

    cell = board.cell_at(3, 4)
    assert board.check(cell, 2)
    board.place(cell, 2)
    board.unplace(cell)

    assert np.array_equal(board.values, values)
    assert (board.rows.masks, board.cols.masks, board.blocks.masks) == masks


def test_candidate_count():
    board = Board(9)
    assert board.candidate_count(board.cell_at(0, 8)) == 9

    board.place(board.cell_at(0, 0), 5)
    board.place(board.cell_at(8, 8), 1)

    assert board.candidate_count(board.cell_at(0, 8)) == 7
    assert board.candidates(board.cell_at(0, 8)) == [2, 3, 4, 6, 7, 8, 9]
    assert board.candidate_count(board.cell_at(4, 4)) == 9


def test_snapshot_is_independent_of_board():
    board = Board(4)
    cell = board.cell(0)
    board.place(cell, 3)

    snap = board.snapshot()
    board.unplace(cell)

    assert snap.values[0] == 3
    assert board.value(cell) == 0
    with pytest.raises(ValueError):
        snap.values[0] = 1


def test_render():
    board = Board(4)
    board.place(board.cell(1), 2)
    assert str(board) == "0 2 0 0\n0 0 0 0\n0 0 0 0\n0 0 0 0\n"
    assert board.snapshot().to_list()[0] == [0, 2, 0, 0]


def test_constraint_set_helpers():
    group = ConstraintSet('rows', 9)
    group.add(2, 1)
    group.add(2, 9)
    assert group.mask(2) == symbol_bit(1) | symbol_bit(9)
    assert group.symbols(2) == [1, 9]
    group.remove(2, 1)
    assert group.symbols(2) == [9]
    assert mask_to_symbols(0b101, 9) == [1, 3]
    assert format_mask(0b101, 9) == '[1, 3]'


def test_large_board_masks_fit():
    board = Board(36)
    cell = board.cell_at(35, 35)
    board.place(cell, 36)
    assert not board.check(board.cell_at(35, 0), 36)
    board.unplace(cell)
    assert board.rows.mask(35) == 0


def test_numpy_integer_size():
    board = Board(np.int64(9))
    assert board.size == 9
    assert board.block_size == 3
    with pytest.raises(MalformedSize):
        Board(9.0)
    with pytest.raises(MalformedSize):
        Board("9")
