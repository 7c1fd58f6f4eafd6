# tests/test_solver_core.py
import pytest

from solver.solver_core import (
    all_blocks, blocks_of, box_of, boxes, col_of, cols, find_duplicates,
    is_consistent, is_unique, row_of, rows,
)


def test_rows():
    rs = list(rows())
    assert rs[0] == [0, 1, 2, 3, 4, 5, 6, 7, 8]
    assert rs[4] == [36, 37, 38, 39, 40, 41, 42, 43, 44]
    assert rs[8] == [72, 73, 74, 75, 76, 77, 78, 79, 80]
    assert len(rs) == 9
    assert all(len(r) == 9 for r in rs)


def test_cols():
    cs = list(cols())
    assert cs[0] == [0, 9, 18, 27, 36, 45, 54, 63, 72]
    assert cs[8] == [8, 17, 26, 35, 44, 53, 62, 71, 80]
    assert len(cs) == 9
    assert all(len(c) == 9 for c in cs)


def test_boxes():
    bs = list(boxes())
    assert bs[0] == [0, 1, 2, 9, 10, 11, 18, 19, 20]
    assert bs[4] == [30, 31, 32, 39, 40, 41, 48, 49, 50]
    assert len(bs) == 9
    assert all(len(b) == 9 for b in bs)


def test_generators_restart():
    assert list(rows()) == list(rows())
    assert next(boxes()) == next(boxes())


def test_every_position_in_one_block_of_each_kind():
    for kind in (rows, cols, boxes):
        flat = sorted(idx for block in kind() for idx in block)
        assert flat == list(range(81))
    assert len(list(all_blocks())) == 27


@pytest.mark.parametrize("idx, rcb", [(0, (0, 0, 0)), (8, (0, 8, 2)), (40, (4, 4, 4)), (60, (6, 6, 8)), (80, (8, 8, 8))])
def test_index_math(idx, rcb):
    assert (row_of(idx), col_of(idx), box_of(idx)) == rcb


def test_blocks_of_contains_position():
    for idx in range(81):
        row, col, box = blocks_of(idx)
        assert idx in row and idx in col and idx in box
    row, col, box = blocks_of(30)
    assert row == list(range(27, 36))
    assert col == [3, 12, 21, 30, 39, 48, 57, 66, 75]
    assert box == list(next(b for b in boxes() if 30 in b))


def test_is_unique():
    assert is_unique([2, 3, 4])
    assert is_unique([])
    assert is_unique([7])
    assert not is_unique([3, 3])
    assert not is_unique([1, 2, 3, 4, 5, 6, 7, 8, 1])


def test_is_consistent(blank_board):
    assert is_consistent(blank_board)

    board = [0] * 81
    board[0:3] = [1, 2, 3]
    board[78:80] = [8, 9]
    assert is_consistent(board)

    board[3] = 1  # second 1 in row 0
    assert not is_consistent(board)


def test_is_consistent_column_and_box():
    board = [0] * 81
    board[0] = board[80] = 1  # no shared block
    assert is_consistent(board)

    board = [0] * 81
    board[3] = board[75] = 1  # same column
    assert not is_consistent(board)

    board = [0] * 81
    board[3] = board[23] = 1  # same box only
    assert not is_consistent(board)


def test_solution_is_consistent(classic_puzzle, classic_solution):
    assert is_consistent(classic_puzzle)
    assert is_consistent(classic_solution)


def test_find_duplicates():
    board = [0] * 81
    board[0:5] = [1, 2, 1, 2, 1]
    issues = find_duplicates(board)
    assert [i["unit"] for i in issues] == ["r1", "b1"]
    assert issues[0]["digits"] == [1, 2]
    assert issues[0]["cells"] == ["r1c1", "r1c2", "r1c3", "r1c4", "r1c5"]
    assert issues[1] == {"type": "duplicate", "unit": "b1", "digits": [1], "cells": ["r1c1", "r1c3"]}


def test_find_duplicates_clean(classic_puzzle):
    assert find_duplicates(classic_puzzle) == []
