"""Core Sudoku utilities used by the propagator and the search: index math, block iterators, uniqueness and consistency checks."""

# solver_core.py
# Board is a flat list of 81 ints (0..9), row-major. 0 = blank.
# - position -> (row, col, box) math
# - row / column / box block generators
# - is_unique / is_consistent gate
# - duplicate reporting for inconsistent boards
from __future__ import annotations

from itertools import chain
from typing import Iterator, Sequence

from types_sudoku import Block, Board, Issue

SIZE = 9
CELL_COUNT = SIZE * SIZE
DIGITS = tuple(range(1, SIZE + 1))

# Box k membership, numbered left-to-right, top-to-bottom.
BOX_TABLE = (
    (0, 1, 2, 9, 10, 11, 18, 19, 20),
    (3, 4, 5, 12, 13, 14, 21, 22, 23),
    (6, 7, 8, 15, 16, 17, 24, 25, 26),
    (27, 28, 29, 36, 37, 38, 45, 46, 47),
    (30, 31, 32, 39, 40, 41, 48, 49, 50),
    (33, 34, 35, 42, 43, 44, 51, 52, 53),
    (54, 55, 56, 63, 64, 65, 72, 73, 74),
    (57, 58, 59, 66, 67, 68, 75, 76, 77),
    (60, 61, 62, 69, 70, 71, 78, 79, 80),
)


def row_of(idx: int) -> int:
    return idx // SIZE


def col_of(idx: int) -> int:
    return idx % SIZE


def box_of(idx: int) -> int:
    return 3 * (row_of(idx) // 3) + col_of(idx) // 3


def rc_to_key(r: int, c: int) -> str:
    """1-based cell label, e.g. (1, 1) -> 'r1c1'."""
    return f"r{r}c{c}"


def idx_to_key(idx: int) -> str:
    return rc_to_key(row_of(idx) + 1, col_of(idx) + 1)


def rows() -> Iterator[Block]:
    for i in range(SIZE):
        yield list(range(i * SIZE, (i + 1) * SIZE))


def cols() -> Iterator[Block]:
    for j in range(SIZE):
        yield list(range(j, CELL_COUNT, SIZE))


def boxes() -> Iterator[Block]:
    for members in BOX_TABLE:
        yield list(members)


def all_blocks() -> Iterator[Block]:
    """All 27 blocks: rows, then columns, then boxes."""
    return chain(rows(), cols(), boxes())


_ROWS = tuple(rows())
_COLS = tuple(cols())
_BOXES = tuple(boxes())


def blocks_of(idx: int) -> tuple[Block, Block, Block]:
    """The row, column and box blocks containing ``idx``."""
    return _ROWS[row_of(idx)], _COLS[col_of(idx)], _BOXES[box_of(idx)]


def is_unique(values: Sequence[int]) -> bool:
    return not any(values[i - 1] in values[i:] for i in range(1, len(values)))


def is_consistent(board: Board) -> bool:
    """False if any row, column or box repeats a non-blank digit."""
    for block in all_blocks():
        digits = [board[idx] for idx in block if board[idx] != 0]
        if not is_unique(digits):
            return False
    return True


def _unit_labels() -> Iterator[str]:
    for prefix in ("r", "c", "b"):
        for n in range(1, SIZE + 1):
            yield f"{prefix}{n}"


def find_duplicates(board: Board) -> list[Issue]:
    """Describe every block that repeats a digit, in rows/cols/boxes order."""
    issues: list[Issue] = []
    for unit, block in zip(_unit_labels(), all_blocks()):
        seen = set()
        dups = set()
        for idx in block:
            v = board[idx]
            if v == 0:
                continue
            if v in seen:
                dups.add(v)
            seen.add(v)
        if dups:
            cells = [idx_to_key(idx) for idx in block if board[idx] in dups]
            issues.append({"type": "duplicate", "unit": unit, "digits": sorted(dups), "cells": cells})
    return issues
