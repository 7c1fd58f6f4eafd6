"""Reading and writing boards as text: nine comma-separated lines in, csv or a boxed 'pretty' layout out."""

# grid_io.py
from __future__ import annotations

from typing import Iterable

from types_sudoku import Board, Grid
from .solver_core import SIZE


def parse_grid(lines: Iterable[str]) -> Board:
    """Read the first nine non-empty lines, nine comma-separated digits each."""
    board: Board = []
    seen = 0
    for lineno, line in enumerate(lines, 1):
        line = line.strip()
        if not line:
            continue
        fields = line.split(",")
        if len(fields) != SIZE:
            raise ValueError(f"line {lineno}: expected {SIZE} comma-separated values, got {len(fields)}")
        for field in fields:
            field = field.strip()
            if not field.isdigit() or len(field) != 1:
                raise ValueError(f"line {lineno}: {field!r} is not a digit 0..9")
            board.append(int(field))
        seen += 1
        if seen == SIZE:
            return board
    raise ValueError(f"expected {SIZE} lines of digits, got {seen}")


def to_rows(board: Board) -> Grid:
    return [list(board[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE)]


def flatten(grid: Grid) -> Board:
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError(f"expected a {SIZE}x{SIZE} grid")
    return [v for row in grid for v in row]


def format_grid(board: Board, style: str = "csv") -> str:
    if style == "csv":
        return "\n".join(",".join(str(v) for v in row) for row in to_rows(board))
    if style == "pretty":
        return _pretty(board)
    raise ValueError(f"unknown grid style {style!r}")


def _pretty(board: Board) -> str:
    out = []
    for r, row in enumerate(to_rows(board)):
        row_str = ""
        for c, val in enumerate(row):
            row_str += str(val) if val != 0 else "."
            if c in (2, 5):
                row_str += " | "
            elif c != SIZE - 1:
                row_str += " "
        out.append(row_str)
        if r in (2, 5):
            out.append("-" * 21)
    return "\n".join(out)
