# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _flat(text):
    return [0 if ch == "." else int(ch) for ch in text if not ch.isspace()]


@pytest.fixture
def classic_puzzle():
    return _flat("""
        53..7....
        6..195...
        .98....6.
        8...6...3
        4..8.3..1
        7...2...6
        .6....28.
        ...419..5
        ....8..79
    """)


@pytest.fixture
def classic_solution():
    return _flat("""
        534678912
        672195348
        198342567
        859761423
        426853791
        713924856
        961537284
        287419635
        345286179
    """)


@pytest.fixture
def blank_board():
    return [0] * 81


@pytest.fixture
def dead_cell_board():
    """Consistent givens that leave r1c9 with no candidate at all."""
    board = [0] * 81
    board[0:4] = [1, 2, 3, 4]
    for idx, d in zip((17, 26, 35, 44, 53), (5, 6, 7, 8, 9)):
        board[idx] = d
    return board


@pytest.fixture
def unsolvable_board():
    """Consistent givens where propagation places the same digit twice in a block."""
    return [int(ch) for ch in
            "507000900000195308090000000800761000000000701000904806960037084200409005040200007"]
