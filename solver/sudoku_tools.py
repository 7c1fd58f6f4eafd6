"""Solving entry points: the plain 81-in / 81-or-None contract, the gated solve that reports an outcome, and a sanity check for comparing a board against its puzzle. Also what the CLI and the API call into."""

# sudoku_tools.py
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from types_sudoku import Board, SolveResult, SolveStats
from .propagation import initial_cells, propagate
from .search import SearchBudgetExceeded, extract_digits, search, to_search_cells
from .solver_core import CELL_COUNT, find_duplicates, idx_to_key, is_consistent

log = logging.getLogger(__name__)

SOLVED = "solved"
UNSATISFIABLE = "unsatisfiable"
INCONSISTENT = "inconsistent"
BUDGET_EXHAUSTED = "budget_exhausted"


def check_board(values: Sequence[int]) -> Board:
    """Validate shape and range of an 81-digit board and return it as a list."""
    board = list(values)
    if len(board) != CELL_COUNT:
        raise ValueError(f"expected {CELL_COUNT} cells, got {len(board)}")
    for idx, v in enumerate(board):
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 9:
            raise ValueError(f"cell {idx_to_key(idx)} holds {v!r}; expected an integer 0..9")
    return board


def solve_sudoku(
    values: Sequence[int],
    max_steps: Optional[int] = None,
    stats: Optional[SolveStats] = None,
) -> Optional[Board]:
    """Propagate, then search. Returns the 81 solved digits or None.

    No consistency gate here; use ``solve`` for the full flow.
    """
    board = check_board(values)
    grid = initial_cells(board)
    if not propagate(grid, stats):
        return None
    result = search(to_search_cells(grid), max_steps=max_steps, stats=stats)
    if result is None:
        return None
    return extract_digits(result)


def solve(values: Sequence[int], max_steps: Optional[int] = None) -> SolveResult:
    """Gate on consistency, then solve. Every outcome is a plain return value."""
    board = check_board(values)
    stats = SolveStats()

    if not is_consistent(board):
        issues = find_duplicates(board)
        log.debug("Rejecting inconsistent board: %s", [i["unit"] for i in issues])
        return _result(INCONSISTENT, None, stats, issues)

    try:
        solution = solve_sudoku(board, max_steps=max_steps, stats=stats)
    except SearchBudgetExceeded as e:
        log.debug("%s", e)
        return _result(BUDGET_EXHAUSTED, None, stats)

    if solution is None:
        return _result(UNSATISFIABLE, None, stats)
    return _result(SOLVED, solution, stats)


def _result(status: str, solution: Optional[Board], stats: SolveStats, issues=None) -> SolveResult:
    return {
        "status": status,
        "solution": solution,
        "issues": issues or [],
        "stats": {
            "propagation_passes": stats.propagation_passes,
            "search_steps": stats.search_steps,
            "backtracks": stats.backtracks,
        },
    }


def sanity_check(original: Sequence[int], current: Sequence[int]) -> Dict:
    """Compare ``current`` against the puzzle it came from.

    Flags givens that were overwritten and any repeated digit in a block.
    A blank in ``current`` is not an issue; a finished solution has none.
    """
    original = check_board(original)
    current = check_board(current)
    issues: List[Dict] = []
    for idx in range(CELL_COUNT):
        if original[idx] != 0 and current[idx] not in (0, original[idx]):
            issues.append({"type": "given_overwritten", "cell": idx_to_key(idx),
                           "given": original[idx], "found": current[idx]})
    issues.extend(find_duplicates(current))
    return {"ok": len(issues) == 0, "issues": issues}
