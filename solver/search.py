"""Backtracking search over the cells propagation could not settle, driven by an explicit cursor instead of recursion."""

# search.py
# SearchCell states:
#   Fixed(d)                 - given or propagated, never touched here
#   Vacant(candidates)       - nothing tried yet
#   Filled(guess, candidates) - holds candidates[guess] tentatively
# Candidates are captured once when the cell turns Vacant and reused on every retry.
from __future__ import annotations

import logging

from types_sudoku import Fixed, Filled, Possibilities, PruneCell, SearchCell, SolveStats, Vacant
from .solver_core import CELL_COUNT, blocks_of, is_unique

log = logging.getLogger(__name__)


class SearchBudgetExceeded(RuntimeError):
    """Raised when the search takes more cursor steps than allowed."""

    def __init__(self, max_steps: int):
        super().__init__(f"backtracking search gave up after {max_steps} steps")
        self.max_steps = max_steps


def to_search_cells(grid: list[PruneCell]) -> list[SearchCell]:
    out: list[SearchCell] = []
    for cell in grid:
        if isinstance(cell, Possibilities):
            out.append(Vacant(tuple(sorted(cell.digits))))
        else:
            out.append(cell)
    return out


def is_valid(grid: list[SearchCell], idx: int) -> bool:
    """True if the row, column and box of ``idx`` hold no repeated digit.

    Fixed and Filled cells count; Vacant cells are ignored.
    """
    for block in blocks_of(idx):
        digits = [grid[i].digit for i in block if not isinstance(grid[i], Vacant)]
        if not is_unique(digits):
            return False
    return True


def _try_from(grid: list[SearchCell], idx: int, candidates: tuple[int, ...], start: int) -> bool:
    for guess in range(start, len(candidates)):
        grid[idx] = Filled(guess, candidates)
        if is_valid(grid, idx):
            return True
    grid[idx] = Vacant(candidates)
    return False


def search(
    grid: list[SearchCell],
    max_steps: int | None = None,
    stats: SolveStats | None = None,
) -> list[SearchCell] | None:
    """Fill every Vacant cell of ``grid`` in place, or return None if impossible.

    The cursor walks positions 0..80. Going forward it skips Fixed cells and
    tries a Vacant cell's candidates in order; when none fits it switches to
    backtracking and walks back, skipping Fixed cells, until a Filled cell can
    move on to its next candidate. Because candidates are tried in ascending
    order, the result is the first completion in that order.
    """
    idx = 0
    backtracking = False
    steps = 0
    backtracks = 0

    while 0 <= idx < CELL_COUNT:
        steps += 1
        if max_steps is not None and steps > max_steps:
            if stats is not None:
                stats.search_steps += steps - 1
                stats.backtracks += backtracks
            raise SearchBudgetExceeded(max_steps)

        cell = grid[idx]
        if isinstance(cell, Fixed):
            idx += -1 if backtracking else 1
            continue

        if backtracking:
            assert isinstance(cell, Filled), f"unexpected {cell!r} at {idx} while backtracking"
            start = cell.guess + 1
        else:
            assert isinstance(cell, Vacant), f"unexpected {cell!r} at {idx} while advancing"
            start = 0

        if _try_from(grid, idx, cell.candidates, start):
            backtracking = False
            idx += 1
        else:
            if not backtracking:
                backtracks += 1
            backtracking = True
            idx -= 1

    if stats is not None:
        stats.search_steps += steps
        stats.backtracks += backtracks

    if idx < 0:
        log.debug("Search exhausted after %d steps", steps)
        return None
    log.debug("Search finished after %d steps, %d backtracks", steps, backtracks)
    return grid


def extract_digits(grid: list[SearchCell]) -> list[int]:
    digits = []
    for idx, cell in enumerate(grid):
        assert not isinstance(cell, Vacant), f"cell {idx} left vacant in a finished search"
        digits.append(cell.digit)
    return digits
