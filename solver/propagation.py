"""Constraint propagation: naked singles, hidden singles and block pruning, repeated until nothing changes."""

# propagation.py
# Works on a list of 81 PruneCells. Cells only ever narrow:
# Possibilities shrink or collapse to Fixed, Fixed never reverts.
from __future__ import annotations

import logging
from collections import Counter

from types_sudoku import Block, Board, Fixed, Possibilities, PruneCell, SolveStats
from .solver_core import DIGITS, all_blocks, is_unique

log = logging.getLogger(__name__)


def initial_cells(board: Board) -> list[PruneCell]:
    """Givens become Fixed, blanks start with every digit."""
    return [Possibilities(DIGITS) if v == 0 else Fixed(v) for v in board]


def prune_block(grid: list[PruneCell], block: Block) -> bool:
    """Run one round of singles + elimination over ``block``. Returns True if any cell changed."""
    changed = False

    # naked singles
    for idx in block:
        cell = grid[idx]
        if isinstance(cell, Possibilities) and len(cell.digits) == 1:
            grid[idx] = Fixed(cell.digits[0])
            changed = True

    occurrences: Counter[int] = Counter()
    for idx in block:
        cell = grid[idx]
        if isinstance(cell, Fixed):
            occurrences[cell.digit] += 1
        else:
            occurrences.update(cell.digits)

    # hidden singles; counts are not refreshed after a placement
    for idx in block:
        cell = grid[idx]
        if not isinstance(cell, Possibilities):
            continue
        for d in cell.digits:
            if occurrences[d] == 1:
                grid[idx] = Fixed(d)
                changed = True
                break

    fixed = {grid[idx].digit for idx in block if isinstance(grid[idx], Fixed)}
    for idx in block:
        cell = grid[idx]
        if not isinstance(cell, Possibilities):
            continue
        pruned = tuple(d for d in cell.digits if d not in fixed)
        if pruned != cell.digits:
            grid[idx] = Possibilities(pruned)
            changed = True

    return changed


def propagate(grid: list[PruneCell], stats: SolveStats | None = None) -> bool:
    """Narrow ``grid`` in place to a fixed point.

    Every pass visits the 27 blocks in rows, columns, boxes order; passes repeat
    until one of them changes nothing. Returns False when some cell is left
    without candidates or a block ends up holding the same fixed digit twice,
    i.e. the puzzle has no solution.
    """
    passes = 0
    while True:
        passes += 1
        changed = False
        for block in all_blocks():
            if prune_block(grid, block):
                changed = True
        if not changed:
            break

    if stats is not None:
        stats.propagation_passes += passes

    dead = [idx for idx, cell in enumerate(grid) if isinstance(cell, Possibilities) and not cell.digits]
    if dead:
        log.debug("Contradiction after %d passes: no candidates left at %s", passes, dead)
        return False

    # two naked singles for one digit in a block both get fixed before pruning sees them
    for block in all_blocks():
        placed = [grid[idx].digit for idx in block if isinstance(grid[idx], Fixed)]
        if not is_unique(placed):
            log.debug("Contradiction after %d passes: repeated fixed digit in block %s", passes, block)
            return False

    log.debug(
        "Propagation settled after %d passes, %d cells fixed",
        passes,
        sum(isinstance(cell, Fixed) for cell in grid),
    )
    return True
