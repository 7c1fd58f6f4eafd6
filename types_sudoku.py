# types_sudoku.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypedDict, Union

Board = list[int]
"""A flat, row-major Sudoku board of 81 integers (0 = empty)."""

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Block = list[int]
"""Nine board positions that must hold each digit at most once."""


@dataclass(frozen=True)
class Fixed:
    """A solved cell. Givens and propagated placements both end up here."""

    digit: int


@dataclass(frozen=True)
class Possibilities:
    """Propagation-phase cell: the digits still allowed, ascending."""

    digits: tuple[int, ...]


@dataclass(frozen=True)
class Vacant:
    """Search-phase cell with no tentative digit yet."""

    candidates: tuple[int, ...]


@dataclass(frozen=True)
class Filled:
    """Search-phase cell holding ``candidates[guess]`` tentatively."""

    guess: int
    candidates: tuple[int, ...]

    @property
    def digit(self) -> int:
        return self.candidates[self.guess]


PruneCell = Union[Fixed, Possibilities]
SearchCell = Union[Fixed, Vacant, Filled]


@dataclass
class SolveStats:
    """Counters filled in while solving; handy for the CLI report."""

    propagation_passes: int = 0
    search_steps: int = 0
    backtracks: int = 0


class Issue(TypedDict, total=False):
    """A rule violation found in a grid (used for 'inconsistent' reports)."""

    type: str  # 'duplicate'
    unit: str  # e.g. 'r1', 'c4', 'b9'
    digits: list[int]  # the repeated digits
    cells: list[str]  # offending cells, e.g. ['r1c1', 'r1c4']


class SolveResult(TypedDict):
    """Outcome of a full solve, as returned by ``solver.sudoku_tools.solve``."""

    status: str  # 'solved' | 'unsatisfiable' | 'inconsistent' | 'budget_exhausted'
    solution: Board | None
    issues: list[Issue]
    stats: dict[str, Any]
