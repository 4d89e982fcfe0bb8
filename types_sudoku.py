# types_sudoku.py
from __future__ import annotations

from typing import TypedDict

Grid = list[list[int]]
"""An N x N Sudoku grid as rows of integers (0 = empty), N a perfect square."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..N)."""


class Issue(TypedDict, total=False):
    """A problem found by the sanity check, ready for display."""

    type: str  # 'duplicate' or 'given_overwritten'
    unit: str  # for duplicates, the unit label (e.g., 'r1', 'c4', 'b9')
    digits: list[int]  # duplicated digits within the unit
    cells: list[str]  # cells holding a duplicated digit
    cell: str  # for overwritten givens, the affected cell
    given: int  # the clue value
    found: int  # the value now in the cell


class SolvePayload(TypedDict):
    """Outcome of a solve request, as returned by the CLI (--json) and the HTTP API."""

    status: str  # 'solved', 'invalid' or 'no-solution'
    message: str
    original: Grid
    solution: Grid | None  # None unless status == 'solved'
    steps: int
    backtracks: int
    duration_ms: int
    issues: list[Issue]
