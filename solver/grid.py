"""The Sudoku board: owns its cells, exposes row/column/block views, checks validity, and runs the backtracking search."""

from __future__ import annotations

import re
import time
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from .cell import Cell
from .cell_group import CellGroup
from .solver_core import (
    block_side_for,
    check_square_rows,
    format_rows,
    parse_puzzle,
    peers,
    which_box,
)

Logger = Callable[[str], None]

_CLUE_TEXT = re.compile(r"[+-]?[0-9]+", re.ASCII)


@dataclass
class SolveResult:
    status: str  # "solved" | "invalid" | "no-solution"
    steps: int = 0
    backtracks: int = 0
    duration_ms: int = 0
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "solved"


class Grid:
    """An N x N board with N = n*n (default 9).

    Clues are installed with ``set_clue``; ``solve`` fills the remaining cells
    with a deterministic row-major backtracking search and reports the outcome
    as a ``SolveResult`` instead of raising.
    """

    def __init__(self, side: int = 9) -> None:
        self.block_side = block_side_for(side)
        self.side = side
        self.cells: List[Cell] = [Cell(r, c, self) for r in range(side) for c in range(side)]
        n = self.block_side
        self._peers: List[List[Cell]] = [
            [self.cells[pr * side + pc] for pr, pc in peers(cell.row, cell.col, n)]
            for cell in self.cells
        ]

    # ------------------------------------------------------------------ #
    # construction helpers
    # ------------------------------------------------------------------ #
    @classmethod
    def from_rows(cls, rows: Union[Sequence[Sequence[int]], np.ndarray]) -> "Grid":
        """Build a grid whose non-zero entries become clues."""
        arr = np.asarray(rows)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"Expected a square 2-D board, got shape {arr.shape}")
        if arr.dtype.kind == "f":
            if not np.all(arr == np.floor(arr)):
                raise ValueError("Board entries must be integers")
        elif arr.dtype.kind not in "iu":
            raise ValueError(f"Board entries must be integers, got dtype {arr.dtype}")
        board = arr.astype(int).tolist()
        check_square_rows(board)
        grid = cls(len(board))
        for r, row in enumerate(board):
            for c, v in enumerate(row):
                if v:
                    grid.set_clue(r, c, v)
        return grid

    @classmethod
    def from_string(cls, text: str, side: Optional[int] = None) -> "Grid":
        return cls.from_rows(parse_puzzle(text, side))

    # ------------------------------------------------------------------ #
    # access
    # ------------------------------------------------------------------ #
    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.side and 0 <= col < self.side):
            raise IndexError(f"A sudoku puzzle is {self.side}x{self.side}; ({row}, {col}) is out of bounds.")

    def set_clue(self, row: int, col: int, value: Union[int, str]) -> None:
        """Freeze ``value`` at (row, col). An empty string means "no clue" and is ignored."""
        self._check_bounds(row, col)
        if isinstance(value, str):
            if value == "":
                return
            if not _CLUE_TEXT.fullmatch(value):
                raise ValueError(f"Clue must be a base-10 integer, got {value!r}")
            value = int(value, 10)
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"Clue must be an integer, got {value!r}")
        value = int(value)
        if not 1 <= value <= self.side:
            raise ValueError(f"Valid inputs are 1-{self.side} (got {value}).")
        self.cells[row * self.side + col].freeze(value)

    def get_cell_at(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self.cells[row * self.side + col]

    def get_row(self, row: int) -> List[Cell]:
        self._check_bounds(row, 0)
        start = row * self.side
        return self.cells[start:start + self.side]

    def get_col(self, col: int) -> List[Cell]:
        self._check_bounds(0, col)
        return self.cells[col::self.side]

    def get_block(self, row: int, col: int) -> List[Cell]:
        """Cells of the block containing (row, col), row-major."""
        self._check_bounds(row, col)
        n = self.block_side
        r0 = row - row % n
        c0 = col - col % n
        return [self.cells[r * self.side + c] for r in range(r0, r0 + n) for c in range(c0, c0 + n)]

    def peers_of(self, row: int, col: int) -> List[Cell]:
        return self._peers[row * self.side + col]

    def rows(self) -> List[CellGroup]:
        return [CellGroup(self.get_row(r), "row", r) for r in range(self.side)]

    def cols(self) -> List[CellGroup]:
        return [CellGroup(self.get_col(c), "col", c) for c in range(self.side)]

    def blocks(self) -> List[CellGroup]:
        n = self.block_side
        return [
            CellGroup(self.get_block(br * n, bc * n), "block", which_box(br * n, bc * n, n))
            for br in range(n)
            for bc in range(n)
        ]

    def groups(self) -> List[CellGroup]:
        return self.rows() + self.cols() + self.blocks()

    def empty_cells(self) -> List[Cell]:
        return [c for c in self.cells if not c.immutable and c.is_empty()]

    def clues(self) -> Dict[Tuple[int, int], int]:
        return {(c.row, c.col): c.value for c in self.cells if c.immutable}

    def candidates_at(self, row: int, col: int) -> List[int]:
        """Values not held by any peer of (row, col); empty for filled cells."""
        cell = self.get_cell_at(row, col)
        if not cell.is_empty():
            return []
        used = {p.value for p in self.peers_of(row, col)}
        return [v for v in range(1, self.side + 1) if v not in used]

    # ------------------------------------------------------------------ #
    # checks
    # ------------------------------------------------------------------ #
    def is_solved(self) -> bool:
        counts = Counter(c.value for c in self.cells)
        if set(counts) != set(range(1, self.side + 1)):
            return False
        return all(n == self.side for n in counts.values())

    def is_valid(self) -> bool:
        return all(g.is_valid() for g in self.groups())

    def conflicts(self) -> List[dict]:
        issues = []
        for g in self.groups():
            dups = g.duplicate_values()
            if dups:
                issues.append(
                    {
                        "type": "duplicate",
                        "unit": g.label,
                        "digits": dups,
                        "cells": [c.key for c in g.cells if c.value in dups],
                    }
                )
        return issues

    # ------------------------------------------------------------------ #
    # search
    # ------------------------------------------------------------------ #
    def solve(self, logger: Optional[Logger] = None, log_every: int = 0) -> SolveResult:
        """Fill every empty cell by row-major backtracking.

        Returns status "invalid" without touching any cell when the clues
        already clash, "no-solution" when the search is exhausted (every
        non-clue cell is back to 0), and "solved" otherwise.
        """
        start = time.time()
        if not self.is_valid():
            if logger:
                logger("[solver] invalid puzzle: clues contain duplicates")
            return SolveResult(status="invalid", message="Invalid puzzle.")

        empty = self.empty_cells()
        if logger:
            logger(f"[solver] solve start: {self.side}x{self.side}, {len(empty)} empty cells")
        index = 0
        steps = 0
        backtracks = 0
        while 0 <= index < len(empty):
            cell = empty[index]
            cell.refresh()
            if cell.is_impossible():
                cell.reset()
                index -= 1
                backtracks += 1
            else:
                cell.assign()
                index += 1
            steps += 1
            if logger and log_every > 0 and steps % log_every == 0:
                logger(f"[solver] step {steps:,}: depth {index}/{len(empty)}, backtracks {backtracks:,}")

        duration_ms = int((time.time() - start) * 1000)
        solved = index >= len(empty) and self.is_solved()
        if logger:
            logger(
                f"[solver] solve end in {duration_ms} ms; steps {steps:,}, backtracks {backtracks:,}; "
                + ("solved" if solved else "no solution")
            )
        if not solved:
            return SolveResult(
                status="no-solution",
                steps=steps,
                backtracks=backtracks,
                duration_ms=duration_ms,
                message="No solution found.",
            )
        return SolveResult(
            status="solved",
            steps=steps,
            backtracks=backtracks,
            duration_ms=duration_ms,
            message="Solved successfully.",
        )

    # ------------------------------------------------------------------ #
    # export
    # ------------------------------------------------------------------ #
    def to_rows(self) -> List[List[int]]:
        return [[c.value for c in self.get_row(r)] for r in range(self.side)]

    def to_array(self) -> np.ndarray:
        return np.array(self.to_rows(), dtype=int)

    def to_string(self, blank: str = "0") -> str:
        return format_rows(self.to_rows(), blank=blank)

    def __str__(self) -> str:
        n = self.block_side
        width = len(str(self.side))
        sep = "+".join(["-" * (n * (width + 1) + 1)] * n)
        lines = []
        for r, row in enumerate(self.to_rows()):
            if r and r % n == 0:
                lines.append(sep)
            chunks = []
            for b in range(n):
                vals = row[b * n:(b + 1) * n]
                chunks.append(" " + " ".join(str(v).rjust(width) if v else ".".rjust(width) for v in vals) + " ")
            lines.append("|".join(chunks))
        return "\n".join(lines)
