"""A single position on the board: its value, clue flag, and per-cell search state."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .grid import Grid


class Cell:
    """One cell of a Grid.

    ``value`` is 0 while the cell is empty. A clue is installed with ``freeze``
    and locks the value for the lifetime of the grid. ``candidates`` and
    ``tried`` only carry meaning while ``Grid.solve`` is running: ``refresh``
    rebuilds ``candidates`` from the current peer values minus everything in
    ``tried``, so returning to a cell at the same depth moves on to its next
    untried value instead of repeating one.
    """

    def __init__(self, row: int, col: int, grid: "Grid") -> None:
        self.grid = grid  # non-owning; used for peer lookups only
        self.row = row
        self.col = col
        self.value = 0
        self.immutable = False
        self.candidates: List[int] = []
        self.tried: List[int] = []

    def __repr__(self) -> str:
        flag = "*" if self.immutable else ""
        return f"Cell(r{self.row + 1}c{self.col + 1}={self.value}{flag})"

    @property
    def side(self) -> int:
        return self.grid.side

    @property
    def key(self) -> str:
        return f"r{self.row + 1}c{self.col + 1}"

    def freeze(self, val: int) -> None:
        """Install ``val`` as a clue and make the cell immutable."""
        if not 1 <= val <= self.side:
            raise ValueError(f"Valid inputs are 1-{self.side} (got {val}).")
        if self.immutable:
            if self.value != val:
                raise ValueError(f"{self.key} is already a clue ({self.value}); cannot change it to {val}.")
            return
        self.value = val
        self.immutable = True
        self.candidates = []
        self.tried = []

    def set(self, val: int) -> None:
        """Tentative placement; ignored for clues."""
        if not self.immutable:
            self.value = val

    def get(self) -> int:
        return self.value

    def is_empty(self) -> bool:
        return self.value == 0

    def is_immutable(self) -> bool:
        return self.immutable

    def refresh(self) -> None:
        used = {p.value for p in self.grid.peers_of(self.row, self.col)}
        tried = self.tried
        self.candidates = [v for v in range(1, self.side + 1) if v not in used and v not in tried]

    def is_impossible(self) -> bool:
        if self.immutable:
            return False
        return not self.candidates

    def assign(self) -> None:
        """Place the smallest remaining candidate and remember it as tried."""
        if self.immutable:
            return
        if not self.candidates:
            raise RuntimeError(f"{self.key} has no candidates to assign; call refresh() first.")
        val = self.candidates.pop(0)
        self.value = val
        self.tried.append(val)

    def reset(self) -> None:
        if self.immutable:
            return
        self.value = 0
        self.tried = []
        self.candidates = []
