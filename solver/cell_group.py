"""Rows, columns and blocks as groups of cells that must each hold 1..N exactly once."""

from __future__ import annotations

from collections import Counter
from typing import List, Sequence

from .cell import Cell

_PREFIX = {"row": "r", "col": "c", "block": "b"}


class CellGroup:
    def __init__(self, cells: Sequence[Cell], kind: str = "row", index: int = 0) -> None:
        if kind not in _PREFIX:
            raise ValueError(f"Unknown group kind {kind!r}; expected one of {sorted(_PREFIX)}")
        self.cells: List[Cell] = list(cells)
        self.kind = kind
        self.index = index

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __repr__(self) -> str:
        return f"CellGroup({self.label}: {self.values()})"

    @property
    def label(self) -> str:
        """1-based unit label, e.g. 'r1', 'c9', 'b5'."""
        return f"{_PREFIX[self.kind]}{self.index + 1}"

    def values(self) -> List[int]:
        return [c.value for c in self.cells]

    def _counts(self) -> Counter:
        return Counter(c.value for c in self.cells if c.value)

    def duplicate_values(self) -> List[int]:
        return sorted(v for v, n in self._counts().items() if n > 1)

    def is_valid(self) -> bool:
        """No non-empty value appears twice."""
        return not self.duplicate_values()

    def is_complete(self) -> bool:
        return not self.missing_values()

    def missing_values(self) -> List[int]:
        present = set(self.values())
        return [v for v in range(1, len(self.cells) + 1) if v not in present]

    def empty_cells(self) -> List[Cell]:
        return [c for c in self.cells if c.is_empty()]

    def conflicting_cells(self) -> List[Cell]:
        """Mutable cells sharing their value with another cell of the group. Clues are never reported."""
        counts = self._counts()
        return [c for c in self.cells if c.value and counts[c.value] > 1 and not c.immutable]
