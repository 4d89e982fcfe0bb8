"""Core Sudoku utilities shared by the grid model and the tool layer: square-size math, cell keys, peer lists, and puzzle text parsing."""

# solver_core.py
# Grid rows are N x N lists of ints (0..N), 0 = blank, with N = n*n.
# Coordinates are 0-based (row, col); cell keys are 1-based ("r1c1").

from __future__ import annotations

import math
import re
from typing import Iterable, Sequence

Cell = tuple[int, int]  # (row, col) 0-based
Rows = list[list[int]]

_SEPARATORS = re.compile(r"[\s|+]+|-{2,}")


def is_perfect_square(num: int) -> bool:
    if num < 1:
        return False
    root = math.isqrt(num)
    return root * root == num


def block_side_for(side: int) -> int:
    """Return n for a grid of side N = n*n, raising ValueError otherwise."""
    if isinstance(side, bool) or not isinstance(side, int):
        raise ValueError(f"Sudoku side must be an integer, got {side!r}")
    if not is_perfect_square(side):
        raise ValueError(f"Sudoku sizes must be square numbers (got {side}).")
    return math.isqrt(side)


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def which_box(r: int, c: int, n: int = 3) -> int:
    """0-based block index of (r, c), blocks numbered row-major."""
    return n * (r // n) + (c // n)


def box_origin(r: int, c: int, n: int = 3) -> Cell:
    return (r - r % n, c - c % n)


def peers(r: int, c: int, n: int = 3) -> list[Cell]:
    """Peer coordinates of (r, c): same row, column or block, self excluded, row-major order."""
    side = n * n
    r0, c0 = box_origin(r, c, n)
    ps = set()
    for j in range(side):
        ps.add((r, j))
    for i in range(side):
        ps.add((i, c))
    for i in range(r0, r0 + n):
        for j in range(c0, c0 + n):
            ps.add((i, j))
    ps.discard((r, c))
    return sorted(ps)


def clone_rows(rows: Sequence[Sequence[int]]) -> Rows:
    return [list(row) for row in rows]


def check_square_rows(rows: Sequence[Sequence[int]]) -> int:
    """Validate that rows form an N x N board with N a perfect square; return N."""
    side = len(rows)
    block_side_for(side)
    for i, row in enumerate(rows):
        if len(row) != side:
            raise ValueError(f"Row {i} has {len(row)} cells; expected {side}.")
    return side


def compute_candidates(rows: Sequence[Sequence[int]]) -> dict[str, list[int]]:
    """Candidate digits for each blank cell, keyed 'r1c2'; only row/column/block peers are considered."""
    side = check_square_rows(rows)
    n = math.isqrt(side)
    cand = {}
    for r in range(side):
        for c in range(side):
            if rows[r][c] == 0:
                used = {rows[pr][pc] for pr, pc in peers(r, c, n)}
                cand[rc_to_key(r, c)] = [d for d in range(1, side + 1) if d not in used]
    return cand


def _tokens(text: str, side: int | None) -> list[str]:
    text = text.strip()
    if not text:
        return []
    wide = [t for t in re.split(r"[\s,|+]+", text) if t and not re.fullmatch(r"-{2,}", t)]
    if "," in text or (side is not None and side > 9):
        return wide
    packed = list(_SEPARATORS.sub("", text))
    if side is None and not (is_perfect_square(len(packed)) and len(packed) <= 81):
        return wide
    return packed


def parse_puzzle(text: str, side: int | None = None) -> Rows:
    """Parse a puzzle string into rows.

    Single-character cells ("53..7....") are used for boards up to 9x9; larger
    boards are written as whitespace- or comma-separated integers. '0' and '.'
    mark blanks. Layout characters (newlines, '|', '+' and rule lines of
    two or more '-') are ignored; a lone '-' is an invalid token. When
    ``side`` is omitted it is inferred from the number of cells.
    """
    tokens = _tokens(text, side)
    if side is None:
        if not is_perfect_square(len(tokens)):
            raise ValueError(f"Cannot infer a square board from {len(tokens)} cells.")
        side = math.isqrt(len(tokens))
    block_side_for(side)
    if len(tokens) != side * side:
        raise ValueError(f"Expected {side * side} cells for a {side}x{side} board, got {len(tokens)}.")
    values = []
    for tok in tokens:
        if tok == ".":
            values.append(0)
            continue
        try:
            v = int(tok, 10)
        except ValueError:
            raise ValueError(f"Invalid cell token {tok!r}") from None
        if not 0 <= v <= side:
            raise ValueError(f"Cell value {v} out of range 0-{side}")
        values.append(v)
    return [values[r * side:(r + 1) * side] for r in range(side)]


def format_rows(rows: Iterable[Sequence[int]], blank: str = "0") -> str:
    """One line per row; single digits are packed, larger boards are space-separated."""
    rows = [list(row) for row in rows]
    wide = len(rows) > 9
    lines = []
    for row in rows:
        toks = [str(v) if v else blank for v in row]
        lines.append(" ".join(toks) if wide else "".join(toks))
    return "\n".join(lines)
