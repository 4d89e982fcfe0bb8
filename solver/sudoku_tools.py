"""Tool-friendly wrappers over the grid model: sanity checks, candidate maps, and one-shot solving on plain nested lists. Used by the CLI, the batch tool and the HTTP API."""

from __future__ import annotations
from typing import Dict, List, Optional
from types_sudoku import Grid as Rows, Candidates, Issue, SolvePayload

from .grid import Grid, Logger, SolveResult
from .solver_core import clone_rows, check_square_rows, compute_candidates, rc_to_key


def sanity_check(original: Rows, current: Rows) -> Dict:
    """Report overwritten givens and duplicate digits per unit of `current`."""
    side = check_square_rows(current)
    if check_square_rows(original) != side:
        raise ValueError("original and current boards differ in size")
    issues: List[Issue] = []
    for r in range(side):
        for c in range(side):
            if not 0 <= current[r][c] <= side:
                raise ValueError(f"{rc_to_key(r, c)}: value {current[r][c]} out of range 0-{side}")
            given = original[r][c]
            if given != 0 and current[r][c] not in (0, given):
                issues.append({"type": "given_overwritten", "cell": rc_to_key(r, c),
                               "given": given, "found": current[r][c]})
    grid = Grid(side)
    for r in range(side):
        for c in range(side):
            grid.get_cell_at(r, c).set(current[r][c])
    issues.extend(grid.conflicts())
    return {"ok": len(issues) == 0, "issues": issues}


def compute_candidates_tool(current: Rows) -> Dict:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'candidates': {'r1c2': [1,2,5], ...}}."""
    cands: Candidates = compute_candidates(current)
    return {"candidates": cands}


def build_payload(grid: Grid, original: Rows, result: SolveResult) -> SolvePayload:
    return {
        "status": result.status,
        "message": result.message,
        "original": clone_rows(original),
        "solution": grid.to_rows() if result.ok else None,
        "steps": result.steps,
        "backtracks": result.backtracks,
        "duration_ms": result.duration_ms,
        "issues": grid.conflicts() if result.status == "invalid" else [],
    }


def solve_tool(current: Rows, logger: Optional[Logger] = None, log_every: int = 0) -> SolvePayload:
    """Treat every non-zero entry as a clue, solve, and return a JSON-ready payload."""
    grid = Grid.from_rows(current)
    original = grid.to_rows()
    result = grid.solve(logger=logger, log_every=log_every)
    return build_payload(grid, original, result)
