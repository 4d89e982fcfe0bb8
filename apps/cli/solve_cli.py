"""Command-line front-end: read a puzzle, solve it, print the completed board (or a JSON payload)."""

# solve_cli.py
# - Takes a puzzle string (--puzzle) or a text file (--file)
# - Builds the grid, runs the backtracking solver
# - Prints the solved board, or the full payload with --json
#
# Usage:
#   python -m apps.cli.solve_cli --puzzle "530070000 600195000 ..." --json
#   python -m apps.cli.solve_cli --file puzzle.txt --config solver.yaml --log-every 10000
#
# Exit codes: 0 solved, 1 invalid or unsolvable, 2 bad input.

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from solver.config import load_config
from solver.grid import Grid
from solver.progress import log, ts
from solver.solver_core import parse_puzzle
from solver.sudoku_tools import build_payload


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve an N x N Sudoku (N a perfect square) by backtracking.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--puzzle", type=str, help="Puzzle text; '0' or '.' for blanks")
    src.add_argument("--file", type=str, help="Path to a text file holding the puzzle")
    ap.add_argument("--side", type=int, default=None, help="Board side N (default: config, else inferred from the puzzle)")
    ap.add_argument("--config", type=str, default=None, help="YAML file with side / quiet / log_every")
    ap.add_argument("--json", action="store_true", help="Print the solve payload as JSON")
    ap.add_argument("--quiet", action="store_true", default=None, help="Suppress progress/status logs")
    ap.add_argument("--log-every", type=int, default=None, help="Log solver progress every N steps (0 disables)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config, side=args.side, quiet=args.quiet, log_every=args.log_every)
        text = args.puzzle if args.puzzle is not None else Path(args.file).read_text(encoding="utf-8")
        grid = Grid.from_rows(parse_puzzle(text, cfg.side))
    except (ValueError, IndexError, OSError, yaml.YAMLError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    def logger(msg: str) -> None:
        if cfg.quiet:
            return
        if args.json:
            # keep stdout parseable
            print(f"[{ts()}] {msg}", file=sys.stderr, flush=True)
        else:
            log(msg)

    original = grid.to_rows()
    result = grid.solve(logger=logger, log_every=cfg.log_every)
    payload = build_payload(grid, original, result)

    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print(result.message)
        for issue in payload["issues"]:
            print(f"  duplicate {issue['digits']} in {issue['unit']}: {', '.join(issue['cells'])}")
        print(grid)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
