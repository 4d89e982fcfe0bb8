"""
Solve a file of puzzles, one per line, writing solutions alongside the input.

Key behavior:
- Reads one puzzle per non-empty line ('#' lines are comments).
- Writes <stem>_solved<suffix> next to the input: one solution string per
  solved puzzle, or "# <status>: <original line>" when it cannot be solved.
- Progress logs while solving so long batches never feel "stuck".
"""

from __future__ import annotations

import argparse
import glob
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from solver.grid import Grid
from solver.progress import ProgressConfig, ProgressPrinter, log
from solver.solver_core import format_rows, parse_puzzle


@dataclass
class BatchStats:
    total: int = 0
    solved: int = 0
    invalid: int = 0
    no_solution: int = 0
    bad_input: int = 0
    errors: List[str] = field(default_factory=list)


def output_path_for(in_path: Path) -> Path:
    return in_path.parent / f"{in_path.stem}_solved{in_path.suffix}"


def read_puzzles(path: Path) -> List[str]:
    with path.open("r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip() and not line.lstrip().startswith("#")]


def solve_line(line: str, side: Optional[int], stats: BatchStats) -> str:
    stats.total += 1
    try:
        grid = Grid.from_rows(parse_puzzle(line, side))
    except (ValueError, IndexError) as e:
        stats.bad_input += 1
        stats.errors.append(f"puzzle {stats.total}: {e}")
        return f"# bad-input: {line}"
    result = grid.solve()
    if result.ok:
        stats.solved += 1
        return format_rows(grid.to_rows()).replace("\n", " " if grid.side > 9 else "")
    if result.status == "invalid":
        stats.invalid += 1
    else:
        stats.no_solution += 1
    return f"# {result.status}: {line}"


def solve_file(
    in_path: Path,
    *,
    side: Optional[int],
    overwrite: bool,
    dry_run: bool,
    quiet: bool,
    prog_cfg: ProgressConfig,
) -> BatchStats:
    if not in_path.exists():
        raise FileNotFoundError(f"Input file not found: {in_path}")

    out_path = output_path_for(in_path)
    if out_path.exists() and not overwrite:
        raise FileExistsError(f"Refusing to overwrite existing output file: {out_path}")

    puzzles = read_puzzles(in_path)
    log(f"Loaded {len(puzzles):,} puzzle(s) from {in_path}", quiet=quiet)

    stats = BatchStats()
    prog = ProgressPrinter(prog_cfg, total=len(puzzles), quiet=quiet)
    out_lines = []
    for line in puzzles:
        out_lines.append(solve_line(line, side, stats))
        prog.maybe_print(stats.total, stats.solved)

    for err in stats.errors:
        log(f"  {err}", quiet=quiet)
    log(
        f"Done: total={stats.total:,}, solved={stats.solved:,}, invalid={stats.invalid:,}, "
        f"no_solution={stats.no_solution:,}, bad_input={stats.bad_input:,}",
        quiet=quiet,
    )

    if dry_run:
        log(f"Dry-run enabled: {out_path} not written.", quiet=quiet)
        return stats

    out_path.write_text("".join(l + "\n" for l in out_lines), encoding="utf-8", newline="\n")
    log(f"Wrote {out_path}", quiet=quiet)
    return stats


def expand_inputs(patterns: Iterable[str], *, quiet: bool) -> List[Path]:
    paths: List[Path] = []
    for pat in patterns:
        matched = sorted(glob.glob(pat, recursive=True))
        if matched:
            log(f"Matched {len(matched)} file(s) for pattern: {pat}", quiet=quiet)
            paths.extend(Path(m).resolve() for m in matched)
        else:
            # treat as literal path
            p = Path(pat).resolve()
            log(f"No glob matches for '{pat}', treating as literal path: {p}", quiet=quiet)
            paths.append(p)

    # dedupe preserving order
    seen = set()
    uniq: List[Path] = []
    for p in paths:
        if p not in seen:
            uniq.append(p)
            seen.add(p)
    return uniq


def main(argv: List[str]) -> int:
    ap = argparse.ArgumentParser(
        description="Solve every puzzle in one or more text files, writing <name>_solved alongside each input."
    )
    ap.add_argument("inputs", nargs="+", help="Input file path(s) or glob(s). Example: puzzles/*.txt")
    ap.add_argument("--side", type=int, default=None, help="Board side N (default: inferred per line).")
    ap.add_argument("--overwrite", action="store_true", help="Allow overwriting existing *_solved outputs.")
    ap.add_argument("--dry-run", action="store_true", help="Solve and report without writing files.")
    ap.add_argument("--quiet", action="store_true", help="Suppress progress/status logs.")
    ap.add_argument(
        "--log-every",
        type=int,
        default=1000,
        help="Emit a progress log every N puzzles (default: 1000). Use 0 to disable.",
    )
    ap.add_argument(
        "--log-every-secs",
        type=float,
        default=10.0,
        help="Also emit a progress log at least every S seconds (default: 10).",
    )
    args = ap.parse_args(argv)

    prog_cfg = ProgressConfig(log_every_puzzles=args.log_every, log_every_secs=args.log_every_secs)
    failed = False
    for path in expand_inputs(args.inputs, quiet=args.quiet):
        try:
            stats = solve_file(
                path,
                side=args.side,
                overwrite=args.overwrite,
                dry_run=args.dry_run,
                quiet=args.quiet,
                prog_cfg=prog_cfg,
            )
        except (FileNotFoundError, FileExistsError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 2
        if stats.solved != stats.total:
            failed = True
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
