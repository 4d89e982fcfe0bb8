"""Timestamped console logging and throttled progress lines for batch solving."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional


def ts() -> str:
    # Local time timestamp for logs
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str, *, quiet: bool = False) -> None:
    if not quiet:
        print(f"[{ts()}] {msg}", flush=True)


@dataclass
class ProgressConfig:
    log_every_puzzles: int  # 0 disables the count trigger
    log_every_secs: float  # 0 disables the time trigger


class ProgressPrinter:
    """Reports how many puzzles of a batch are done, how many solved, and the solve rate."""

    def __init__(self, cfg: ProgressConfig, *, total: Optional[int] = None, quiet: bool = False) -> None:
        self.cfg = cfg
        self.total = total
        self.quiet = quiet
        self._t0 = time.time()
        self._t_last = self._t0
        self.printed = 0

    def maybe_print(self, puzzles_done: int, solved: int) -> bool:
        now = time.time()
        by_count = self.cfg.log_every_puzzles > 0 and puzzles_done % self.cfg.log_every_puzzles == 0
        by_time = self.cfg.log_every_secs > 0 and (now - self._t_last) >= self.cfg.log_every_secs
        if self.quiet or not (by_count or by_time):
            return False

        elapsed = now - self._t0
        rate = (puzzles_done / elapsed) if elapsed > 0 else 0.0
        done = f"{puzzles_done:,}/{self.total:,}" if self.total else f"{puzzles_done:,}"
        msg = f"progress: puzzles={done}, solved={solved:,}, elapsed={elapsed:,.1f}s, rate={rate:,.1f} puzzles/s"
        if self.total and rate > 0:
            msg += f", eta={(self.total - puzzles_done) / rate:,.1f}s"
        log(msg)
        self._t_last = now
        self.printed += 1
        return True
