# tests/conftest.py
import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to sys.path so "apps", "solver", "tools" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

EASY_PUZZLE = (
    "530070000 600195000 098000060 800060003 400803001 "
    "700020006 060000280 000419005 000080079"
)
EASY_SOLUTION = (
    "534678912 672195348 198342567 859761423 426853791 "
    "713924856 961537284 287419635 345286179"
)


def rows_of(text):
    digits = [int(ch) for ch in text if ch.isdigit()]
    side = int(len(digits) ** 0.5)
    return [digits[r * side:(r + 1) * side] for r in range(side)]


def make_solved_board(n, seed):
    """A random complete N x N board (N = n*n): shuffled bands/stacks over the base pattern, digits relabelled."""
    rng = np.random.default_rng(seed)
    side = n * n
    base = np.array([[(n * (r % n) + r // n + c) % side for c in range(side)] for r in range(side)])
    rows = [b * n + i for b in rng.permutation(n) for i in rng.permutation(n)]
    cols = [s * n + j for s in rng.permutation(n) for j in rng.permutation(n)]
    digits = rng.permutation(side) + 1
    return digits[base[np.ix_(rows, cols)]]


def mask_board(board, k, seed):
    """Blank k distinct cells chosen uniformly at random; returns (puzzle, masked flat indices)."""
    rng = np.random.default_rng(seed + 10_000)
    puzzle = np.array(board, copy=True)
    holes = rng.choice(puzzle.size, size=k, replace=False)
    puzzle.flat[holes] = 0
    return puzzle, set(int(h) for h in holes)


@pytest.fixture
def easy_rows():
    return rows_of(EASY_PUZZLE)


@pytest.fixture
def easy_solution_rows():
    return rows_of(EASY_SOLUTION)
