# tests/test_solver_basics.py
import pytest

from solver.grid import Grid
from conftest import EASY_PUZZLE, EASY_SOLUTION, rows_of

M4 = [
    [1, 2, 3, 4],
    [3, 4, 1, 2],
    [4, 3, 2, 1],
    [2, 1, 4, 3],
]


def test_easy_puzzle_is_solved():
    g = Grid.from_string(EASY_PUZZLE)
    clues = g.clues()
    result = g.solve()
    assert result.ok
    assert result.status == "solved"
    assert result.steps >= 51
    assert g.to_rows() == rows_of(EASY_SOLUTION)
    assert g.is_solved() and g.is_valid()
    assert all(g.get_cell_at(r, c).get() == v for (r, c), v in clues.items())


def test_already_solved_grid_is_a_noop():
    g = Grid.from_string(EASY_SOLUTION)
    assert all(c.is_immutable() for c in g.cells)
    assert g.is_solved() and g.is_valid()
    before = g.to_rows()
    result = g.solve()
    assert result.ok
    assert result.steps == 0
    assert g.to_rows() == before


def test_invalid_input_is_reported_without_mutation():
    g = Grid()
    g.set_clue(0, 0, 5)
    g.set_clue(0, 1, 5)
    assert not g.is_valid()
    before = g.to_rows()
    result = g.solve()
    assert result.status == "invalid"
    assert not result.ok
    assert result.steps == 0
    assert g.to_rows() == before
    assert all(c.tried == [] for c in g.cells)


def test_duplicate_in_full_row_is_invalid():
    g = Grid()
    for col in range(8):
        g.set_clue(0, col, col + 1)
    g.set_clue(0, 8, 1)
    assert not g.is_valid()
    assert g.solve().status == "invalid"
    assert g.get_cell_at(0, 8).get() == 1
    assert all(c.is_empty() for c in g.cells if not c.is_immutable())


def _mini_clues(last_value):
    g = Grid(4)
    g.set_clue(0, 0, 1)
    g.set_clue(0, 1, 2)
    g.set_clue(1, 2, 1)
    g.set_clue(2, 3, last_value)
    g.set_clue(3, 0, 2)
    return g


def test_minimal_4x4_as_listed_has_no_completion():
    # row 1 needs its 2 at (1,3), but column 3 already holds a 2 at (2,3)
    g = _mini_clues(2)
    assert g.is_valid()
    result = g.solve()
    assert result.status == "no-solution"
    assert not g.is_solved()
    assert all(c.is_empty() for c in g.cells if not c.is_immutable())
    assert g.clues() == {(0, 0): 1, (0, 1): 2, (1, 2): 1, (2, 3): 2, (3, 0): 2}


def test_minimal_4x4_completion():
    g = _mini_clues(1)
    result = g.solve()
    assert result.ok
    assert g.to_rows() == M4


def test_empty_4x4_fills_lexicographically_smallest_board():
    g = Grid(4)
    result = g.solve()
    assert result.ok
    assert result.backtracks == 0
    assert g.to_rows() == [
        [1, 2, 3, 4],
        [3, 4, 1, 2],
        [2, 1, 4, 3],
        [4, 3, 2, 1],
    ]


def test_dead_end_without_duplicates_is_unsolvable():
    g = Grid(4)
    g.set_clue(0, 0, 1)
    g.set_clue(0, 1, 2)
    g.set_clue(1, 2, 3)
    g.set_clue(2, 2, 4)
    assert g.is_valid()
    result = g.solve()
    assert result.status == "no-solution"
    assert result.steps == 1
    assert result.backtracks == 1
    assert all(c.is_empty() for c in g.cells if not c.is_immutable())


def test_construction_rejects_6x6():
    with pytest.raises(ValueError):
        Grid(6)


def test_single_cell_grid():
    g = Grid(1)
    assert g.solve().ok
    assert g.to_rows() == [[1]]


def test_solve_is_deterministic():
    a = Grid.from_string(EASY_PUZZLE)
    b = Grid.from_string(EASY_PUZZLE)
    ra = a.solve()
    rb = b.solve()
    assert a.to_rows() == b.to_rows()
    assert (ra.steps, ra.backtracks) == (rb.steps, rb.backtracks)


def test_sparse_puzzle_is_deterministic():
    clues = {(0, 1): 3, (2, 2): 4, (3, 2): 1}
    boards = []
    for _ in range(2):
        g = Grid(4)
        for (r, c), v in clues.items():
            g.set_clue(r, c, v)
        assert g.solve().ok
        assert g.is_solved()
        boards.append(g.to_rows())
    assert boards[0] == boards[1]


def test_solve_logs_through_callback():
    messages = []
    g = Grid(4)
    g.solve(logger=messages.append, log_every=4)
    assert messages[0].startswith("[solver] solve start: 4x4, 16 empty cells")
    assert messages[-1].endswith("solved")
    assert sum(m.startswith("[solver] step ") for m in messages) == 4


def test_invalid_solve_logs_once():
    messages = []
    g = Grid(4)
    g.set_clue(0, 0, 1)
    g.set_clue(1, 1, 1)
    g.solve(logger=messages.append)
    assert messages == ["[solver] invalid puzzle: clues contain duplicates"]
