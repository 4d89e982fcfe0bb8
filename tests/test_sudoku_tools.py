# tests/test_sudoku_tools.py
import pytest

from solver.sudoku_tools import compute_candidates_tool, sanity_check, solve_tool


def test_sanity_check_clean_board(easy_rows):
    report = sanity_check(easy_rows, [row[:] for row in easy_rows])
    assert report == {"ok": True, "issues": []}


def test_sanity_check_flags_overwritten_given(easy_rows):
    current = [row[:] for row in easy_rows]
    current[0][0] = 1
    report = sanity_check(easy_rows, current)
    assert not report["ok"]
    assert report["issues"] == [{"type": "given_overwritten", "cell": "r1c1", "given": 5, "found": 1}]


def test_sanity_check_flags_duplicates(easy_rows):
    current = [row[:] for row in easy_rows]
    current[0][2] = 3
    report = sanity_check(easy_rows, current)
    assert not report["ok"]
    assert [i["unit"] for i in report["issues"]] == ["r1", "b1"]
    assert report["issues"][0]["digits"] == [3]
    assert report["issues"][0]["cells"] == ["r1c2", "r1c3"]


def test_sanity_check_rejects_mismatched_boards(easy_rows):
    with pytest.raises(ValueError):
        sanity_check([[0] * 4 for _ in range(4)], easy_rows)
    bad = [row[:] for row in easy_rows]
    bad[4][4] = 12
    with pytest.raises(ValueError):
        sanity_check(easy_rows, bad)


def test_compute_candidates_tool(easy_rows):
    cand = compute_candidates_tool(easy_rows)["candidates"]
    assert cand["r1c3"] == [1, 2, 4]
    assert "r1c1" not in cand
    assert len(cand) == 51


def test_solve_tool_solved(easy_rows, easy_solution_rows):
    payload = solve_tool(easy_rows)
    assert payload["status"] == "solved"
    assert payload["solution"] == easy_solution_rows
    assert payload["original"] == easy_rows
    assert payload["issues"] == []
    assert payload["steps"] >= 51


def test_solve_tool_invalid():
    rows = [[0] * 4 for _ in range(4)]
    rows[0][0] = rows[0][3] = 4
    payload = solve_tool(rows)
    assert payload["status"] == "invalid"
    assert payload["solution"] is None
    assert payload["issues"][0]["unit"] == "r1"
    assert payload["original"] == rows


def test_solve_tool_propagates_input_errors():
    with pytest.raises(ValueError):
        solve_tool([[0] * 6 for _ in range(6)])


def test_solve_tool_forwards_logger():
    messages = []
    solve_tool([[0] * 4 for _ in range(4)], logger=messages.append)
    assert messages[0].startswith("[solver] solve start")
