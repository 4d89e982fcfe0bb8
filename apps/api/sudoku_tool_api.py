# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from solver.sudoku_tools import compute_candidates_tool, sanity_check, solve_tool

app = FastAPI(title="Sudoku Backtracking Solver API")


class GridModel(BaseModel):
    grid: list[list[int]]


class SanityRequest(BaseModel):
    original: list[list[int]]
    current: list[list[int]]


class CandidatesModel(BaseModel):
    candidates: dict[str, list[int]]


class IssueModel(BaseModel):
    type: str
    unit: str | None = None
    digits: list[int] | None = None
    cells: list[str] | None = None
    cell: str | None = None
    given: int | None = None
    found: int | None = None


class SanityResponse(BaseModel):
    ok: bool
    issues: list[IssueModel]


class SolveResponse(BaseModel):
    status: str
    message: str
    original: list[list[int]]
    solution: list[list[int]] | None = None
    steps: int
    backtracks: int
    duration_ms: int
    issues: list[IssueModel]


def _unprocessable(e: Exception) -> HTTPException:
    return HTTPException(status_code=422, detail=str(e))


@app.post("/sanity_check", response_model=SanityResponse, response_model_exclude_none=True)
def api_sanity(req: SanityRequest):
    try:
        return sanity_check(req.original, req.current)
    except (ValueError, IndexError) as e:
        raise _unprocessable(e)


@app.post("/compute_candidates", response_model=CandidatesModel)
def api_cands(payload: GridModel):
    try:
        return compute_candidates_tool(payload.grid)
    except (ValueError, IndexError) as e:
        raise _unprocessable(e)


@app.post("/solve", response_model=SolveResponse, response_model_exclude_none=True)
def api_solve(payload: GridModel):
    try:
        return solve_tool(payload.grid)
    except (ValueError, IndexError) as e:
        raise _unprocessable(e)
