# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from solver.random_solver import StepBudgetExceeded
from solver.solver_core import check_shape, validate_grid
from solver.sudoku_tools import compute_candidates_tool, sanity_check, solve_tool

app = FastAPI(title="Sudoku Random Solver API")

# Every request gets a step budget no larger than this; an unsatisfiable grid
# would otherwise spin forever.
DEFAULT_MAX_STEPS = 2_000_000


class GridModel(BaseModel):
    grid: list[list[int]]


class SanityRequest(BaseModel):
    original: list[list[int]]
    current: list[list[int]]


class SolveRequest(BaseModel):
    grid: list[list[int]]
    seed: int | None = None
    max_steps: int | None = None


def _checked(grid: list[list[int]], check=validate_grid) -> list[list[int]]:
    try:
        check(grid)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return grid


@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    return sanity_check(_checked(req.original, check_shape), _checked(req.current, check_shape))


@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return compute_candidates_tool(_checked(payload.grid))


@app.post("/solve")
def api_solve(req: SolveRequest):
    grid = _checked(req.grid)
    try:
        return solve_tool(grid, seed=req.seed, max_steps=min(req.max_steps or DEFAULT_MAX_STEPS, DEFAULT_MAX_STEPS))
    except StepBudgetExceeded as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
