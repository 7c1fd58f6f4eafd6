# sudoku_tool_api.py
# Optional FastAPI wrapper for the solver tools.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from solver.grid_io import flatten, to_rows
from solver.sudoku_tools import check_board, sanity_check, solve
from solver.solver_core import find_duplicates, is_consistent

app = FastAPI(title="Sudoku Solver Tool API")

class GridModel(BaseModel):
    grid: List[List[int]]

class SolveRequest(BaseModel):
    grid: List[List[int]]
    max_steps: Optional[int] = None

class SanityRequest(BaseModel):
    original: List[List[int]]
    current: List[List[int]]

def _board(grid: List[List[int]]):
    try:
        return check_board(flatten(grid))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

@app.post("/check_consistency")
def api_consistency(payload: GridModel):
    board = _board(payload.grid)
    return {"consistent": is_consistent(board), "issues": find_duplicates(board)}

@app.post("/solve")
def api_solve(req: SolveRequest):
    if req.max_steps is not None and req.max_steps <= 0:
        raise HTTPException(status_code=422, detail="max_steps must be positive")
    result = solve(_board(req.grid), max_steps=req.max_steps)
    if result["solution"] is not None:
        result["solution"] = to_rows(result["solution"])
    return result

@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    return sanity_check(_board(req.original), _board(req.current))
