"""Tool-friendly wrappers around the solver: sanity checks, candidate maps and a timed solve returning JSON-ready dicts. Used by the CLI, the benchmark and the API."""

# sudoku_tools.py
from __future__ import annotations

import random
import time
from typing import Dict, Optional

from types_sudoku import Grid, RunRecord

from .grid_io import grid_to_string
from .random_solver import run
from .solver_core import (
    compute_all_candidates,
    duplicates_in_unit,
    is_valid_solution,
    iter_units,
    pos_to_key,
    rc_to_key,
)


def sanity_check(original: Grid, current: Grid) -> Dict:
    issues = []
    for r in range(1, 10):
        for c in range(1, 10):
            if original[r - 1][c - 1] != 0 and current[r - 1][c - 1] not in (0, original[r - 1][c - 1]):
                issues.append({"type": "given_overwritten", "cell": rc_to_key(r, c),
                               "given": original[r - 1][c - 1], "found": current[r - 1][c - 1]})
    for label, cells in iter_units():
        vals = [current[p.row][p.col] for p in cells]
        dups = duplicates_in_unit(vals)
        if dups:
            bad = [pos_to_key(p) for p, v in zip(cells, vals) if v in dups]
            issues.append({"type": "duplicate", "unit": label, "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def compute_candidates_tool(current: Grid) -> Dict:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'candidates': {'r1c4': [1, 4, 6], ...}}."""
    return {"candidates": compute_all_candidates(current)}


def is_solved(grid: Grid) -> bool:
    return is_valid_solution(grid)


def solve_tool(current: Grid, seed: Optional[int] = None, max_steps: Optional[int] = None) -> RunRecord:
    """Solve `current` with a private random.Random(seed) and report counters and timing.

    Raises ValueError on a malformed grid and StepBudgetExceeded when
    max_steps runs out.
    """
    rng = random.Random(seed)
    t0 = time.perf_counter()
    state = run(current, rng, max_steps=max_steps)
    elapsed = time.perf_counter() - t0
    return {
        "seed": seed,
        "steps": state.steps,
        "rollbacks": state.rollbacks,
        "guesses": state.guesses,
        "elapsed_s": elapsed,
        "ok": is_valid_solution(state.grid),
        "solution": grid_to_string(state.grid),
    }
