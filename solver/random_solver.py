"""Randomized solver: most-constrained cell selection, forced placements, random guessing and whole-state rollback to the last forced-only checkpoint."""

# random_solver.py
# The loop alternates between two modes:
#   DEDUCING  every placement so far was forced; the checkpoint follows the grid.
#   GUESSING  at least one placement was picked among several candidates; the
#             checkpoint is frozen at the last forced-only state.
# A cell with no candidates means some guess was wrong. The whole grid goes back
# to the checkpoint, dropping every guess made since, and guessing starts over.
# Unsatisfiable puzzles never finish unless max_steps is given.

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import NamedTuple, Optional

from types_sudoku import Grid, Mode, Position

from .solver_core import clone_grid, compute_candidates, empty_positions, place, validate_grid


class SolveResult(NamedTuple):
    solution: Grid
    steps: int


class StepBudgetExceeded(RuntimeError):
    """Raised when a caller-imposed max_steps runs out before the grid is solved."""

    def __init__(self, steps: int):
        super().__init__(f"no solution after {steps} steps")
        self.steps = steps


@dataclass
class SolveState:
    grid: Grid
    checkpoint: Grid
    mode: Mode = Mode.DEDUCING
    steps: int = 0
    rollbacks: int = 0
    guesses: int = 0
    solved: bool = False

    @classmethod
    def from_grid(cls, grid: Grid) -> "SolveState":
        return cls(grid=clone_grid(grid), checkpoint=clone_grid(grid))


def select_cell(grid: Grid, rng: random.Random) -> Optional[tuple[Position, list[int]]]:
    """Pick the empty cell with the fewest candidates.

    Empty cells are shuffled first so ties go to whichever comes first in the
    shuffled order. Returns None when the grid has no empty cell. The returned
    candidate list may be empty, which signals a contradiction.
    """
    empty = empty_positions(grid)
    if not empty:
        return None
    rng.shuffle(empty)

    best_pos = empty[0]
    best_vals = None
    for pos in empty:
        vals = compute_candidates(grid, pos)
        if best_vals is None or len(vals) < len(best_vals):
            best_pos, best_vals = pos, vals
            if not vals:
                # nothing beats zero
                break
    return best_pos, best_vals


def step(state: SolveState, rng: random.Random) -> bool:
    """Run one iteration of the loop on `state`. Returns True once solved."""
    state.steps += 1
    picked = select_cell(state.grid, rng)
    if picked is None:
        state.solved = True
        return True

    pos, vals = picked
    if not vals:
        state.grid = clone_grid(state.checkpoint)
        state.rollbacks += 1
        return False

    if len(vals) > 1:
        state.mode = Mode.GUESSING
        state.guesses += 1
        digit = rng.choice(vals)
    else:
        digit = vals[0]
    place(state.grid, pos, digit)

    if state.mode is Mode.DEDUCING:
        state.checkpoint = clone_grid(state.grid)
    return False


def run(grid: Grid, rng: Optional[random.Random] = None, *, max_steps: Optional[int] = None) -> SolveState:
    """Solve a copy of `grid` and return the final engine state (grid, counters)."""
    validate_grid(grid)
    if rng is None:
        rng = random.Random()
    state = SolveState.from_grid(grid)
    while not step(state, rng):
        if max_steps is not None and state.steps >= max_steps:
            raise StepBudgetExceeded(state.steps)
    return state


def solve(grid: Grid, rng: Optional[random.Random] = None, *, max_steps: Optional[int] = None) -> SolveResult:
    """Return (solution, steps) for a solvable 9x9 grid. The input is not modified."""
    state = run(grid, rng, max_steps=max_steps)
    return SolveResult(state.grid, state.steps)
