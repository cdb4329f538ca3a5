# types_sudoku.py
from __future__ import annotations

from enum import Enum
from typing import NamedTuple, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""


class Position(NamedTuple):
    """A cell address, 0-based. Column first, as the solver scans it."""

    col: int
    row: int


NO_POSITION = Position(-1, -1)
"""Sentinel for 'no cell'; never used to index a grid."""


class Mode(Enum):
    """Solve engine mode. DEDUCING -> GUESSING is one-way per solve call."""

    DEDUCING = 1
    GUESSING = 2


class RunRecord(TypedDict, total=False):
    """One solve as reported by the tool layer and the benchmark."""

    run: int  # 0-based index inside a benchmark batch
    seed: int | None  # seed of the run's private random.Random
    steps: int  # loop iterations, including the final 'solved' check
    rollbacks: int  # contradictions resolved by restoring the checkpoint
    guesses: int  # placements chosen among several candidates
    elapsed_s: float  # wall time of the solve call
    ok: bool  # solution passed full validity
    solution: str  # 81-char one-line grid
    error: str  # set when the run hit its step budget
