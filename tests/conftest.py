# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

CANONICAL = [
    [2, 3, 5, 0, 0, 0, 0, 7, 0],
    [0, 0, 8, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 2, 3, 0, 4, 0],
    [8, 6, 4, 0, 0, 0, 0, 0, 0],
    [0, 0, 7, 0, 0, 6, 0, 8, 5],
    [0, 0, 0, 0, 7, 2, 0, 0, 0],
    [0, 5, 0, 0, 6, 7, 0, 1, 8],
    [0, 0, 1, 0, 0, 0, 0, 0, 0],
    [9, 0, 0, 1, 0, 0, 0, 2, 3],
]

SOLVED = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# r1c1 sees 1,2,3,4 in its row, 5,6,7 in its column and 8,9 in its box.
IMPOSSIBLE = [
    [0, 1, 2, 3, 4, 0, 0, 0, 0],
    [0, 8, 9, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [5, 0, 0, 0, 0, 0, 0, 0, 0],
    [6, 0, 0, 0, 0, 0, 0, 0, 0],
    [7, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
]


def _blank(grid, cells):
    g = [row[:] for row in grid]
    for r, c in cells:
        g[r][c] = 0
    return g


@pytest.fixture
def canonical():
    return [row[:] for row in CANONICAL]


@pytest.fixture
def solved():
    return [row[:] for row in SOLVED]


@pytest.fixture
def impossible():
    return [row[:] for row in IMPOSSIBLE]


@pytest.fixture
def almost_solved():
    """SOLVED with one blank per box; every blank is a forced single."""
    return _blank(SOLVED, [(0, 0), (1, 4), (2, 8), (4, 1), (3, 3), (5, 7), (8, 2), (7, 5), (6, 6)])


def write_puzzle(path, grid):
    path.write_text("\n".join("".join(str(v) for v in row) for row in grid) + "\n", encoding="utf-8")
    return path
