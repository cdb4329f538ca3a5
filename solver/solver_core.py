"""Core Sudoku utilities used by the solver: index math, units, candidate computation and grid validation."""

# solver_core.py
# Grid primitives for the randomized solver:
# - cloning and empty-cell enumeration
# - candidate computation for one empty cell
# - precondition checks (shape, digit range, duplicate givens)
# Grid is 9x9 list of lists of ints (0..9). 0 = blank.
# Positions are 0-based (col, row); cell keys for reports are 1-based 'r{row}c{col}'.

from __future__ import annotations

from types_sudoku import Candidates, Grid, Position

DIGITS = range(1, 10)


def in_bounds(pos: Position) -> bool:
    return 0 <= pos.col <= 8 and 0 <= pos.row <= 8


def rc_to_key(r: int, c: int) -> str:
    return f"r{r}c{c}"


def pos_to_key(pos: Position) -> str:
    return rc_to_key(pos.row + 1, pos.col + 1)


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def box_origin(pos: Position) -> Position:
    return Position(pos.col - pos.col % 3, pos.row - pos.row % 3)


def empty_positions(grid: Grid) -> list[Position]:
    """Row-major list of every cell holding 0."""
    return [Position(c, r) for r in range(9) for c in range(9) if grid[r][c] == 0]


def compute_candidates(grid: Grid, pos: Position) -> list[int]:
    """Digits not yet used in the row, column or box of an empty cell, ascending.

    The cell itself must be empty; on a filled cell the result is meaningless.
    """
    seen = set(grid[pos.row])
    for r in range(9):
        seen.add(grid[r][pos.col])
    o = box_origin(pos)
    for r in range(o.row, o.row + 3):
        seen.update(grid[r][o.col : o.col + 3])
    return [d for d in DIGITS if d not in seen]


def compute_all_candidates(grid: Grid) -> Candidates:
    return {pos_to_key(p): compute_candidates(grid, p) for p in empty_positions(grid)}


def unit_cells_row(row: int) -> list[Position]:
    return [Position(c, row) for c in range(9)]


def unit_cells_col(col: int) -> list[Position]:
    return [Position(col, r) for r in range(9)]


def unit_cells_box(b: int) -> list[Position]:
    # b is 1-based, left to right then top to bottom
    r0 = 3 * ((b - 1) // 3)
    c0 = 3 * ((b - 1) % 3)
    return [Position(c0 + j, r0 + i) for i in range(3) for j in range(3)]


def iter_units():
    """Yield (label, cells) for all 27 houses. Labels are 'r1'..'r9', 'c1'..'c9', 'b1'..'b9'."""
    for i in range(9):
        yield f"r{i + 1}", unit_cells_row(i)
    for i in range(9):
        yield f"c{i + 1}", unit_cells_col(i)
    for b in range(1, 10):
        yield f"b{b}", unit_cells_box(b)


def duplicates_in_unit(vals) -> set:
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def check_shape(grid: Grid) -> None:
    """Raise ValueError unless the grid is 9x9 with int cells in 0..9."""
    if not isinstance(grid, (list, tuple)) or len(grid) != 9:
        raise ValueError("grid must have exactly 9 rows")
    for r, row in enumerate(grid):
        if not isinstance(row, (list, tuple)) or len(row) != 9:
            raise ValueError(f"row {r + 1} must have exactly 9 cells")
        for c, v in enumerate(row):
            # bool is an int subclass; reject it explicitly
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 9:
                raise ValueError(f"cell {rc_to_key(r + 1, c + 1)} holds {v!r}, expected an int in 0..9")


def validate_grid(grid: Grid) -> None:
    """Fail fast on grids the solver must not be handed.

    Raises ValueError if the grid is not 9x9, a cell is not an int in 0..9,
    or a digit repeats inside a row, column or box. A grid that passes can
    still be unsatisfiable; the solver does not detect that.
    """
    check_shape(grid)
    for label, cells in iter_units():
        dups = duplicates_in_unit(grid[p.row][p.col] for p in cells)
        if dups:
            raise ValueError(f"duplicate digit(s) {sorted(dups)} in {label}")


def is_valid_solution(grid: Grid) -> bool:
    """True when every row, column and box holds 1..9 exactly once."""
    full = set(DIGITS)
    for _, cells in iter_units():
        if {grid[p.row][p.col] for p in cells} != full:
            return False
    return True


def place(grid: Grid, pos: Position, digit: int) -> None:
    """Write a digit in place. NO_POSITION is rejected."""
    if not in_bounds(pos):
        raise IndexError(f"cannot place at {pos}")
    grid[pos.row][pos.col] = digit
