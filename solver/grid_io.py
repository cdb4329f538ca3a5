"""Reading and printing puzzles: the 9-line digit file format, the 81-character one-line form, and the three text renderings used by the CLI."""

# grid_io.py
# Puzzle files are 9 lines of 9 characters, '0' (or anything that is not a
# digit) for a blank. Parsing is lenient by default: short or missing lines
# leave the remaining cells blank, and line i always fills row i.
# strict=True rejects them instead.

from __future__ import annotations

from pathlib import Path

from types_sudoku import Grid


def parse_grid(text: str, strict: bool = False) -> Grid:
    grid = [[0] * 9 for _ in range(9)]
    # line i is row i; only trailing blank lines are dropped
    lines = [ln.rstrip() for ln in text.splitlines()]
    while lines and not lines[-1]:
        lines.pop()

    if strict:
        for i, ln in enumerate(lines, 1):
            if len(ln) != 9:
                raise ValueError(f"line {i} has {len(ln)} characters, expected 9")
            bad = [ch for ch in ln if ch not in "0123456789"]
            if bad:
                raise ValueError(f"line {i} contains non-digit character(s): {''.join(bad)!r}")
        if len(lines) != 9:
            raise ValueError(f"expected 9 lines, found {len(lines)}")

    for r, ln in enumerate(lines[:9]):
        for c, ch in enumerate(ln[:9]):
            if ch in "0123456789":
                grid[r][c] = int(ch)
    return grid


def load_grid(path: str | Path, strict: bool = False) -> Grid:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Puzzle file not found: {p}")
    return parse_grid(p.read_text(encoding="utf-8"), strict=strict)


def format_grid(grid: Grid) -> str:
    return "\n".join("".join(str(v) for v in row) for row in grid)


def format_rows(grid: Grid) -> str:
    """Verbose listing, one list per row: '[2, 3, 5, 6, 1, 4, 8, 7, 9]'."""
    return "\n".join(str(list(row)) for row in grid)


def format_pretty(grid: Grid) -> str:
    out = []
    for r, row in enumerate(grid):
        if r in (3, 6):
            out.append("------+-------+------")
        parts = []
        for c, v in enumerate(row):
            if c in (3, 6):
                parts.append("|")
            parts.append(str(v) if v else ".")
        out.append(" ".join(parts))
    return "\n".join(out)


def grid_to_string(grid: Grid) -> str:
    return "".join(str(v) for row in grid for v in row)


def grid_from_string(s: str) -> Grid:
    s = "".join(s.split())
    if len(s) != 81:
        raise ValueError(f"expected 81 characters, got {len(s)}")
    vals = []
    for ch in s:
        if ch in ".0":
            vals.append(0)
        elif ch in "123456789":
            vals.append(int(ch))
        else:
            raise ValueError(f"unexpected character {ch!r}")
    return [vals[i * 9 : (i + 1) * 9] for i in range(9)]


FORMATTERS = {
    "grid": format_grid,
    "rows": format_rows,
    "pretty": format_pretty,
}
