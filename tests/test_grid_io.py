# tests/test_grid_io.py
import pytest

from conftest import write_puzzle
from solver.grid_io import (
    format_grid,
    format_pretty,
    format_rows,
    grid_from_string,
    grid_to_string,
    load_grid,
    parse_grid,
)

CANONICAL_TEXT = """235000070
008000000
000023040
864000000
007006085
000072000
050067018
001000000
900100023
"""


def test_parse_canonical(canonical):
    assert parse_grid(CANONICAL_TEXT) == canonical
    assert parse_grid(CANONICAL_TEXT, strict=True) == canonical


def test_lenient_parse_fills_blanks():
    grid = parse_grid("12x4\n\n.56\n")
    assert grid[0][:5] == [1, 2, 0, 4, 0]
    assert grid[1] == [0] * 9
    assert grid[2][:3] == [0, 5, 6]
    assert all(v == 0 for row in grid[3:] for v in row)


def test_blank_line_keeps_later_rows_in_place(canonical):
    lines = CANONICAL_TEXT.splitlines()
    lines[1] = ""
    grid = parse_grid("\n".join(lines) + "\n\n\n")
    assert grid[1] == [0] * 9
    assert grid[2] == canonical[2]
    assert grid[8] == canonical[8]


def test_lenient_parse_ignores_extra_columns_and_lines():
    text = "\n".join(["1234567890"] + ["000000000"] * 9)
    grid = parse_grid(text)
    assert grid[0] == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert len(grid) == 9


@pytest.mark.parametrize(
    "text, message",
    [
        ("123\n" * 9, "line 1 has 3"),
        ("000000000\n" * 8, "found 8"),
        ("00000000x\n" * 9, "non-digit"),
        ("000000000\n\n" + "000000000\n" * 8, "line 2 has 0"),
    ],
)
def test_strict_parse_rejects(text, message):
    with pytest.raises(ValueError, match=message):
        parse_grid(text, strict=True)


def test_load_grid(tmp_path, canonical):
    path = write_puzzle(tmp_path / "p.txt", canonical)
    assert load_grid(path) == canonical
    with pytest.raises(FileNotFoundError):
        load_grid(tmp_path / "missing.txt")


def test_format_grid_matches_file_format(canonical):
    assert format_grid(canonical) + "\n" == CANONICAL_TEXT


def test_format_rows(canonical):
    lines = format_rows(canonical).splitlines()
    assert len(lines) == 9
    assert lines[0] == "[2, 3, 5, 0, 0, 0, 0, 7, 0]"


def test_format_pretty(canonical):
    lines = format_pretty(canonical).splitlines()
    assert len(lines) == 11
    assert lines[0] == "2 3 5 | . . . | . 7 ."
    assert lines[3] == "------+-------+------"


def test_one_line_form(canonical):
    s = grid_to_string(canonical)
    assert s.startswith("235000070008")
    assert grid_from_string(s.replace("0", ".")) == canonical
    with pytest.raises(ValueError):
        grid_from_string(s[:-1])
    with pytest.raises(ValueError):
        grid_from_string(s[:-1] + "x")
