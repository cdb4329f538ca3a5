"""Command-line entry point: read a 9-line puzzle file, solve it once and print the grid, or solve it many times in parallel and print step/time statistics."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli puzzle.txt
#   python -m apps.cli.solve_cli puzzle.txt --format rows --seed 7
#   python -m apps.cli.solve_cli puzzle.txt --benchmark 200 --workers 8 --timeout 60
#   python -m apps.cli.solve_cli puzzle.txt --config bench.yaml
#
# Exit codes: 0 ok, 1 solve failed (step budget / timeout), 2 bad input or usage.

from __future__ import annotations

import argparse
import json
import sys
import time
from typing import List, Optional

from solver.config import build_config
from solver.grid_io import FORMATTERS, grid_from_string, load_grid
from solver.random_solver import StepBudgetExceeded
from solver.solver_core import validate_grid
from solver.sudoku_tools import solve_tool

from .benchmark import format_summary, run_benchmark, summarize


def ts() -> str:
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str, *, quiet: bool = False) -> None:
    if not quiet:
        print(f"[{ts()}] {msg}", flush=True)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a 9x9 Sudoku with randomized guessing and checkpoint rollback.")
    ap.add_argument("puzzle", help="Text file with 9 lines of 9 digits, 0 for a blank.")
    ap.add_argument("--format", choices=["grid", "rows", "pretty", "json"], default=None,
                    help="Output format for a single solve (default: grid).")
    ap.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run (benchmark: base seed).")
    ap.add_argument("--strict", action="store_true", default=None,
                    help="Reject short, missing or non-digit puzzle lines instead of treating them as blanks.")
    ap.add_argument("--max-steps", type=int, default=None, help="Give up after N steps (default: unbounded).")
    ap.add_argument("--benchmark", dest="runs", type=int, default=None, metavar="N",
                    help="Solve the puzzle N times and print statistics.")
    ap.add_argument("--workers", type=int, default=None, help="Benchmark worker processes (default: CPU count).")
    ap.add_argument("--timeout", type=float, default=None, help="Abandon a benchmark batch after S seconds.")
    ap.add_argument("--config", type=str, default=None, help="YAML file with any of the options above.")
    ap.add_argument("--quiet", action="store_true", default=None, help="Only print the result.")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = build_config(
            args.config,
            runs=args.runs,
            workers=args.workers,
            seed=args.seed,
            format=args.format,
            strict=args.strict,
            timeout=args.timeout,
            max_steps=args.max_steps,
            quiet=args.quiet,
        )
        grid = load_grid(args.puzzle, strict=bool(cfg.strict))
        validate_grid(grid)
    except (OSError, ValueError) as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2

    quiet = bool(cfg.quiet)
    if isinstance(cfg.runs, bool) or not isinstance(cfg.runs, int) or cfg.runs < 1:
        print(f"[error] --benchmark must be >= 1, got {cfg.runs}", file=sys.stderr)
        return 2
    if cfg.runs > 1:
        return _benchmark(grid, cfg, quiet)

    try:
        rec = solve_tool(grid, seed=cfg.seed, max_steps=cfg.max_steps)
    except StepBudgetExceeded as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    if cfg.format == "json":
        print(json.dumps(rec, indent=2))
        return 0
    fmt = FORMATTERS.get(cfg.format)
    if fmt is None:
        print(f"[error] unknown format: {cfg.format}", file=sys.stderr)
        return 2
    print(fmt(grid_from_string(rec["solution"])))
    if not quiet:
        print(f"steps: {rec['steps']}  rollbacks: {rec['rollbacks']}  time: {rec['elapsed_s'] * 1e3:.2f} ms")
    return 0


def _benchmark(grid, cfg, quiet: bool) -> int:
    log(f"benchmark: runs={cfg.runs} workers={cfg.workers or 'auto'} seed={cfg.seed}", quiet=quiet)
    try:
        records = run_benchmark(
            grid,
            runs=int(cfg.runs),
            workers=cfg.workers,
            seed=cfg.seed,
            timeout=cfg.timeout,
            max_steps=cfg.max_steps,
            quiet=quiet,
        )
    except ValueError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2
    except TimeoutError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    summary = summarize(records)
    if cfg.format == "json":
        print(json.dumps({"summary": summary, "runs": records}, indent=2))
    else:
        print(format_summary(summary))
    return 0 if summary["failed"] == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
