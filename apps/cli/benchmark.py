"""Benchmark mode: solve the same puzzle many times in independent worker processes and summarize steps and wall time."""

# benchmark.py
# Each run is one complete solve with its own random.Random(base_seed + run).
# Workers share nothing; results are only combined once the batch is done.
# A batch timeout abandons the whole pool (solves cannot be interrupted cleanly).

from __future__ import annotations

import multiprocessing
import random
import time
from typing import Dict, List, Optional

import numpy as np
from tqdm import tqdm

from solver.random_solver import StepBudgetExceeded
from solver.sudoku_tools import solve_tool
from types_sudoku import Grid, RunRecord


def _solve_one(task) -> RunRecord:
    run, grid, seed, max_steps = task
    try:
        rec = solve_tool(grid, seed=seed, max_steps=max_steps)
    except StepBudgetExceeded as e:
        return {"run": run, "seed": seed, "steps": e.steps, "ok": False, "error": str(e)}
    rec["run"] = run
    return rec


def run_benchmark(
    grid: Grid,
    runs: int,
    workers: Optional[int] = None,
    seed: Optional[int] = None,
    timeout: Optional[float] = None,
    max_steps: Optional[int] = None,
    quiet: bool = False,
) -> List[RunRecord]:
    """Solve `grid` `runs` times; returns one record per run ordered by run index.

    workers=1 without a timeout runs inline in this process. Raises
    TimeoutError if the batch does not finish within `timeout` seconds.
    """
    if runs <= 0:
        raise ValueError("runs must be >= 1")
    if workers is not None and workers <= 0:
        raise ValueError("workers must be >= 1")
    if seed is None:
        seed = random.SystemRandom().getrandbits(32)
    tasks = [(i, grid, seed + i, max_steps) for i in range(runs)]

    records: List[RunRecord] = []
    if workers == 1 and timeout is None:
        for t in tqdm(tasks, desc="solve", ncols=88, disable=quiet):
            records.append(_solve_one(t))
    else:
        deadline = None if timeout is None else time.monotonic() + timeout
        with multiprocessing.Pool(processes=workers) as pool:
            it = pool.imap_unordered(_solve_one, tasks)
            for _ in tqdm(range(runs), desc="solve", ncols=88, disable=quiet):
                remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
                try:
                    records.append(it.next(remaining))
                except multiprocessing.TimeoutError:
                    pool.terminate()
                    raise TimeoutError(
                        f"benchmark abandoned after {timeout}s with {len(records)}/{runs} runs done"
                    ) from None
    records.sort(key=lambda r: r["run"])
    return records


def summarize(records: List[RunRecord]) -> Dict:
    ok = [r for r in records if r.get("ok")]
    out = {"runs": len(records), "solved": len(ok), "failed": len(records) - len(ok)}
    if not ok:
        return out
    steps = np.array([r["steps"] for r in ok], dtype=np.float64)
    secs = np.array([r["elapsed_s"] for r in ok], dtype=np.float64)
    rollbacks = np.array([r.get("rollbacks", 0) for r in ok], dtype=np.float64)
    for name, arr in (("steps", steps), ("elapsed_s", secs), ("rollbacks", rollbacks)):
        out[name] = {
            "mean": float(arr.mean()),
            "median": float(np.median(arr)),
            "min": float(arr.min()),
            "max": float(arr.max()),
            "std": float(arr.std()),
        }
    out["total_elapsed_s"] = float(secs.sum())
    return out


def format_summary(summary: Dict) -> str:
    lines = [f"runs: {summary['runs']}  solved: {summary['solved']}  failed: {summary['failed']}"]
    if "steps" in summary:
        s = summary["steps"]
        lines.append(
            f"steps      mean={s['mean']:,.1f}  median={s['median']:,.0f}  min={s['min']:,.0f}  max={s['max']:,.0f}  std={s['std']:,.1f}"
        )
        t = summary["elapsed_s"]
        lines.append(
            f"time (ms)  mean={t['mean'] * 1e3:,.2f}  median={t['median'] * 1e3:,.2f}  min={t['min'] * 1e3:,.2f}  max={t['max'] * 1e3:,.2f}"
        )
        b = summary["rollbacks"]
        lines.append(f"rollbacks  mean={b['mean']:,.1f}  max={b['max']:,.0f}")
    return "\n".join(lines)
