"""Benchmark execution."""

from __future__ import annotations

import logging
import time
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from memoized.bench.cases import BenchCase

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ["name", "group", "repeat", "min_s", "median_s", "mean_s", "std_s", "first_s"]


class BenchError(RuntimeError):
    """Raised when a benchmark run cannot be performed or reported."""


def select_cases(cases: Sequence[BenchCase], names: Iterable[str] | None) -> list[BenchCase]:
    if not names:
        return list(cases)
    by_name = {case.name: case for case in cases}
    wanted = list(dict.fromkeys(names))
    unknown = [name for name in wanted if name not in by_name]
    if unknown:
        available = ", ".join(sorted(by_name))
        raise BenchError(f"Unknown benchmark(s): {', '.join(unknown)}. Available: {available}")
    return [by_name[name] for name in wanted]


def time_case(case: BenchCase, repeat: int) -> np.ndarray:
    """Return per-repeat wall times in seconds for a single case."""
    if repeat < 1:
        raise BenchError(f"repeat must be >= 1, got {repeat}")
    run = case.setup()
    timings = np.empty(repeat, dtype=float)
    for i in range(repeat):
        t0 = time.perf_counter()
        run()
        timings[i] = time.perf_counter() - t0
    return timings


def run_benchmarks(
    cases: Sequence[BenchCase],
    repeat: int = 5,
    select: Iterable[str] | None = None,
) -> pd.DataFrame:
    rows = []
    for case in select_cases(cases, select):
        logger.info("Running benchmark %s (repeat=%d)", case.name, repeat)
        timings = time_case(case, repeat)
        rows.append(
            {
                "name": case.name,
                "group": case.group,
                "repeat": int(repeat),
                "min_s": float(np.min(timings)),
                "median_s": float(np.median(timings)),
                "mean_s": float(np.mean(timings)),
                "std_s": float(np.std(timings)),
                "first_s": float(timings[0]),
            }
        )
        logger.debug("Benchmark %s timings: %s", case.name, timings.tolist())
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
