"""Benchmark harness for plain versus memoized computations."""

from .cases import BenchCase, builtin_cases
from .runner import BenchError, run_benchmarks, select_cases, time_case

__all__ = [
    "BenchCase",
    "BenchError",
    "builtin_cases",
    "run_benchmarks",
    "select_cases",
    "time_case",
]
