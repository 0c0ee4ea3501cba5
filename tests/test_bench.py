import json
from pathlib import Path

import pandas as pd

from memoized.bench import BenchCase, BenchError, builtin_cases, run_benchmarks, select_cases, time_case
from memoized.bench.report import build_bench_payload, plot_bench, write_bench_csv, write_bench_json, write_bench_md
from memoized.bench.runner import RESULT_COLUMNS


def _small_cases():
    return builtin_cases(fib_max=15, huge_n=200, primes_max=50)


def test_builtin_case_names():
    names = [case.name for case in _small_cases()]
    assert names == [
        "fib_recursive",
        "fib_recursive_memo",
        "fib_iter",
        "fib_iter_memo",
        "fib_memo_huge",
        "next_prime_normal",
        "next_prime_memo",
    ]


def test_setup_runs_once_per_case():
    setups = []

    def setup():
        setups.append(1)
        return lambda: None

    timings = time_case(BenchCase("noop", "misc", setup), repeat=4)
    assert timings.shape == (4,)
    assert (timings >= 0).all()
    assert setups == [1]


def test_run_benchmarks_frame():
    df = run_benchmarks(_small_cases(), repeat=2)
    assert list(df.columns) == RESULT_COLUMNS
    assert len(df) == 7
    assert (df["repeat"] == 2).all()
    assert (df["min_s"] <= df["median_s"]).all()


def test_select_preserves_requested_order():
    cases = _small_cases()
    picked = select_cases(cases, ["next_prime_memo", "fib_iter", "fib_iter"])
    assert [c.name for c in picked] == ["next_prime_memo", "fib_iter"]
    assert len(select_cases(cases, None)) == len(cases)


def test_unknown_case_raises():
    try:
        run_benchmarks(_small_cases(), repeat=1, select=["fib_quantum"])
        assert False
    except BenchError as exc:
        assert "fib_quantum" in str(exc)


def test_invalid_repeat_raises():
    try:
        time_case(_small_cases()[0], repeat=0)
        assert False
    except BenchError:
        pass


def test_reports_written(tmp_path: Path):
    df = run_benchmarks(_small_cases(), repeat=1, select=["fib_recursive", "fib_recursive_memo"])
    payload = build_bench_payload(df, config={"bench": {"repeat": 1}})
    assert [row["name"] for row in payload["results"]] == ["fib_recursive", "fib_recursive_memo"]
    assert "fib_recursive" in payload["speedups"]
    assert payload["versions"]["memoized"]

    write_bench_json(payload, tmp_path / "bench.json")
    write_bench_md(payload, tmp_path / "bench.md")
    write_bench_csv(df, tmp_path / "bench.csv")
    figure = plot_bench(df, tmp_path / "bench.png")

    loaded = json.loads((tmp_path / "bench.json").read_text(encoding="utf-8"))
    assert loaded["config"] == {"bench": {"repeat": 1}}
    assert "| fib_recursive_memo |" in (tmp_path / "bench.md").read_text(encoding="utf-8")
    assert list(pd.read_csv(tmp_path / "bench.csv")["name"]) == ["fib_recursive", "fib_recursive_memo"]
    assert figure.exists() and figure.stat().st_size > 0


def test_empty_results_cannot_be_reported():
    try:
        build_bench_payload(pd.DataFrame(columns=RESULT_COLUMNS))
        assert False
    except BenchError:
        pass
