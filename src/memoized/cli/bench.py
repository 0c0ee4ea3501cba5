"""Implementation of `memoized bench`."""

from __future__ import annotations

import argparse
from pathlib import Path

from memoized.bench.cases import builtin_cases
from memoized.bench.report import build_bench_payload, plot_bench, write_bench_csv, write_bench_json, write_bench_md
from memoized.bench.runner import run_benchmarks
from memoized.cli._args import positive_int
from memoized.core.config import dump_yaml


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("bench", help="Benchmark plain versus memoized computations")
    parser.add_argument("--repeat", type=positive_int, default=None, help="Timed repeats per case")
    parser.add_argument("--only", nargs="+", default=None, metavar="NAME", help="Run only the named cases")
    parser.add_argument("--list", action="store_true", help="List available cases and exit")
    parser.add_argument("--out", default=None, help="Directory for bench.json, bench.md and bench.csv")
    parser.add_argument("--plot", action="store_true", help="Also write bench.png (requires --out)")
    parser.set_defaults(func=cmd_bench)


def cmd_bench(args: argparse.Namespace) -> int:
    cfg = args.settings["bench"]
    cases = builtin_cases(fib_max=cfg["fib_max"], huge_n=cfg["huge_n"], primes_max=cfg["primes_max"])
    if args.list:
        for case in cases:
            print(f"{case.name} ({case.group})")
        return 0

    repeat = args.repeat if args.repeat is not None else cfg["repeat"]
    results = run_benchmarks(cases, repeat=repeat, select=args.only)
    print(results.to_string(index=False, float_format=lambda v: f"{v:.6f}"))

    if args.out:
        out = Path(args.out)
        payload = build_bench_payload(results, config=args.settings)
        write_bench_json(payload, out / "bench.json")
        write_bench_md(payload, out / "bench.md")
        write_bench_csv(results, out / "bench.csv")
        dump_yaml(args.settings, out / "config_resolved.yaml")
        print(f"Wrote benchmark report to {out}")
        if args.plot:
            plot_path = plot_bench(results, out / "bench.png")
            print(f"Wrote figure to {plot_path}")
    elif args.plot:
        print("--plot requires --out; skipping figure")
    return 0
