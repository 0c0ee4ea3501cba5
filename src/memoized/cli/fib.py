"""Implementation of `memoized fib`."""

from __future__ import annotations

import argparse

from memoized.cli._args import non_negative_int
from memoized.ops.fibonacci import fibonacci_range, memoized_fib


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("fib", help="Print Fibonacci numbers using a memoized recursive function")
    parser.add_argument("start", nargs="?", type=non_negative_int, default=None, help="First index")
    parser.add_argument("end", nargs="?", type=non_negative_int, default=None, help="Last index (inclusive)")
    parser.set_defaults(func=cmd_fib)


def cmd_fib(args: argparse.Namespace) -> int:
    cfg = args.settings["fib"]
    if args.start is None:
        start, end = cfg["start"], cfg["end"]
    else:
        start = args.start
        end = args.end if args.end is not None else args.start

    fib = memoized_fib()
    # Fill the cache bottom-up so each new index recurses only one level.
    for k in range(start):
        fib.call(k)
    for n, value in fibonacci_range(fib.call, start, end):
        print(f"fib({n}) = {value}")
    return 0
