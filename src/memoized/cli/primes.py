"""Implementation of `memoized primes`."""

from __future__ import annotations

import argparse

from memoized.cli._args import non_negative_int
from memoized.ops.primes import memoized_next_prime, primes_between


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("primes", help="Search primes with memoized trial division")
    parser.add_argument("start", nargs="?", type=non_negative_int, default=None, help="Search after this number")
    parser.add_argument("end", nargs="?", type=non_negative_int, default=None, help="List primes up to this number")
    parser.set_defaults(func=cmd_primes)


def cmd_primes(args: argparse.Namespace) -> int:
    start = args.start if args.start is not None else args.settings["primes"]["start"]
    next_prime = memoized_next_prime()

    if args.end is None:
        print(f"Next prime from {start} is {next_prime.call_cloned(start)}")
        return 0

    print(f"Primes from {start} to {args.end}")
    for p in primes_between(next_prime.call_cloned, start, args.end):
        print(p)
    return 0
