"""Built-in benchmark cases comparing plain and memoized computations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from memoized.core import memoize, memoize_rec
from memoized.ops.fibonacci import fib_iterative, fib_recursive, fib_step
from memoized.ops.primes import is_prime, next_prime_from


@dataclass(frozen=True)
class BenchCase:
    """A named benchmark.

    `setup` runs once per benchmark and returns the callable timed on each
    repeat, so memoized wrappers built in `setup` keep their cache across
    repeats.
    """

    name: str
    group: str
    setup: Callable[[], Callable[[], object]]


def _sweep(func: Callable[[int], object], stop: int) -> Callable[[], object]:
    def run() -> object:
        out = None
        for i in range(stop):
            out = func(i)
        return out

    return run


def builtin_cases(fib_max: int = 35, huge_n: int = 20000, primes_max: int = 1000) -> list[BenchCase]:
    return [
        BenchCase("fib_recursive", "fib", lambda: _sweep(fib_recursive, fib_max)),
        BenchCase("fib_recursive_memo", "fib", lambda: _sweep(memoize_rec(fib_step).call, fib_max)),
        BenchCase("fib_iter", "fib", lambda: _sweep(fib_iterative, fib_max)),
        BenchCase("fib_iter_memo", "fib", lambda: _sweep(memoize(fib_iterative).call, fib_max)),
        BenchCase("fib_memo_huge", "fib", lambda: _sweep(memoize_rec(fib_step).call, huge_n)),
        BenchCase("next_prime_normal", "primes", lambda: _sweep(next_prime_from(is_prime), primes_max)),
        BenchCase("next_prime_memo", "primes", lambda: _sweep(_memo_next_prime(), primes_max)),
    ]


def _memo_next_prime() -> Callable[[int], int]:
    prime_memo = memoize(is_prime)
    return memoize(next_prime_from(prime_memo.call)).call
