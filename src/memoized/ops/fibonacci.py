"""Fibonacci numbers, plain and memoized."""

from __future__ import annotations

from typing import Callable, Iterator

from memoized.core import Memoized, memoize, memoize_rec


def fib_recursive(n: int) -> int:
    """Naive exponential-time recursion, used as the reference result."""
    if n < 2:
        return n
    return fib_recursive(n - 1) + fib_recursive(n - 2)


def fib_iterative(n: int) -> int:
    if n == 0:
        return 0
    a, b = 0, 1
    for _ in range(1, n):
        a, b = b, a + b
    return b


def fib_step(fib: Callable[[int], int], n: int) -> int:
    """Recursive body for `memoize_rec`: same shape as `fib_recursive`."""
    if n < 2:
        return n
    return fib(n - 1) + fib(n - 2)


def memoized_fib() -> Memoized[int, int]:
    return memoize_rec(fib_step)


def memoized_fib_iterative() -> Memoized[int, int]:
    return memoize(fib_iterative)


def fibonacci_range(fib: Callable[[int], int], start: int, end: int) -> Iterator[tuple[int, int]]:
    """Yield `(n, fib(n))` for every `n` in `start..=end`."""
    for n in range(start, end + 1):
        yield n, fib(n)
