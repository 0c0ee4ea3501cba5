"""Prime search by trial division, plain and memoized.

`is_prime` checks for divisors in `2..n` only, so `0` and `1` are reported as
prime. Callers that need the mathematical definition must filter them.
"""

from __future__ import annotations

from typing import Callable, Iterator

from memoized.core import Memoized, memoize


def is_prime(n: int) -> bool:
    for i in range(2, n):
        if n % i == 0:
            return False
    return True


def next_prime_from(is_prime_fn: Callable[[int], bool]) -> Callable[[int], int]:
    """Build `next_prime(n)`: the smallest `m > n` for which `is_prime_fn(m)` holds."""

    def next_prime(n: int) -> int:
        while True:
            n += 1
            if is_prime_fn(n):
                return n

    return next_prime


def next_prime(n: int) -> int:
    return next_prime_from(is_prime)(n)


def memoized_next_prime() -> Memoized[int, int]:
    """`next_prime` memoized on top of a memoized `is_prime`."""
    prime_memo = memoize(is_prime)
    return memoize(next_prime_from(prime_memo.call))


def primes_between(next_prime_fn: Callable[[int], int], start: int, end: int) -> Iterator[int]:
    """Yield successive primes after `start`, up to and including `end`."""
    n = next_prime_fn(start)
    while n <= end:
        yield n
        n = next_prime_fn(n)
