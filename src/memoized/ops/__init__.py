"""Example computations built on the memoization wrappers."""

from .fibonacci import (
    fib_iterative,
    fib_recursive,
    fib_step,
    fibonacci_range,
    memoized_fib,
    memoized_fib_iterative,
)
from .primes import is_prime, memoized_next_prime, next_prime, next_prime_from, primes_between

__all__ = [
    "fib_iterative",
    "fib_recursive",
    "fib_step",
    "fibonacci_range",
    "is_prime",
    "memoized_fib",
    "memoized_fib_iterative",
    "memoized_next_prime",
    "next_prime",
    "next_prime_from",
    "primes_between",
]
