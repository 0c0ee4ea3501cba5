"""Function memoization for plain and self-recursive functions."""

from memoized.core import Closure, Memoized, RecursiveClosure, memoize, memoize_rec

__all__ = [
    "Closure",
    "Memoized",
    "RecursiveClosure",
    "memoize",
    "memoize_rec",
]
