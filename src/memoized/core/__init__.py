"""Memoized callable wrappers."""

from .closure import Closure, memoize
from .memo import Memoized
from .recursive import RecursiveClosure, memoize_rec

__all__ = [
    "Closure",
    "Memoized",
    "RecursiveClosure",
    "memoize",
    "memoize_rec",
]
