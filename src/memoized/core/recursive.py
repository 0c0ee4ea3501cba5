"""Memoization of self-recursive functions.

A recursive function cannot simply be wrapped with `memoize`: its body calls
the undecorated function by name, so only the outermost call would be cached.
Instead the function takes the recursive call as an explicit first argument::

    def fib(fib, n):
        return n if n < 2 else fib(n - 1) + fib(n - 2)

    fib_memo = memoize_rec(fib)
    fib_memo.call(90)  # linear number of evaluations

`memoize_rec` supplies a callback that routes every nested call through the
wrapper's own cache, so overlapping subproblems are computed once no matter
how deep they appear in the recursion.
"""

from __future__ import annotations

import copy
import logging
from typing import Callable

from memoized.core.memo import A, Memoized, R

logger = logging.getLogger(__name__)

RecursiveFunc = Callable[[Callable[[A], R], A], R]


class RecursiveClosure(Memoized[A, R]):
    """Wrapper around a function with signature `((A) -> R, A) -> R`."""

    def __init__(self, func: RecursiveFunc) -> None:
        super().__init__()
        self._func = func

    def call(self, arg: A) -> R:
        cache = self._cache
        if arg not in cache:
            # A nested call may already have stored `arg`; the first value stays.
            cache.setdefault(arg, self._func(self._recurse, arg))
        return cache[arg]

    def _recurse(self, arg: A) -> R:
        # Inlined lookup: one frame per level besides the wrapped function.
        # Nested callers get a copy, never the stored entry.
        cache = self._cache
        if arg not in cache:
            cache.setdefault(arg, self._func(self._recurse, arg))
        return copy.deepcopy(cache[arg])

    def _name(self) -> str:
        return getattr(self._func, "__qualname__", repr(self._func))


def memoize_rec(func: RecursiveFunc) -> Memoized[A, R]:
    """Memoize a recursive function.

    `func` receives two arguments: the callback to use for recursive calls,
    and the argument itself. It must never call itself by name.
    """
    wrapper: RecursiveClosure[A, R] = RecursiveClosure(func)
    logger.debug("Memoizing recursive %s", wrapper._name())
    return wrapper
