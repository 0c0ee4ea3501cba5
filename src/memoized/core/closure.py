"""Memoization of plain single-argument functions."""

from __future__ import annotations

import logging
from typing import Callable

from memoized.core.memo import A, Memoized, R

logger = logging.getLogger(__name__)


class Closure(Memoized[A, R]):
    """Cache-aside wrapper around a function with signature `(A) -> R`."""

    def __init__(self, func: Callable[[A], R]) -> None:
        super().__init__()
        self._func = func

    def call(self, arg: A) -> R:
        cache = self._cache
        if arg not in cache:
            # A re-entrant call may already have stored `arg`; the first value stays.
            cache.setdefault(arg, self._func(arg))
        return cache[arg]

    def _name(self) -> str:
        return getattr(self._func, "__qualname__", repr(self._func))


def memoize(func: Callable[[A], R]) -> Memoized[A, R]:
    """Memoize `func`. Usable directly or as a decorator::

        @memoize
        def is_prime(n): ...

        is_prime.call(7)  # True
    """
    wrapper: Closure[A, R] = Closure(func)
    logger.debug("Memoizing %s", wrapper._name())
    return wrapper
