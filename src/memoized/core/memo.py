"""Memoized callable contract shared by every wrapper."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, Generic, Hashable, TypeVar

A = TypeVar("A", bound=Hashable)
R = TypeVar("R")


class Memoized(ABC, Generic[A, R]):
    """A callable `(A) -> R` backed by an unbounded per-instance cache.

    The cache maps each distinct argument to the first result computed for
    it. Entries are never updated or evicted, and they live exactly as long
    as the wrapper instance.
    """

    def __init__(self) -> None:
        self._cache: dict[A, R] = {}

    @abstractmethod
    def call(self, arg: A) -> R:
        """Return the cached result for `arg`, computing and storing it on a miss.

        The returned object is the one held by the cache. Callers that intend
        to mutate it should use `call_cloned` instead.
        """

    def call_cloned(self, arg: A) -> R:
        """Shortcut for a deep copy of `self.call(arg)`."""
        return copy.deepcopy(self.call(arg))

    def __call__(self, arg: A) -> R:
        return self.call(arg)

    def __contains__(self, arg: Any) -> bool:
        return arg in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name()!r}, cached={len(self._cache)})"

    def _name(self) -> str:
        return "<unknown>"
