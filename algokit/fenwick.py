"""Fenwick (binary indexed) tree for point updates and range sums."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class FenwickTree:
    """Prefix-sum tree over a fixed number of positions, indexed from zero."""

    def __init__(self, data: Iterable[Any]) -> None:
        tree = list(data)
        size = len(tree)
        for i in range(size):
            parent = i | (i + 1)
            if parent < size:
                tree[parent] += tree[i]
        self._tree = tree

    @classmethod
    def zeros(cls, size: int) -> FenwickTree:
        """A tree of ``size`` zero-valued positions."""
        if size < 0:
            raise ValueError("size must be non-negative")
        return cls([0] * size)

    def __len__(self) -> int:
        return len(self._tree)

    def _check(self, pos: int) -> None:
        if not 0 <= pos < len(self._tree):
            raise IndexError(f"position {pos} out of range")

    def _prefix(self, pos: int) -> Any:
        total = 0
        i = pos
        while i >= 0:
            total += self._tree[i]
            i = (i & (i + 1)) - 1
        return total

    def sum(self, left: int, right: int) -> Any:
        """Sum of the elements in the inclusive range ``[left, right]``."""
        self._check(left)
        self._check(right)
        if left > right:
            raise IndexError("left bound exceeds right bound")
        if left == 0:
            return self._prefix(right)
        return self._prefix(right) - self._prefix(left - 1)

    def add(self, pos: int, delta: Any) -> None:
        """Add ``delta`` to the element at ``pos``."""
        self._check(pos)
        i = pos
        size = len(self._tree)
        while i < size:
            self._tree[i] += delta
            i |= i + 1