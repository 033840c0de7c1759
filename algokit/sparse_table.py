"""Sparse table for idempotent range queries on a static sequence."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


class SparseTable:
    """Answers ``op`` over half-open ranges in constant time.

    ``op`` must be associative and idempotent (min, max, gcd, bitwise and/or).
    """

    def __init__(self, data: Iterable[Any], op: Callable[[Any, Any], Any]) -> None:
        base = list(data)
        if not base:
            raise ValueError("sparse table needs at least one element")
        self._op = op
        self._levels = [base]
        size = len(base)
        width = 1
        while 2 * width <= size:
            previous = self._levels[-1]
            self._levels.append(
                [op(a, b) for a, b in zip(previous, previous[width:size - width + 1])]
            )
            width *= 2

    def __len__(self) -> int:
        return len(self._levels[0])

    def query(self, left: int, right: int) -> Any:
        """Combine the elements of the half-open interval ``[left, right)``."""
        if not 0 <= left < right <= len(self):
            raise IndexError(f"invalid interval [{left}, {right})")
        level = (right - left).bit_length() - 1
        row = self._levels[level]
        return self._op(row[left], row[right - (1 << level)])