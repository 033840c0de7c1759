"""Binary min-heap and algorithms built on it."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any


def _identity(value: Any) -> Any:
    return value


class BinaryHeap:
    """Min-heap ordered by ``key(value)``; the smallest key is on top."""

    def __init__(self, key: Callable[[Any], Any] | None = None) -> None:
        self._key = key or _identity
        self._entries: list[tuple[Any, Any]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def push(self, value: Any) -> None:
        self._entries.append((self._key(value), value))
        self._sift_up(len(self._entries) - 1)

    def peek(self) -> Any:
        """Return the smallest value without removing it."""
        if not self._entries:
            raise IndexError("peek from an empty heap")
        return self._entries[0][1]

    def pop(self) -> Any:
        """Remove and return the smallest value."""
        if not self._entries:
            raise IndexError("pop from an empty heap")
        entries = self._entries
        entries[0], entries[-1] = entries[-1], entries[0]
        _, value = entries.pop()
        self._sift_down(0)
        return value

    def _sift_up(self, index: int) -> None:
        entries = self._entries
        while index > 0:
            parent = (index - 1) // 2
            if not entries[index][0] < entries[parent][0]:
                return
            entries[index], entries[parent] = entries[parent], entries[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        entries = self._entries
        size = len(entries)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and entries[child][0] < entries[smallest][0]:
                    smallest = child
            if smallest == index:
                return
            entries[index], entries[smallest] = entries[smallest], entries[index]
            index = smallest


def merge_sorted(arrays: Sequence[Sequence[Any]]) -> list[Any]:
    """Merge already sorted sequences into one sorted list."""
    heap = BinaryHeap(key=lambda item: (item[0], item[1]))
    positions = [0] * len(arrays)
    for index, array in enumerate(arrays):
        if array:
            heap.push((array[0], index))
    result: list[Any] = []
    while heap:
        value, index = heap.pop()
        result.append(value)
        positions[index] += 1
        if positions[index] < len(arrays[index]):
            heap.push((arrays[index][positions[index]], index))
    return result


class _Descending:
    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __lt__(self, other: _Descending) -> bool:
        return other.value < self.value


def k_smallest(values: Iterable[Any], k: int) -> list[Any]:
    """Return the ``k`` smallest values, largest of them first."""
    if k < 0:
        raise ValueError("k must be non-negative")
    heap = BinaryHeap(key=_Descending)
    if k == 0:
        return []
    for value in values:
        if len(heap) < k:
            heap.push(value)
        elif value < heap.peek():
            heap.pop()
            heap.push(value)
    return [heap.pop() for _ in range(len(heap))]