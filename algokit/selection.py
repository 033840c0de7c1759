"""Quicksort and order statistics with median-of-medians pivots."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

_GROUP = 5


def _lower_median(items: list[Any]) -> Any:
    return sorted(items)[(len(items) - 1) // 2]


def _partition(items: list[Any], pivot: Any) -> tuple[list[Any], list[Any], list[Any]]:
    less: list[Any] = []
    equal: list[Any] = []
    greater: list[Any] = []
    for item in items:
        if item < pivot:
            less.append(item)
        elif pivot < item:
            greater.append(item)
        else:
            equal.append(item)
    return less, equal, greater


def _pivot(items: list[Any]) -> Any:
    if len(items) <= _GROUP:
        return _lower_median(items)
    medians = [
        _lower_median(items[i:i + _GROUP]) for i in range(0, len(items), _GROUP)
    ]
    return _select(medians, (len(medians) - 1) // 2)


def _select(items: list[Any], k: int) -> Any:
    while True:
        if len(items) <= _GROUP:
            return sorted(items)[k]
        pivot = _pivot(items)
        less, equal, greater = _partition(items, pivot)
        if k < len(less):
            items = less
        elif k < len(less) + len(equal):
            return pivot
        else:
            k -= len(less) + len(equal)
            items = greater


def median_of_medians(values: Sequence[Any], start: int = 0, end: int | None = None) -> Any:
    """Pivot value for ``values[start:end]`` chosen by the median-of-medians rule.

    At least about 30% of the range lies on each side of the returned value.
    """
    stop = len(values) if end is None else end
    if not 0 <= start < stop <= len(values):
        raise ValueError(f"invalid or empty range [{start}, {stop})")
    return _pivot(list(values[start:stop]))


def _quick_sort(items: list[Any]) -> list[Any]:
    if len(items) <= 1:
        return items
    less, equal, greater = _partition(items, _pivot(items))
    return _quick_sort(less) + equal + _quick_sort(greater)


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with the values in ascending order."""
    return _quick_sort(list(values))


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """Return the element that would stand at zero-based index ``k`` once sorted."""
    items = list(values)
    if not 0 <= k < len(items):
        raise IndexError(f"k={k} out of range for {len(items)} values")
    return _select(items, k)