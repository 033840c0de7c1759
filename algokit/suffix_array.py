"""Suffix array construction by prefix doubling over cyclic shifts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def suffix_array(text: Sequence[Any]) -> list[int]:
    """Start indices of the suffixes of ``text`` in ascending order.

    ``text`` may be a string, bytes or any sequence of comparable symbols.
    """
    length = len(text) + 1  # one extra position for a sentinel smaller than all
    if length == 1:
        return []
    rank = {symbol: index + 1 for index, symbol in enumerate(sorted(set(text)))}
    classes = [rank[symbol] for symbol in text] + [0]
    order = sorted(range(length), key=classes.__getitem__)
    classes = _reclassify(order, classes, lambda i: classes[i])
    shift = 1
    while shift < length and classes[order[-1]] < length - 1:
        previous = classes
        shifted = ((start - shift) % length for start in order)
        order = sorted(shifted, key=previous.__getitem__)
        classes = _reclassify(
            order, previous, lambda i: (previous[i], previous[(i + shift) % length])
        )
        shift *= 2
    return order[1:]


def _reclassify(order: list[int], previous: list[int], key: Any) -> list[int]:
    classes = [0] * len(order)
    current = 0
    for position in range(1, len(order)):
        if key(order[position]) != key(order[position - 1]):
            current += 1
        classes[order[position]] = current
    return classes