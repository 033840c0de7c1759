"""Randomised treaps: an ordered set and a sequence with implicit keys."""

from __future__ import annotations

import random
from collections.abc import Iterator
from typing import Any


class _SetNode:
    __slots__ = ("key", "priority", "left", "right")

    def __init__(self, key: Any, priority: float) -> None:
        self.key = key
        self.priority = priority
        self.left: _SetNode | None = None
        self.right: _SetNode | None = None


def _in_order(root: Any) -> Iterator[Any]:
    stack: list[Any] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


class TreapSet:
    """Ordered set of unique keys stored in a treap."""

    def __init__(self, seed: Any = None) -> None:
        self._rng = random.Random(seed)
        self._root: _SetNode | None = None
        self._size = 0

    def _split(
        self, node: _SetNode | None, key: Any
    ) -> tuple[_SetNode | None, _SetNode | None]:
        """Split into keys ``<= key`` and keys ``> key``."""
        if node is None:
            return None, None
        if key < node.key:
            left, right = self._split(node.left, key)
            node.left = right
            return left, node
        left, right = self._split(node.right, key)
        node.right = left
        return node, right

    def _merge(
        self, first: _SetNode | None, second: _SetNode | None
    ) -> _SetNode | None:
        """Merge two treaps where every key of ``first`` precedes ``second``."""
        if first is None:
            return second
        if second is None:
            return first
        if first.priority < second.priority:
            second.left = self._merge(first, second.left)
            return second
        first.right = self._merge(first.right, second)
        return first

    def add(self, key: Any) -> None:
        """Add ``key``; adding an existing key changes nothing."""
        if key in self:
            return
        self._size += 1
        left, right = self._split(self._root, key)
        node = _SetNode(key, self._rng.random())
        self._root = self._merge(self._merge(left, node), right)

    def discard(self, key: Any) -> None:
        """Remove ``key`` if it is present."""
        self._root = self._discard(self._root, key)

    def _discard(self, node: _SetNode | None, key: Any) -> _SetNode | None:
        if node is None:
            return None
        if node.key == key:
            self._size -= 1
            return self._merge(node.left, node.right)
        if key < node.key:
            node.left = self._discard(node.left, key)
        else:
            node.right = self._discard(node.right, key)
        return node

    def __contains__(self, key: Any) -> bool:
        current = self._root
        while current is not None:
            if current.key == key:
                return True
            current = current.left if key < current.key else current.right
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in _in_order(self._root))

    def clear(self) -> None:
        self._root = None
        self._size = 0


class _SeqNode:
    __slots__ = ("value", "priority", "size", "left", "right")

    def __init__(self, value: Any, priority: float) -> None:
        self.value = value
        self.priority = priority
        self.size = 1
        self.left: _SeqNode | None = None
        self.right: _SeqNode | None = None


def _size(node: _SeqNode | None) -> int:
    return 0 if node is None else node.size


def _update(node: _SeqNode) -> None:
    node.size = 1 + _size(node.left) + _size(node.right)


def _split_at(
    node: _SeqNode | None, pos: int
) -> tuple[_SeqNode | None, _SeqNode | None]:
    """Split off the first ``pos`` elements."""
    if node is None:
        return None, None
    left_size = _size(node.left)
    if pos <= left_size:
        left, right = _split_at(node.left, pos)
        node.left = right
        _update(node)
        return left, node
    left, right = _split_at(node.right, pos - left_size - 1)
    node.right = left
    _update(node)
    return node, right


def _merge_seq(first: _SeqNode | None, second: _SeqNode | None) -> _SeqNode | None:
    if first is None:
        return second
    if second is None:
        return first
    if first.priority > second.priority:
        first.right = _merge_seq(first.right, second)
        _update(first)
        return first
    second.left = _merge_seq(first, second.left)
    _update(second)
    return second


class ImplicitTreap:
    """Sequence with logarithmic insertion and deletion at any position."""

    def __init__(self, seed: Any = None) -> None:
        self._rng = random.Random(seed)
        self._root: _SeqNode | None = None

    def __len__(self) -> int:
        return _size(self._root)

    def _normalize(self, pos: int) -> int:
        size = len(self)
        if pos < 0:
            pos += size
        if not 0 <= pos < size:
            raise IndexError("treap index out of range")
        return pos

    def insert(self, pos: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at index ``pos``."""
        if not 0 <= pos <= len(self):
            raise IndexError("insertion position out of range")
        node = _SeqNode(value, self._rng.random())
        left, right = _split_at(self._root, pos)
        self._root = _merge_seq(_merge_seq(left, node), right)

    def __delitem__(self, pos: int) -> None:
        pos = self._normalize(pos)
        left, rest = _split_at(self._root, pos)
        _, right = _split_at(rest, 1)
        self._root = _merge_seq(left, right)

    def _node_at(self, pos: int) -> _SeqNode:
        pos = self._normalize(pos)
        node = self._root
        while node is not None:
            left_size = _size(node.left)
            if pos == left_size:
                return node
            if pos < left_size:
                node = node.left
            else:
                pos -= left_size + 1
                node = node.right
        raise IndexError("treap index out of range")

    def __getitem__(self, pos: int) -> Any:
        return self._node_at(pos).value

    def __setitem__(self, pos: int, value: Any) -> None:
        self._node_at(pos).value = value

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _in_order(self._root))