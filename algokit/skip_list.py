"""Probabilistic skip list mapping ordered keys to values."""

from __future__ import annotations

import random
from typing import Any

_MISSING = object()


class _Node:
    __slots__ = ("key", "value", "right", "down")

    def __init__(self, key: Any, value: Any = None) -> None:
        self.key = key
        self.value = value
        self.right: _Node | None = None
        self.down: _Node | None = None


class SkipListMap:
    """Ordered map where each key is promoted a level up with probability 1/2."""

    def __init__(self, seed: Any = None) -> None:
        self._rng = random.Random(seed)
        self.clear()

    def clear(self) -> None:
        self._head = _Node(None)
        self._levels = 1
        self._size = 0

    def _coin(self) -> bool:
        return self._rng.random() < 0.5

    def _descend(self, key: Any) -> list[_Node]:
        """Predecessors of ``key`` on every level, from the top level down."""
        path: list[_Node] = []
        current = self._head
        while True:
            while current.right is not None and current.right.key < key:
                current = current.right
            path.append(current)
            if current.down is None:
                return path
            current = current.down

    def insert(self, key: Any, value: Any) -> None:
        """Map ``key`` to ``value``, replacing the value of an existing key."""
        path = self._descend(key)
        following = path[-1].right
        if following is not None and following.key == key:
            following.value = value
            return
        below: _Node | None = None
        for predecessor in reversed(path):
            node = _Node(key, value if below is None else None)
            node.right = predecessor.right
            node.down = below
            predecessor.right = node
            below = node
            if not self._coin():
                break
        else:
            head = _Node(None)
            head.down = self._head
            head.right = _Node(key)
            head.right.down = below
            self._head = head
            self._levels += 1
        self._size += 1

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value for ``key``, or ``default`` when absent."""
        following = self._descend(key)[-1].right
        if following is not None and following.key == key:
            return following.value
        return default

    def __contains__(self, key: Any) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def __len__(self) -> int:
        return self._size

    def levels(self) -> int:
        """Number of levels currently in the list."""
        return self._levels