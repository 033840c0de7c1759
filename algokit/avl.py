"""Self-balancing AVL trees: an ordered map and an ordered multiset."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class _Node:
    __slots__ = ("key", "value", "left", "right", "height")

    def __init__(self, key: Any, value: Any = None) -> None:
        self.key = key
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.height = 1


def _height(node: _Node | None) -> int:
    return 0 if node is None else node.height


def _balance_factor(node: _Node | None) -> int:
    return 0 if node is None else _height(node.right) - _height(node.left)


def _update_height(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_left(node: _Node) -> _Node:
    new_parent = node.right
    node.right = new_parent.left
    new_parent.left = node
    _update_height(node)
    _update_height(new_parent)
    return new_parent


def _rotate_right(node: _Node) -> _Node:
    new_parent = node.left
    node.left = new_parent.right
    new_parent.right = node
    _update_height(node)
    _update_height(new_parent)
    return new_parent


def _balance(node: _Node | None) -> _Node | None:
    if node is None:
        return None
    _update_height(node)
    factor = _balance_factor(node)
    if factor == 2:
        if _balance_factor(node.right) == -1:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if factor == -2:
        if _balance_factor(node.left) == 1:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _detach_min(node: _Node) -> tuple[_Node | None, _Node]:
    """Remove the leftmost node; return the rebalanced rest and the removed node."""
    if node.left is None:
        return node.right, node
    rest, minimum = _detach_min(node.left)
    node.left = rest
    return _balance(node), minimum


def _remove_node(node: _Node) -> _Node | None:
    """Unlink ``node`` from its subtree and return the rebalanced replacement."""
    if node.right is None:
        return _balance(node.left)
    rest, minimum = _detach_min(node.right)
    minimum.left = node.left
    minimum.right = rest
    return _balance(minimum)


def _in_order(root: _Node | None) -> Iterator[_Node]:
    stack: list[_Node] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


class AVLTree:
    """Ordered mapping from unique keys to values backed by an AVL tree."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``, replacing the value of an existing key."""
        self._root = self._insert(self._root, key, value)

    def _insert(self, node: _Node | None, key: Any, value: Any) -> _Node:
        if node is None:
            self._size += 1
            return _Node(key, value)
        if key < node.key:
            node.left = self._insert(node.left, key, value)
        elif node.key < key:
            node.right = self._insert(node.right, key, value)
        else:
            node.value = value
            return node
        return _balance(node)

    def erase(self, key: Any) -> None:
        """Remove ``key`` if present; missing keys are ignored."""
        self._root = self._erase(self._root, key)

    def _erase(self, node: _Node | None, key: Any) -> _Node | None:
        if node is None:
            return None
        if key < node.key:
            node.left = self._erase(node.left, key)
            return _balance(node)
        if node.key < key:
            node.right = self._erase(node.right, key)
            return _balance(node)
        self._size -= 1
        return _remove_node(node)

    def _find(self, key: Any) -> _Node | None:
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif current.key < key:
                current = current.right
            else:
                return current
        return None

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        node = self._find(key)
        return default if node is None else node.value

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in _in_order(self._root))

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        return ((node.key, node.value) for node in _in_order(self._root))

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        """Height of the tree; zero when empty."""
        return _height(self._root)


class AVLMultiset:
    """Ordered multiset of values backed by an AVL tree; duplicates are kept."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def add(self, value: Any) -> None:
        """Add one occurrence of ``value``."""
        self._root = self._add(self._root, value)

    def _add(self, node: _Node | None, value: Any) -> _Node:
        if node is None:
            return _Node(value)
        if value <= node.key:
            node.left = self._add(node.left, value)
        else:
            node.right = self._add(node.right, value)
        return _balance(node)

    def discard(self, value: Any) -> None:
        """Remove one occurrence of ``value`` if present."""
        self._root = self._discard(self._root, value)

    def _discard(self, node: _Node | None, value: Any) -> _Node | None:
        if node is None:
            return None
        if node.key == value:
            return _remove_node(node)
        if value < node.key:
            node.left = self._discard(node.left, value)
        else:
            node.right = self._discard(node.right, value)
        return _balance(node)

    def __contains__(self, value: Any) -> bool:
        current = self._root
        while current is not None:
            if current.key == value:
                return True
            current = current.left if value < current.key else current.right
        return False

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in _in_order(self._root))

    def clear(self) -> None:
        self._root = None

    def height(self) -> int:
        """Height of the tree; zero when empty."""
        return _height(self._root)