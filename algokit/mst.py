"""Disjoint set union and Kruskal's minimum spanning forest."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


class DisjointSet:
    """Union-find over ``0 .. size - 1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Representative of the set holding ``item``."""
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} out of range")
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: int, second: int) -> bool:
        """Join the two sets; return False if they were already one."""
        root_first = self.find(first)
        root_second = self.find(second)
        if root_first == root_second:
            return False
        if self._rank[root_first] < self._rank[root_second]:
            root_first, root_second = root_second, root_first
        self._parent[root_second] = root_first
        if self._rank[root_first] == self._rank[root_second]:
            self._rank[root_first] += 1
        return True

    def same(self, first: int, second: int) -> bool:
        return self.find(first) == self.find(second)


@dataclass(frozen=True)
class Edge:
    source: int
    target: int
    weight: Any


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Minimum spanning forest; equal weights keep their input order."""
    components = DisjointSet(vertex_count)
    forest: list[Edge] = []
    for edge in sorted(edges, key=lambda e: e.weight):
        if len(forest) == vertex_count - 1:
            break
        if components.union(edge.source, edge.target):
            forest.append(edge)
    return forest


def total_weight(edges: Iterable[Edge]) -> Any:
    """Sum of the edge weights."""
    return sum(edge.weight for edge in edges)