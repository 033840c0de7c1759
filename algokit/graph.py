"""Adjacency-list graphs over hashable vertices with filtered neighbour iteration."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any

Edge = tuple[Hashable, Hashable]


class ListGraph:
    """Directed graph stored as adjacency lists keyed by vertex."""

    def __init__(self, vertices: Iterable[Hashable], edges: Iterable[Edge]) -> None:
        self._vertices = list(vertices)
        edge_list = [tuple(edge) for edge in edges]
        self._edge_count = len(edge_list)
        self._adjacency: dict[Hashable, list[Hashable]] = {
            vertex: [] for vertex in self._vertices
        }
        for source, target in edge_list:
            self._adjacency.setdefault(source, []).append(target)

    def edge_count(self) -> int:
        return self._edge_count

    def vertex_count(self) -> int:
        return len(self._vertices)

    def vertices(self) -> list[Hashable]:
        return list(self._vertices)

    def neighbours(
        self,
        vertex: Hashable,
        predicate: Callable[[Edge], Any] | None = None,
    ) -> Iterator[Edge]:
        """Yield the edges ``(vertex, target)`` that ``predicate`` accepts.

        The predicate is checked lazily, as each edge is reached.
        """
        for target in self._adjacency.get(vertex, ()):
            edge = (vertex, target)
            if predicate is None or predicate(edge):
                yield edge


class UndirectedListGraph(ListGraph):
    """Graph where every edge is usable in both directions."""

    def __init__(self, vertices: Iterable[Hashable], edges: Iterable[Edge]) -> None:
        edge_list = [tuple(edge) for edge in edges]
        super().__init__(vertices, edge_list)
        for source, target in edge_list:
            self._adjacency.setdefault(target, []).append(source)


def count_components(graph: ListGraph) -> int:
    """Number of components reached by depth-first search from each listed vertex."""
    visited: set[Hashable] = set()

    def unvisited(edge: Edge) -> bool:
        return edge[1] not in visited

    components = 0
    for start in graph.vertices():
        if start in visited:
            continue
        components += 1
        visited.add(start)
        stack = [graph.neighbours(start, unvisited)]
        while stack:
            for _, target in stack[-1]:
                visited.add(target)
                stack.append(graph.neighbours(target, unvisited))
                break
            else:
                stack.pop()
    return components