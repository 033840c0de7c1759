"""Directed graphs, topological order and Kosaraju's strongly connected components."""

from __future__ import annotations

from collections.abc import Iterator


class DirectedGraph:
    """Directed graph on vertices ``0 .. vertex_count - 1`` with adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must be non-negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, source: int, target: int) -> None:
        self._check(source)
        self._check(target)
        self._adjacency[source].append(target)

    def neighbours(self, vertex: int) -> tuple[int, ...]:
        """Targets of the edges leaving ``vertex``, in insertion order."""
        self._check(vertex)
        return tuple(self._adjacency[vertex])

    def inverse(self) -> DirectedGraph:
        """A new graph with every edge reversed."""
        result = DirectedGraph(len(self))
        for source, targets in enumerate(self._adjacency):
            for target in targets:
                result._adjacency[target].append(source)
        return result

    def __len__(self) -> int:
        return len(self._adjacency)

    @classmethod
    def parse(cls, text: str) -> DirectedGraph:
        """Read ``n m`` followed by ``m`` pairs ``source target``."""
        tokens = iter(text.split())
        try:
            vertex_count = int(next(tokens))
            edge_count = int(next(tokens))
            graph = cls(vertex_count)
            for _ in range(edge_count):
                source = int(next(tokens))
                target = int(next(tokens))
                graph.add_edge(source, target)
        except StopIteration:
            raise ValueError("graph description ended too early") from None
        return graph


def _postorder(adjacency: list[list[int]], start: int, visited: list[bool]) -> list[int]:
    visited[start] = True
    finished: list[int] = []
    stack: list[tuple[int, Iterator[int]]] = [(start, iter(adjacency[start]))]
    while stack:
        vertex, remaining = stack[-1]
        for target in remaining:
            if not visited[target]:
                visited[target] = True
                stack.append((target, iter(adjacency[target])))
                break
        else:
            stack.pop()
            finished.append(vertex)
    return finished


def topological_order(graph: DirectedGraph) -> list[int]:
    """Vertices by decreasing depth-first finishing time."""
    visited = [False] * len(graph)
    finished: list[int] = []
    for vertex in range(len(graph)):
        if not visited[vertex]:
            finished.extend(_postorder(graph._adjacency, vertex, visited))
    finished.reverse()
    return finished


def strongly_connected_components(graph: DirectedGraph) -> list[list[int]]:
    """Strongly connected components, listed in topological order of the condensation."""
    order = topological_order(graph)
    inverted = graph.inverse()
    visited = [False] * len(graph)
    return [
        _postorder(inverted._adjacency, vertex, visited)
        for vertex in order
        if not visited[vertex]
    ]