"""Maximum flow in a network with Dinic's and Ford-Fulkerson's algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Edge:
    source: int
    target: int
    capacity: Any
    flow: Any = 0

    @property
    def residual(self) -> Any:
        return self.capacity - self.flow


class FlowNetwork:
    """Directed network on ``0 .. vertex_count - 1`` with a residual edge per edge."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must be non-negative")
        self._edges: list[_Edge] = []
        self._incident: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._incident):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, source: int, target: int, capacity: Any) -> int:
        """Add an edge and its zero-capacity reverse; return the edge's index."""
        self._check(source)
        self._check(target)
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        index = len(self._edges)
        self._edges.append(_Edge(source, target, capacity))
        self._edges.append(_Edge(target, source, 0))
        self._incident[source].append(index)
        self._incident[target].append(index + 1)
        return index

    def reset(self) -> None:
        """Set the flow on every edge back to zero."""
        for edge in self._edges:
            edge.flow = 0

    def _check_terminals(self, source: int, sink: int) -> None:
        self._check(source)
        self._check(sink)
        if source == sink:
            raise ValueError("source and sink must differ")

    def _levels(self, source: int, sink: int) -> list[int | None] | None:
        levels: list[int | None] = [None] * len(self._incident)
        levels[source] = 0
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            for edge_id in self._incident[vertex]:
                edge = self._edges[edge_id]
                if levels[edge.target] is None and edge.residual > 0:
                    levels[edge.target] = levels[vertex] + 1
                    queue.append(edge.target)
        return None if levels[sink] is None else levels

    def _find_path(
        self, source: int, sink: int, levels: list[int | None] | None
    ) -> list[int] | None:
        visited = {source}
        path: list[int] = []
        stack: list[tuple[int, Iterator[int]]] = [(source, iter(self._incident[source]))]
        while stack:
            vertex, remaining = stack[-1]
            if vertex == sink:
                return path
            for edge_id in remaining:
                edge = self._edges[edge_id]
                if (
                    edge.residual > 0
                    and edge.target not in visited
                    and (levels is None or levels[edge.target] == levels[vertex] + 1)
                ):
                    visited.add(edge.target)
                    stack.append((edge.target, iter(self._incident[edge.target])))
                    path.append(edge_id)
                    break
            else:
                stack.pop()
                if path:
                    path.pop()
        return None

    def _augment(self, path: list[int]) -> None:
        delta = min(self._edges[edge_id].residual for edge_id in path)
        for edge_id in path:
            self._edges[edge_id].flow += delta
            self._edges[edge_id ^ 1].flow -= delta

    def _outflow(self, source: int) -> Any:
        return sum(self._edges[edge_id].flow for edge_id in self._incident[source])

    def dinic(self, source: int, sink: int) -> Any:
        """Augment to a maximum flow with Dinic's algorithm; return its value."""
        self._check_terminals(source, sink)
        while (levels := self._levels(source, sink)) is not None:
            while (path := self._find_path(source, sink, levels)) is not None:
                self._augment(path)
        return self._outflow(source)

    def ford_fulkerson(self, source: int, sink: int) -> Any:
        """Augment to a maximum flow along depth-first paths; return its value."""
        self._check_terminals(source, sink)
        while (path := self._find_path(source, sink, None)) is not None:
            self._augment(path)
        return self._outflow(source)