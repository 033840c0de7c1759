"""Dijkstra's shortest paths over a graph with a pluggable edge metric."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Iterable, Sequence
from typing import Any


class EdgeMetric:
    """Symmetric edge lengths set by hand; ``metric(a, b) == metric(b, a)``."""

    def __init__(self) -> None:
        self._distances: dict[tuple[int, int], Any] = {}

    @staticmethod
    def _key(source: int, target: int) -> tuple[int, int]:
        return (min(source, target), max(source, target))

    def set_distance(self, source: int, target: int, distance: Any) -> None:
        self._distances[self._key(source, target)] = distance

    def __call__(self, source: int, target: int) -> Any:
        try:
            return self._distances[self._key(source, target)]
        except KeyError:
            raise KeyError((source, target)) from None


def shortest_path(
    graph: Sequence[Iterable[int]],
    metric: Callable[[int, int], Any],
    source: int,
    target: int,
) -> list[tuple[int, int]]:
    """Edges ``(from, to)`` of a shortest path from ``source`` to ``target``.

    ``graph[v]`` lists the neighbours of ``v`` and ``metric(u, v)`` gives the
    non-negative length of the edge.  Raises ``ValueError`` if ``target`` is
    unreachable.
    """
    size = len(graph)
    for vertex in (source, target):
        if not 0 <= vertex < size:
            raise IndexError(f"vertex {vertex} out of range")
    distances: list[Any] = [None] * size
    parents: list[int | None] = [None] * size
    distances[source] = 0
    queue: list[tuple[Any, int]] = [(0, source)]
    while queue:
        distance, vertex = heapq.heappop(queue)
        if distance > distances[vertex]:
            continue
        for neighbour in graph[vertex]:
            length = metric(vertex, neighbour)
            if length < 0:
                raise ValueError(f"negative edge length between {vertex} and {neighbour}")
            candidate = distance + length
            if distances[neighbour] is None or candidate < distances[neighbour]:
                distances[neighbour] = candidate
                parents[neighbour] = vertex
                heapq.heappush(queue, (candidate, neighbour))
    if distances[target] is None:
        raise ValueError(f"vertex {target} is unreachable from {source}")
    path: list[tuple[int, int]] = []
    current = target
    while current != source:
        parent = parents[current]
        path.append((parent, current))
        current = parent
    path.reverse()
    return path


def path_length(path: Iterable[tuple[int, int]], metric: Callable[[int, int], Any]) -> Any:
    """Total length of the edges of ``path`` under ``metric``."""
    return sum(metric(source, target) for source, target in path)