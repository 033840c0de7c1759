"""Bridges of an undirected multigraph found with one depth-first search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import count


def find_bridges(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Indices of the edges whose removal disconnects their endpoints.

    Vertices are ``0 .. vertex_count - 1``.  Parallel edges are never bridges
    and self-loops are ignored.  Indices come in the order the search closes
    each bridge.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must be non-negative")
    edge_list = [tuple(edge) for edge in edges]
    incident: list[list[int]] = [[] for _ in range(vertex_count)]
    for index, (first, second) in enumerate(edge_list):
        for vertex in (first, second):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} out of range")
        incident[first].append(index)
        incident[second].append(index)

    entry: list[int | None] = [None] * vertex_count
    low = [0] * vertex_count
    timer = count()
    bridges: list[int] = []

    for root in range(vertex_count):
        if entry[root] is not None:
            continue
        entry[root] = low[root] = next(timer)
        stack: list[tuple[int, int | None, Iterator[int]]] = [
            (root, None, iter(incident[root]))
        ]
        while stack:
            vertex, via, remaining = stack[-1]
            for edge_id in remaining:
                if edge_id == via:
                    continue
                first, second = edge_list[edge_id]
                target = second if first == vertex else first
                if target == vertex:
                    continue
                if entry[target] is not None:
                    low[vertex] = min(low[vertex], entry[target])
                else:
                    entry[target] = low[target] = next(timer)
                    stack.append((target, edge_id, iter(incident[target])))
                    break
            else:
                stack.pop()
                if stack:
                    parent = stack[-1][0]
                    low[parent] = min(low[parent], low[vertex])
                    if low[vertex] > entry[parent]:
                        bridges.append(via)
    return bridges