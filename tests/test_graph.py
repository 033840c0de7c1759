import pytest

from algokit.graph import ListGraph, UndirectedListGraph, count_components


def test_neighbours_of_directed_graph():
    graph = ListGraph([0, 1, 2, 3, 4], [(0, 1), (1, 2), (3, 4), (0, 2), (0, 7)])
    assert list(graph.neighbours(0, lambda edge: True)) == [(0, 1), (0, 2), (0, 7)]


def test_neighbours_without_predicate():
    graph = ListGraph([0, 1, 2], [(0, 1), (0, 2)])
    assert list(graph.neighbours(0)) == [(0, 1), (0, 2)]


def test_neighbours_filtered():
    graph = ListGraph([0, 1, 2], [(0, 1), (0, 2)])
    assert list(graph.neighbours(0, lambda edge: edge[1] != 1)) == [(0, 2)]


def test_predicate_is_lazy():
    graph = ListGraph([0, 1, 2, 3], [(0, 1), (0, 2), (0, 3)])
    blocked = set()
    seen = []
    for edge in graph.neighbours(0, lambda e: e[1] not in blocked):
        seen.append(edge)
        blocked.add(2)
    assert seen == [(0, 1), (0, 3)]


def test_unknown_vertex_has_no_neighbours():
    graph = ListGraph([0, 1], [(0, 1)])
    assert list(graph.neighbours(42)) == []


def test_counts():
    vertices = [0, 1, 2, 3, 4]
    edges = [(0, 1), (1, 2), (3, 4), (0, 2), (0, 7)]
    graph = ListGraph(vertices, edges)
    assert graph.edge_count() == len(edges)
    assert graph.vertex_count() == len(vertices)
    assert graph.vertices() == vertices


def test_undirected_edges_are_symmetric():
    edges = [(0, 1), (1, 2), (3, 4)]
    graph = UndirectedListGraph([0, 1, 2, 3, 4], edges)
    for a, b in edges:
        assert (a, b) in list(graph.neighbours(a))
        assert (b, a) in list(graph.neighbours(b))


@pytest.mark.parametrize(
    "vertices, edges, expected",
    [
        ([0, 1, 2, 3, 4], [(0, 1), (1, 2), (3, 4), (0, 2)], 2),
        ([0, 1, 2, 3, 4, 5, 6, 7], [(0, 1), (1, 2), (3, 4), (0, 2), (6, 7), (7, 6)], 4),
        (["a", "b", "c", "d", "e"], [("a", "b"), ("b", "c"), ("d", "e"), ("a", "c")], 2),
    ],
)
def test_count_components_source_examples(vertices, edges, expected):
    assert count_components(UndirectedListGraph(vertices, edges)) == expected


def test_isolated_vertices_are_components():
    vertices = list(range(6))
    assert count_components(UndirectedListGraph(vertices, [])) == len(vertices)


def test_empty_graph_has_no_components():
    assert count_components(UndirectedListGraph([], [])) == 0


def test_long_path_is_one_component():
    vertices = list(range(3000))
    edges = list(zip(vertices, vertices[1:]))
    assert count_components(UndirectedListGraph(vertices, edges)) == 1