import pytest

from algokit.mst import DisjointSet, Edge, kruskal, total_weight


def test_disjoint_set_union_and_same():
    dsu = DisjointSet(4)
    assert not dsu.same(0, 1)
    assert dsu.union(0, 1) is True
    assert dsu.same(0, 1)
    assert dsu.union(1, 0) is False
    dsu.union(2, 3)
    assert not dsu.same(1, 2)
    dsu.union(1, 3)
    assert dsu.find(0) == dsu.find(2)


def test_disjoint_set_out_of_range():
    with pytest.raises(IndexError):
        DisjointSet(2).find(2)


def test_triangle():
    edges = [Edge(0, 1, 1), Edge(1, 2, 2), Edge(0, 2, 3)]
    forest = kruskal(3, edges)
    assert forest == [Edge(0, 1, 1), Edge(1, 2, 2)]
    assert total_weight(forest) == 3


def _is_forest(n, edges):
    dsu = DisjointSet(n)
    return all(dsu.union(e.source, e.target) for e in edges)


def test_spanning_tree_of_connected_graph():
    edges = [
        Edge(0, 1, 10), Edge(0, 2, 15), Edge(0, 3, 20),
        Edge(1, 4, 5), Edge(2, 4, 3), Edge(3, 4, 7), Edge(1, 2, 4),
    ]
    forest = kruskal(5, edges)
    assert len(forest) == 4
    assert _is_forest(5, forest)
    assert set(forest) <= set(edges)
    dsu = DisjointSet(5)
    for edge in forest:
        dsu.union(edge.source, edge.target)
    assert all(dsu.same(0, v) for v in range(5))


def test_disconnected_graph_gives_forest():
    edges = [Edge(0, 1, 2), Edge(2, 3, 1)]
    forest = kruskal(4, edges)
    assert sorted(forest, key=lambda e: e.weight) == [Edge(2, 3, 1), Edge(0, 1, 2)]
    assert _is_forest(4, forest)


def test_equal_weights_keep_input_order():
    edges = [Edge(1, 2, 5), Edge(0, 1, 5), Edge(0, 2, 5)]
    assert kruskal(3, edges) == edges[:2]


def test_input_not_mutated():
    edges = [Edge(0, 1, 9), Edge(1, 2, 1)]
    copy = list(edges)
    kruskal(3, edges)
    assert edges == copy


def test_total_weight_empty():
    assert total_weight([]) == 0