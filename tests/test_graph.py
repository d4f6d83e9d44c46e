import numpy as np
import pytest

from treemerge.errors import InvalidArgument
from treemerge.mst import minimum_spanning_tree, spanning_forest, total_weight
from treemerge.structures.graph import Graph


def graph_nodes(edges):
    nodes = set()
    for u, v, *_ in edges:
        nodes.add(u)
        nodes.add(v)
    return nodes


def edge_set(edges):
    return {frozenset(e) for e in edges}


def assert_minimum_spanning_tree(edges, result):
    ret = minimum_spanning_tree(edges)
    assert graph_nodes(ret) == graph_nodes(edges)
    assert edge_set(ret) == edge_set(result)


def test_minimum_spanning_tree():
    assert minimum_spanning_tree([]) == []
    assert minimum_spanning_tree([(1, 1)]) == []

    edges = [(1, 2, 3), (2, 3, 1), (3, 4, 4), (1, 4, 2)]
    assert_minimum_spanning_tree(edges, [(1, 2), (1, 4), (2, 3)])

    edges = [(1, 2, 1), (3, 4, 1)]
    assert_minimum_spanning_tree(edges, [(1, 2), (3, 4)])

    edges = [(1, 2, 1), (2, 3, 1), (1, 3, 1)]
    assert edge_set(minimum_spanning_tree(edges)) in [
        edge_set([(1, 2), (2, 3)]),
        edge_set([(1, 3), (2, 3)]),
        edge_set([(1, 2), (1, 3)])
    ]


def test_minimum_spanning_tree2():
    edges = [(1, 2, 4), (1, 3, 1), (2, 3, 3), (2, 4, 2), (3, 4, 5), (3, 5, 6),
             (4, 5, 7)]
    assert_minimum_spanning_tree(edges, [(1, 3), (2, 4), (2, 3), (3, 5)])


def test_minimum_spanning_tree3():
    edges = [(1, 2, 7), (1, 3, 9), (1, 6, 14), (2, 3, 10), (2, 4, 15),
             (3, 4, 11), (3, 6, 2), (4, 5, 6), (5, 6, 9)]
    assert_minimum_spanning_tree(edges, [(3, 6), (4, 5), (1, 2), (1, 3),
                                         (5, 6)])


@pytest.mark.parametrize('strategy', ['drain', 'concat'])
def test_minimum_spanning_tree4(strategy):
    edges = [(1, 2, 1), (1, 2, 2), (2, 3, 1), (2, 3, 2), (3, 4, 1), (3, 4, 3)]
    assert edge_set(minimum_spanning_tree(edges, strategy)) == edge_set(
        [(1, 2), (2, 3), (3, 4)])
    arcs, _ = spanning_forest(Graph.from_edges(edges), strategy)
    assert total_weight(arcs) == 3


def test_minimum_spanning_tree5():
    edges = [(1, 2, 1), (2, 3, 2), (4, 5, 3), (5, 6, 4)]
    assert_minimum_spanning_tree(edges, [(1, 2), (2, 3), (4, 5), (5, 6)])


def test_unweighted_edges():
    edges = [('a', 'b'), ('b', 'c'), ('c', 'a')]
    arcs, ptlist = spanning_forest(Graph.from_edges(edges))
    assert len(arcs) == 2
    assert total_weight(arcs) == 2
    assert ptlist.size() == 1


def test_spanning_forest_leaves_one_tree_per_component():
    g = Graph.from_edges([(1, 2, 1), (3, 4, 1), (5, 6, 1)])
    g.add_vertex(7)
    arcs, ptlist = spanning_forest(g)
    assert len(arcs) == 3
    assert ptlist.size() == 4


def test_add_edge_is_undirected():
    g = Graph()
    g.add_edge('A', 'B', 5)
    a, b = g.vertex('A'), g.vertex('B')
    assert [(n.vertex, n.weight) for n in a.neighbors] == [(b, 5)]
    assert [(n.vertex, n.weight) for n in b.neighbors] == [(a, 5)]
    assert 'A' in g and 'C' not in g
    assert len(g) == 2
    assert list(g) == [a, b]
    assert list(g.edges()) == [('A', 'B', 5)]


def test_self_loop_edge_once():
    g = Graph.from_edges([('A', 'A', 2)])
    assert len(g.vertex('A').neighbors) == 1
    assert list(g.edges()) == [('A', 'A', 2)]


def test_duplicate_vertex():
    g = Graph()
    g.add_vertex('A')
    with pytest.raises(InvalidArgument):
        g.add_vertex('A')
    with pytest.raises(KeyError):
        g.vertex('B')


def test_bad_edge_tuple():
    with pytest.raises(InvalidArgument):
        Graph.from_edges([(1, 2, 3, 4)])


def test_from_matrix():
    m = np.array([[0, 1, 5],
                  [1, 0, 2],
                  [5, 2, 0]])
    g = Graph.from_matrix(m, names=['A', 'B', 'C'])
    assert [v.name for v in g] == ['A', 'B', 'C']
    assert sorted(g.edges()) == [('A', 'B', 1), ('A', 'C', 5), ('B', 'C', 2)]
    arcs, _ = spanning_forest(g)
    assert total_weight(arcs) == 3


def test_from_matrix_default_names():
    g = Graph.from_matrix([[0, 2.5], [2.5, 0]])
    assert [v.name for v in g] == [0, 1]
    assert list(g.edges()) == [(0, 1, 2.5)]


@pytest.mark.parametrize('matrix', [
    np.zeros((2, 3)),
    np.zeros(4),
    np.array([[0, 1], [2, 0]]),
])
def test_from_matrix_invalid(matrix):
    with pytest.raises(InvalidArgument):
        Graph.from_matrix(matrix)


def test_from_matrix_wrong_names():
    with pytest.raises(InvalidArgument):
        Graph.from_matrix(np.zeros((2, 2)), names=['A'])
