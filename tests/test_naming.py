"""Tests for graphictools.utils.naming."""
from graphictools.graph import empty_graph
from graphictools.sequences import build_directed_graph, build_undirected_graph
from graphictools.utils.naming import describe_graph


def _name(seq):
    return describe_graph(build_undirected_graph(seq))


def test_describe_complete():
    assert _name([5, 5, 5, 5, 5, 5]) == "K6"
    assert _name([2, 2, 2]) == "K3"
    assert _name([0]) == "K1"


def test_describe_path():
    assert _name([1, 2, 1]) == "P3"


def test_describe_star():
    assert _name([3, 1, 1, 1]) == "K1,3"


def test_describe_cycle():
    assert _name([2, 2, 2, 2]) == "C4"


def test_describe_two_triangles_is_not_a_cycle():
    # Havel-Hakimi realizes 2,2,2,2,2,2 as two disjoint triangles
    assert _name([2, 2, 2, 2, 2, 2]) == "Graph(6v,6e)"


def test_describe_isolated_vertex():
    assert _name([1, 1, 0]) == "Graph(3v,1e)"


def test_describe_matching():
    assert _name([1, 1, 1, 1]) == "Graph(4v,2e)"


def test_describe_empty():
    assert describe_graph(empty_graph()) == "empty"


def test_describe_directed():
    assert describe_graph(build_directed_graph([2, 1, 1], [1, 2, 1])) == "Digraph(3v,4e)"
