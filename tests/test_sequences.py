"""Tests for graphictools.sequences."""
from itertools import product

import networkx as nx
import pytest

from graphictools.graph import degree_pairs, degree_sequence
from graphictools.sequences import (
    DirectedDegreeState,
    build_directed_graph,
    build_undirected_graph,
    directed_greedy_edges,
    havel_hakimi_edges,
    is_graphic_directed,
    is_graphic_undirected,
)


def _is_simple(G) -> bool:
    seen = set()
    for s, t in G.edges:
        if s == t:
            return False
        key = (s, t) if G.directed else frozenset((s, t))
        if key in seen:
            return False
        seen.add(key)
    return True


# --- undirected validity ---

@pytest.mark.parametrize("seq", [[1], [1, 1, 1], [3, 2, 2], [5, 4, 3, 2, 1, 0]])
def test_odd_sum_is_not_graphic(seq):
    assert sum(seq) % 2 == 1
    assert is_graphic_undirected(seq) is False


def test_graphic_3322():
    assert is_graphic_undirected([3, 3, 2, 2]) is True


def test_single_vertex_degree_one():
    assert is_graphic_undirected([1]) is False


def test_empty_sequence_is_graphic():
    assert is_graphic_undirected([]) is True


def test_all_zero_is_graphic():
    assert is_graphic_undirected([0, 0, 0]) is True


def test_degree_too_large():
    # even sum, but 4 needs four neighbours with spare degree
    assert is_graphic_undirected([4, 4, 4, 1, 1]) is False
    assert is_graphic_undirected([3, 3, 0, 0]) is False


def test_negative_degree_is_not_graphic():
    assert is_graphic_undirected([-1, 1, 1]) is False
    assert is_graphic_undirected([2, -2]) is False


def test_unsorted_input():
    assert is_graphic_undirected([2, 3, 2, 3]) is True


def test_matches_networkx_havel_hakimi():
    for n in range(0, 6):
        for seq in product(range(5), repeat=n):
            seq = list(seq)
            assert is_graphic_undirected(seq) == nx.is_valid_degree_sequence_havel_hakimi(seq), seq


# --- undirected construction ---

def test_build_3322():
    G = build_undirected_graph([3, 3, 2, 2])
    assert G is not None
    assert G.nodes == ("v1", "v2", "v3", "v4")
    assert G.directed is False
    assert degree_sequence(G) == [3, 3, 2, 2]
    assert list(G.edges) == [
        ("v1", "v2"),
        ("v1", "v3"),
        ("v1", "v4"),
        ("v2", "v3"),
        ("v2", "v4"),
    ]


def test_build_complete_k6():
    G = build_undirected_graph([5, 5, 5, 5, 5, 5])
    assert G is not None
    assert G.number_of_nodes() == 6
    assert G.number_of_edges() == 15
    pairs = {frozenset(e) for e in G.edges}
    expected = {frozenset((f"v{i}", f"v{j}")) for i in range(1, 7) for j in range(i + 1, 7)}
    assert pairs == expected


def test_build_ties_follow_input_order():
    # after v1 takes v2 and v3, v2 and v4 are left with degree 1
    G = build_undirected_graph([2, 2, 1, 1])
    assert list(G.edges) == [("v1", "v2"), ("v1", "v3"), ("v2", "v4")]


def test_build_keeps_isolated_vertices():
    G = build_undirected_graph([1, 0, 1])
    assert G.nodes == ("v1", "v2", "v3")
    assert list(G.edges) == [("v1", "v3")]


def test_build_empty():
    G = build_undirected_graph([])
    assert G is not None
    assert G.number_of_nodes() == 0
    assert G.number_of_edges() == 0


def test_build_rejects_non_graphic():
    assert build_undirected_graph([1]) is None
    assert build_undirected_graph([3, 3, 1, 1]) is None


def test_build_realizes_every_graphic_sequence():
    for n in range(1, 6):
        for seq in product(range(n), repeat=n):
            seq = list(seq)
            G = build_undirected_graph(seq)
            if G is None:
                assert not is_graphic_undirected(seq)
                continue
            assert degree_sequence(G) == seq
            assert _is_simple(G)


def test_havel_hakimi_edges_are_indices():
    assert havel_hakimi_edges([1, 1]) == [(0, 1)]
    assert havel_hakimi_edges([2, 0]) is None


# --- idempotence ---

def test_inputs_are_not_mutated():
    seq = [2, 3, 3, 2]
    before = list(seq)
    G1 = build_undirected_graph(seq)
    G2 = build_undirected_graph(seq)
    assert seq == before
    assert G1 == G2
    assert is_graphic_undirected(seq) == is_graphic_undirected(seq)

    ins, outs = [2, 1, 1], [1, 2, 1]
    D1 = build_directed_graph(ins, outs)
    D2 = build_directed_graph(ins, outs)
    assert (ins, outs) == ([2, 1, 1], [1, 2, 1])
    assert D1 == D2


def test_tuple_input_accepted():
    assert build_undirected_graph((1, 1)).edges == (("v1", "v2"),)


# --- directed validity ---

def test_directed_211_121():
    assert is_graphic_directed([2, 1, 1], [1, 2, 1]) is True


def test_directed_out_degree_too_large():
    assert is_graphic_directed([1, 1], [2, 0]) is False


def test_directed_length_mismatch():
    assert is_graphic_directed([1, 1], [1, 1, 0]) is False


def test_directed_sum_mismatch():
    assert is_graphic_directed([1, 1, 1], [1, 1, 0]) is False


def test_directed_negative():
    assert is_graphic_directed([-1, 1], [0, 0]) is False


def test_directed_empty():
    assert is_graphic_directed([], []) is True


def test_directed_two_cycle():
    assert is_graphic_directed([1, 1], [1, 1]) is True
    assert is_graphic_directed([1, 1], [1, 1], forbid_antiparallel=True) is False


def test_directed_211_121_needs_antiparallel_pair():
    # v1 must receive from both other vertices and send to one of them
    assert is_graphic_directed([2, 1, 1], [1, 2, 1], forbid_antiparallel=True) is False


def test_directed_oriented_cycle():
    assert is_graphic_directed([1, 1, 1], [1, 1, 1], forbid_antiparallel=True) is True


def test_directed_matches_networkx():
    for n in range(0, 4):
        for ins in product(range(3), repeat=n):
            for outs in product(range(3), repeat=n):
                expected = nx.is_digraphical(list(ins), list(outs))
                assert is_graphic_directed(list(ins), list(outs)) == expected, (ins, outs)


# --- directed construction ---

def test_build_directed_211_121():
    D = build_directed_graph([2, 1, 1], [1, 2, 1])
    assert D is not None
    assert D.directed is True
    assert degree_pairs(D) == ([2, 1, 1], [1, 2, 1])
    assert list(D.edges) == [
        ("v2", "v1"),
        ("v2", "v3"),
        ("v1", "v2"),
        ("v3", "v1"),
    ]


def test_build_directed_cycle_oriented():
    D = build_directed_graph([1, 1, 1], [1, 1, 1], forbid_antiparallel=True)
    assert list(D.edges) == [("v1", "v2"), ("v2", "v3"), ("v3", "v1")]


def test_build_directed_rejects():
    assert build_directed_graph([1, 1], [2, 0]) is None
    assert build_directed_graph([1, 1], [1, 1], forbid_antiparallel=True) is None


def test_build_directed_realizes_every_accepted_pair():
    for n in range(1, 4):
        for ins in product(range(3), repeat=n):
            for outs in product(range(3), repeat=n):
                for oriented in (False, True):
                    D = build_directed_graph(list(ins), list(outs), forbid_antiparallel=oriented)
                    valid = is_graphic_directed(list(ins), list(outs), forbid_antiparallel=oriented)
                    assert (D is not None) == valid
                    if D is None:
                        continue
                    assert degree_pairs(D) == (list(ins), list(outs))
                    assert _is_simple(D)
                    if oriented:
                        assert not any((t, s) in set(D.edges) for s, t in D.edges)


def test_directed_greedy_edges_indices():
    assert directed_greedy_edges([0, 1], [1, 0]) == [(0, 1)]


# --- state object ---

def test_directed_state_fresh_copies():
    ins, outs = [1, 0], [0, 1]
    st = DirectedDegreeState.fresh(ins, outs)
    st.remaining_in[0] = 5
    assert ins == [1, 0]
    assert st.adjacency == [[False, False], [False, False]]


def test_directed_state_blocked():
    st = DirectedDegreeState.fresh([0, 0], [0, 0])
    st.adjacency[0][1] = True
    assert st.blocked(0, 1) is True
    assert st.blocked(1, 0) is False
    st2 = DirectedDegreeState.fresh([0, 0], [0, 0], forbid_antiparallel=True)
    st2.adjacency[0][1] = True
    assert st2.blocked(1, 0) is True
