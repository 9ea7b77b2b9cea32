"""Clique enumeration on undirected graphs.

Both searches walk candidates in node order, so the output order is a
deterministic function of the graph. Each clique is a tuple of node
labels listed in node order.
"""
from __future__ import annotations

from typing import List, Tuple

from graphictools.graph import Graph

Clique = Tuple[str, ...]


def _undirected_adjacency(graph: Graph) -> list[list[bool]]:
    if graph.directed:
        raise ValueError("clique search is only defined for undirected graphs")
    return graph.adjacency_matrix(directed=False)


def all_cliques(graph: Graph) -> List[Clique]:
    """
    Every non-empty clique, singletons included, each exactly once.

    Depth-first: report the current clique, then extend it by each
    candidate v in turn, keeping only later candidates adjacent to v.
    The count is exponential in the worst case (2^n - 1 for K_n).
    """
    adj = _undirected_adjacency(graph)
    out: List[Clique] = []

    def extend(clique: list[int], candidates: list[int]) -> None:
        if clique:
            out.append(tuple(graph.nodes[i] for i in clique))
        for pos, v in enumerate(candidates):
            pruned = [u for u in candidates[pos + 1:] if adj[v][u]]
            extend(clique + [v], pruned)

    extend([], list(range(graph.number_of_nodes())))
    return out


def maximal_cliques(graph: Graph) -> List[Clique]:
    """
    Cliques not contained in any larger clique (Bron-Kerbosch, no pivot).

    P holds candidates that extend the current clique R, X those already
    tried. R is reported when both are empty. After the branch on v
    returns, v moves from P to X.
    """
    adj = _undirected_adjacency(graph)
    out: List[Clique] = []

    def bron_kerbosch(r: list[int], p: list[int], x: list[int]) -> None:
        if not p and not x:
            if r:
                out.append(tuple(graph.nodes[i] for i in sorted(r)))
            return
        p = list(p)
        x = list(x)
        while p:
            v = p[0]
            bron_kerbosch(
                r + [v],
                [u for u in p if adj[v][u]],
                [u for u in x if adj[v][u]],
            )
            p.pop(0)
            x.append(v)

    bron_kerbosch([], list(range(graph.number_of_nodes())), [])
    return out


def maximum_clique(graph: Graph) -> Clique:
    """A largest clique (the first found on ties); () for the empty graph."""
    best: Clique = ()
    for c in maximal_cliques(graph):
        if len(c) > len(best):
            best = c
    return best


def clique_number(graph: Graph) -> int:
    return len(maximum_clique(graph))
