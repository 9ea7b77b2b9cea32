from __future__ import annotations

from collections import defaultdict
from typing import Optional

from graphictools.graph import Graph, edge_label


def line_graph_index_edges(graph: Graph, directed: bool) -> list[tuple[int, int]]:
    """
    Line-graph adjacency on edge indices.

    Undirected: {i, j} for every pair of edges sharing an endpoint,
    emitted once as (i, j) with i < j.
    Directed: (i, j) whenever edge i's target is edge j's source.

    Returns a sorted list of pairs.
    """
    eds = graph.index_edges()
    new_edges: set[tuple[int, int]] = set()

    if directed:
        leaving: dict[int, list[int]] = defaultdict(list)
        for j, (s, _t) in enumerate(eds):
            leaving[s].append(j)
        for i, (_s, t) in enumerate(eds):
            for j in leaving[t]:
                if i != j:
                    new_edges.add((i, j))
        return sorted(new_edges)

    incident: dict[int, list[int]] = defaultdict(list)
    for idx, (u, v) in enumerate(eds):
        incident[u].append(idx)
        incident[v].append(idx)
    for inc in incident.values():
        # clique among edges incident to this vertex
        for a in range(len(inc)):
            for b in range(a + 1, len(inc)):
                i, j = inc[a], inc[b]
                new_edges.add((i, j) if i < j else (j, i))
    return sorted(new_edges)


def line_graph(graph: Graph, directed: Optional[bool] = None) -> Graph:
    """
    Line graph L(G): one vertex per edge of G, labeled e{i}[source,target].

    Two vertices are joined iff their edges share an endpoint
    (undirected), or iff the first edge ends where the second begins
    (directed; the result is directed too and is never symmetrized).
    """
    if directed is None:
        directed = graph.directed
    nodes = tuple(edge_label(i, e) for i, e in enumerate(graph.edges))
    links = tuple(
        (nodes[i], nodes[j]) for i, j in line_graph_index_edges(graph, directed)
    )
    return Graph(nodes=nodes, edges=links, directed=directed)
