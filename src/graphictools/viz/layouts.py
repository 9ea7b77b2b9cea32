from __future__ import annotations

import networkx as nx

from graphictools.graph import Graph


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Choose a reasonable base layout:
      - planar_layout if the (undirected) graph is planar
      - otherwise spring_layout
    """
    if G.number_of_nodes() == 0:
        return {}
    is_planar, _ = nx.check_planarity(G.to_undirected(as_view=True))
    if is_planar:
        return nx.planar_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)


def layout_line_graph_from_base(
    graph: Graph,
    pos_base: dict,
    L: Graph,
    L_nx: nx.Graph,
    seed: int = 7,
    iterations: int = 150,
):
    """
    Place vertex i of L(G) at the midpoint of edge i of G, then refine
    with a few spring iterations.

    Relies on line_graph() listing its vertices in the edge order of G.
    """
    if L.number_of_nodes() == 0:
        return {}
    init = {}
    for label, (u, v) in zip(L.nodes, graph.edges):
        init[label] = 0.5 * (pos_base[u] + pos_base[v])
    return nx.spring_layout(L_nx, seed=seed, pos=init, iterations=iterations)
