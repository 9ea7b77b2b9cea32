from __future__ import annotations

import networkx as nx

from graphictools.graph import Graph


def graph_to_nx(graph: Graph) -> nx.Graph:
    """
    Convert to a NetworkX Graph (or DiGraph for directed graphs).

    Node insertion order and edge insertion order are preserved.
    """
    G = nx.DiGraph() if graph.directed else nx.Graph()
    G.add_nodes_from(graph.nodes)
    G.add_edges_from(graph.edges)
    return G


def nx_to_graph(G: nx.Graph) -> Graph:
    """
    Convert a simple NetworkX graph; node names become str labels.

    Multigraphs and self-loops are rejected with ValueError.
    """
    if isinstance(G, (nx.MultiGraph, nx.MultiDiGraph)):
        raise ValueError("multigraphs are not supported")
    if nx.number_of_selfloops(G) > 0:
        raise ValueError("self-loops are not supported")
    nodes = tuple(str(v) for v in G.nodes())
    edges = tuple((str(u), str(v)) for u, v in G.edges())
    return Graph(nodes=nodes, edges=edges, directed=G.is_directed())


def graph_to_g6(graph: Graph) -> str:
    """graph6 string of an undirected graph (vertices in node order)."""
    if graph.directed:
        raise ValueError("graph6 encodes undirected graphs only")
    G = nx.Graph()
    G.add_nodes_from(range(graph.number_of_nodes()))
    G.add_edges_from(graph.index_edges())
    return nx.to_graph6_bytes(G, header=False).decode("ascii").strip()
