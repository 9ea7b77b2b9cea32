from __future__ import annotations

from graphictools.graph import Graph, degree_sequence
from graphictools.utils.connectivity import is_connected


def describe_graph(graph: Graph) -> str:
    """Human-readable description of a small realized graph.

    Returns recognizable names for common structures (K{n}, P{n}, C{n},
    K1,{r}) and a generic descriptor with vertex/edge counts for
    everything else. Isolated vertices count towards n, so the graph
    realized from [1, 1, 0] is "Graph(3v,1e)", not "K2".
    """
    n = graph.number_of_nodes()
    m = graph.number_of_edges()
    if graph.directed:
        return f"Digraph({n}v,{m}e)"
    if n == 0:
        return "empty"

    deg_seq = sorted(degree_sequence(graph), reverse=True)

    if m == n * (n - 1) // 2:
        return f"K{n}"

    if min(deg_seq) == 0:
        return f"Graph({n}v,{m}e)"

    if m == n - 1 and is_connected(graph):
        if all(d <= 2 for d in deg_seq):
            return f"P{n}"
        if deg_seq.count(1) == n - 1:
            return f"K1,{n - 1}"
        ds_str = "".join(str(d) for d in deg_seq)
        return f"Tree({n}v,{ds_str})"

    if m == n and all(d == 2 for d in deg_seq) and is_connected(graph):
        return f"C{n}"

    return f"Graph({n}v,{m}e)"